from __future__ import annotations
from enum import Enum
from typing import List

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from .hasher import DEFAULT_ALGORITHM


class Orientation(str, Enum):
    """Side the sibling occupies relative to the hash being rebuilt."""

    LEFT = "left"
    RIGHT = "right"


class ProofStep(BaseModel):
    """One level of an inclusion proof.

    Accepts the camelCase keys (``siblingHash`` / ``position``) used by
    JavaScript Merkle tooling when validating from a mapping, but always
    serializes with the snake_case field names.
    """

    model_config = ConfigDict(frozen=True)

    sibling_digest: str = Field(
        validation_alias=AliasChoices("sibling_digest", "siblingHash")
    )
    orientation: Orientation = Field(
        validation_alias=AliasChoices("orientation", "position")
    )


Proof = List[ProofStep]


class ProofEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    index: int
    leaf_digest: str
    proof: List[ProofStep] = Field(default_factory=list)


class TreeConfig(BaseModel):
    """Per-tree configuration; ``hash_algorithm`` is the only option."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    hash_algorithm: str = Field(
        default=DEFAULT_ALGORITHM,
        validation_alias=AliasChoices("hash_algorithm", "hashAlgorithm"),
    )
