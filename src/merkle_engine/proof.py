from __future__ import annotations
import json
from collections.abc import Mapping, Sequence
from typing import Any, Dict, List, Union

import rfc8785
from pydantic import ValidationError

from .errors import MalformedProof
from .hasher import DEFAULT_ALGORITHM, Hasher
from .models import ProofStep


def _hasher(hash_algorithm: Union[str, Hasher]) -> Hasher:
    if isinstance(hash_algorithm, Hasher):
        return hash_algorithm
    return Hasher(hash_algorithm)


def _as_step(raw: Any, position: int) -> ProofStep:
    if isinstance(raw, ProofStep):
        return raw
    if isinstance(raw, Mapping):
        fields = raw
    elif isinstance(raw, Sequence) and not isinstance(raw, (str, bytes, bytearray)):
        if len(raw) != 2:
            raise MalformedProof(
                f"step {position}: expected (sibling_digest, orientation), got {len(raw)} items"
            )
        fields = {"sibling_digest": raw[0], "orientation": raw[1]}
    else:
        raise MalformedProof(f"step {position}: unsupported step type {type(raw).__name__}")
    try:
        return ProofStep.model_validate(fields)
    except ValidationError as e:
        raise MalformedProof(f"step {position}: {e.errors()[0]['msg']}") from e


def parse_proof(
    raw: Any, hash_algorithm: Union[str, Hasher] = DEFAULT_ALGORITHM
) -> List[ProofStep]:
    """Normalize and validate a proof, raising MalformedProof on bad structure.

    Steps may be ProofStep models, mappings, or 2-item (digest, orientation)
    sequences. Every sibling digest must be lowercase hex of the algorithm's
    digest length.
    """
    hasher = _hasher(hash_algorithm)
    if isinstance(raw, (str, bytes, bytearray, Mapping)) or not isinstance(raw, Sequence):
        raise MalformedProof(f"proof must be a list of steps, got {type(raw).__name__}")
    steps = []
    for i, item in enumerate(raw):
        step = _as_step(item, i)
        if not hasher.is_digest(step.sibling_digest):
            raise MalformedProof(
                f"step {i}: sibling digest is not a {hasher.hex_length}-char lowercase "
                f"{hasher.algorithm} hex digest"
            )
        steps.append(step)
    return steps


def proof_to_list(proof: List[ProofStep]) -> List[Dict[str, str]]:
    return [step.model_dump(mode="json") for step in proof]


def dump_proof(proof: List[ProofStep]) -> bytes:
    """Canonical JSON bytes per RFC8785."""
    return rfc8785.dumps(proof_to_list(proof))


def load_proof(
    raw: Union[str, bytes], hash_algorithm: Union[str, Hasher] = DEFAULT_ALGORITHM
) -> List[ProofStep]:
    try:
        obj = json.loads(raw)
    except (TypeError, ValueError, RecursionError) as e:
        raise MalformedProof("proof is not valid JSON") from e
    return parse_proof(obj, hash_algorithm)
