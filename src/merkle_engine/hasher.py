from __future__ import annotations
import hashlib
import re
from typing import FrozenSet, Union

from .errors import UnsupportedAlgorithm

DEFAULT_ALGORITHM = "sha256"

# Fixed-output algorithms only; shake_* would need an explicit length.
SUPPORTED_ALGORITHMS: FrozenSet[str] = frozenset(
    {
        "sha224",
        "sha256",
        "sha384",
        "sha512",
        "sha3_224",
        "sha3_256",
        "sha3_384",
        "sha3_512",
        "blake2b",
        "blake2s",
    }
)

_HEX = re.compile(r"[0-9a-f]+")

Data = Union[str, bytes, bytearray, memoryview]


def _to_bytes(data: Data) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"cannot hash {type(data).__name__}; expected str or bytes")


def resolve_algorithm(name: str) -> str:
    """Normalize an algorithm selector, raising UnsupportedAlgorithm if unknown."""
    if not isinstance(name, str):
        raise UnsupportedAlgorithm(f"hash algorithm must be a name, got {name!r}")
    key = name.strip().lower()
    if key not in SUPPORTED_ALGORITHMS:
        raise UnsupportedAlgorithm(
            f"unsupported hash algorithm: {name!r} "
            f"(choose one of {', '.join(sorted(SUPPORTED_ALGORITHMS))})"
        )
    return key


class Hasher:
    """One-way hash over text or bytes producing lowercase hex digests."""

    def __init__(self, algorithm: str = DEFAULT_ALGORITHM):
        self.algorithm = resolve_algorithm(algorithm)
        self.digest_size = hashlib.new(self.algorithm).digest_size

    @property
    def hex_length(self) -> int:
        return self.digest_size * 2

    def hash(self, data: Data) -> str:
        return hashlib.new(self.algorithm, _to_bytes(data)).hexdigest()

    def hash_pair(self, left: str, right: str) -> str:
        """Hash the concatenation of two hex digests, left then right."""
        return self.hash(left + right)

    def is_digest(self, value: object) -> bool:
        return (
            isinstance(value, str)
            and len(value) == self.hex_length
            and _HEX.fullmatch(value) is not None
        )

    def __repr__(self) -> str:
        return f"Hasher({self.algorithm!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hasher):
            return NotImplemented
        return self.algorithm == other.algorithm

    def __hash__(self) -> int:
        return hash(self.algorithm)
