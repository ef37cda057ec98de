from __future__ import annotations


class MerkleError(Exception):
    """Base class for all Merkle engine failures."""


class EmptyInput(MerkleError, ValueError):
    """Tree construction attempted with zero items."""


class IndexOutOfRange(MerkleError, IndexError):
    """Proof requested for a leaf index outside [0, leaf_count)."""


class UnsupportedAlgorithm(MerkleError, ValueError):
    """Hash algorithm selector names nothing the engine provides."""


class MalformedProof(MerkleError, ValueError):
    """Proof step with an unknown orientation or a badly formed sibling digest."""
