from __future__ import annotations
import hmac
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Tuple, Union

from .errors import EmptyInput, IndexOutOfRange, MalformedProof
from .hasher import DEFAULT_ALGORITHM, Data, Hasher
from .models import Orientation, ProofEntry, ProofStep, TreeConfig
from .proof import parse_proof

logger = logging.getLogger(__name__)

Config = Union[TreeConfig, Mapping, None]


def _config(config: Config) -> TreeConfig:
    if config is None:
        return TreeConfig()
    if isinstance(config, TreeConfig):
        return config
    return TreeConfig.model_validate(dict(config))


def _grow(leaves: List[str], hasher: Hasher) -> Tuple[Tuple[str, ...], ...]:
    lvl = list(leaves)
    levels = [tuple(lvl)]
    while len(lvl) > 1:
        nxt = []
        for i in range(0, len(lvl), 2):
            a = lvl[i]
            b = lvl[i + 1] if i + 1 < len(lvl) else lvl[i]  # duplicate last if odd
            nxt.append(hasher.hash_pair(a, b))
        levels.append(tuple(nxt))
        lvl = nxt
    return tuple(levels)


def _digests_equal(computed: str, expected: Any) -> bool:
    if isinstance(expected, str):
        expected_b = expected.encode("utf-8", "surrogatepass")
    elif isinstance(expected, (bytes, bytearray, memoryview)):
        expected_b = bytes(expected)
    else:
        return False
    return hmac.compare_digest(computed.encode("ascii"), expected_b)


def _verify(hasher: Hasher, data: Data, proof: Any, expected_root: Any) -> bool:
    try:
        steps = parse_proof(proof, hasher)
    except MalformedProof as e:
        logger.warning("rejecting malformed proof: %s", e)
        return False
    h = hasher.hash(data)
    for step in steps:
        if step.orientation is Orientation.LEFT:
            h = hasher.hash_pair(step.sibling_digest, h)
        else:
            h = hasher.hash_pair(h, step.sibling_digest)
    return _digests_equal(h, expected_root)


def verify_proof(
    data: Data,
    proof: Any,
    expected_root: Any,
    hash_algorithm: str = DEFAULT_ALGORITHM,
) -> bool:
    """Check that ``data`` plus ``proof`` rebuilds ``expected_root``.

    Returns False for tampered data, a wrong root, or a structurally invalid
    proof; never raises on proof content. An unknown ``hash_algorithm`` is a
    caller error and raises UnsupportedAlgorithm.
    """
    return _verify(Hasher(hash_algorithm), data, proof, expected_root)


@dataclass(frozen=True)
class MerkleTree:
    """Immutable binary hash tree; level 0 holds the leaves, the last level the root.

    Build with :meth:`build` (raw items) or :meth:`from_leaves` (precomputed
    digests). The last node of an odd-length level is paired with itself.
    """

    hasher: Hasher
    level_digests: Tuple[Tuple[str, ...], ...]

    @classmethod
    def build(cls, items: Iterable[Data], config: Config = None) -> "MerkleTree":
        if isinstance(items, (str, bytes, bytearray)):
            raise TypeError("items must be a sequence of items, not a single str/bytes")
        hasher = Hasher(_config(config).hash_algorithm)
        items = list(items)
        if not items:
            raise EmptyInput("cannot build a Merkle tree from zero items")
        return cls._from_digests([hasher.hash(x) for x in items], hasher)

    @classmethod
    def from_leaves(cls, leaves: Iterable[str], config: Config = None) -> "MerkleTree":
        hasher = Hasher(_config(config).hash_algorithm)
        leaves = list(leaves)
        if not leaves:
            raise EmptyInput("cannot build a Merkle tree from zero leaves")
        for i, leaf in enumerate(leaves):
            if not hasher.is_digest(leaf):
                raise ValueError(f"leaf {i} is not a {hasher.algorithm} hex digest")
        return cls._from_digests(leaves, hasher)

    @classmethod
    def _from_digests(cls, leaves: List[str], hasher: Hasher) -> "MerkleTree":
        tree = cls(hasher, _grow(leaves, hasher))
        logger.debug(
            "built merkle tree: leaves=%d depth=%d algorithm=%s root=%s",
            tree.leaf_count,
            tree.depth,
            hasher.algorithm,
            tree.root,
        )
        return tree

    @property
    def hash_algorithm(self) -> str:
        return self.hasher.algorithm

    @property
    def root(self) -> str:
        return self.level_digests[-1][0]

    @property
    def depth(self) -> int:
        return len(self.level_digests) - 1

    @property
    def leaves(self) -> Tuple[str, ...]:
        return self.level_digests[0]

    @property
    def leaf_count(self) -> int:
        return len(self.level_digests[0])

    def levels(self) -> List[List[str]]:
        """Independent copy of every level, leaves first."""
        return [list(level) for level in self.level_digests]

    def generate_proof(self, index: int) -> List[ProofStep]:
        """Return (sibling, orientation) steps from leaf to root.

        The unpaired tail of an odd level gets its own digest as a right-hand
        sibling, mirroring the duplication done while building.
        """
        if isinstance(index, bool) or not isinstance(index, int):
            raise IndexOutOfRange(f"leaf index must be an int, got {index!r}")
        if not 0 <= index < self.leaf_count:
            raise IndexOutOfRange(
                f"leaf index {index} out of range (0-{self.leaf_count - 1})"
            )
        proof = []
        idx = index
        for level in self.level_digests[:-1]:
            is_right = idx % 2 == 1
            sibling_idx = idx - 1 if is_right else idx + 1
            if sibling_idx < len(level):
                sibling = level[sibling_idx]
            else:
                sibling = level[idx]
            proof.append(
                ProofStep(
                    sibling_digest=sibling,
                    orientation=Orientation.LEFT if is_right else Orientation.RIGHT,
                )
            )
            idx //= 2
        return proof

    def verify_proof(self, data: Data, proof: Any, expected_root: Optional[Any] = None) -> bool:
        """Verify with this tree's algorithm; ``expected_root`` defaults to :attr:`root`."""
        root = self.root if expected_root is None else expected_root
        return _verify(self.hasher, data, proof, root)

    def generate_all_proofs(self) -> List[ProofEntry]:
        return [
            ProofEntry(index=i, leaf_digest=leaf, proof=self.generate_proof(i))
            for i, leaf in enumerate(self.leaves)
        ]

    # get_* accessor spellings
    def get_root(self) -> str:
        return self.root

    def get_tree_depth(self) -> int:
        return self.depth

    def get_leaf_count(self) -> int:
        return self.leaf_count

    def get_tree_levels(self) -> List[List[str]]:
        return self.levels()
