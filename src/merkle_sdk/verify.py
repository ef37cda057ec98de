import logging
from typing import Any, Union

from pydantic import ValidationError

from merkle_engine.errors import MalformedProof
from merkle_engine.hasher import DEFAULT_ALGORITHM, Hasher
from merkle_engine.merkle import verify_proof
from merkle_engine.models import ProofEntry
from merkle_engine.proof import load_proof

logger = logging.getLogger(__name__)


def verify_proof_json(
    data: Union[str, bytes],
    proof_json: Union[str, bytes],
    expected_root: Any,
    hash_algorithm: str = DEFAULT_ALGORITHM,
) -> bool:
    """Return True if a serialized inclusion proof links ``data`` to ``expected_root``.

    Intended for proofs that arrive from an untrusted source: undecodable
    JSON, a wrong shape, a bad orientation or a bad sibling digest all yield
    False instead of raising.
    """
    try:
        proof = load_proof(proof_json, hash_algorithm)
    except MalformedProof as e:
        logger.warning("rejecting serialized proof: %s", e)
        return False
    return verify_proof(data, proof, expected_root, hash_algorithm)


def verify_proof_entry(
    data: Union[str, bytes],
    entry_json: Union[str, bytes],
    expected_root: Any,
    hash_algorithm: str = DEFAULT_ALGORITHM,
) -> bool:
    """Verify one serialized ``{index, leaf_digest, proof}`` entry.

    The entry's leaf digest must equal the hash of ``data`` as well as the
    proof reconstructing the root.
    """
    try:
        entry = ProofEntry.model_validate_json(entry_json)
    except ValidationError as e:
        logger.warning("rejecting serialized proof entry: %s", e.errors()[0]["msg"])
        return False
    if Hasher(hash_algorithm).hash(data) != entry.leaf_digest:
        return False
    return verify_proof(data, entry.proof, expected_root, hash_algorithm)
