"""Inclusion proof fuzzing with mutated proofs and mutated data."""
from __future__ import annotations
import atheris
import sys
import random

with atheris.instrument_imports():
    from merkle_engine.merkle import MerkleTree
    from merkle_engine.models import ProofStep


def TestOneInput(data: bytes):  # noqa: N802
    if len(data) < 8:
        return
    # Derive variable chunk size & mutation seed
    seed = int.from_bytes(data[:4], 'little')
    random.seed(seed)
    chunk_len = 1 + (data[4] % 32)
    body = data[5:]
    items = [body[i:i+chunk_len] for i in range(0, min(len(body), chunk_len * 16), chunk_len)]
    if len(items) < 3:
        return
    tree = MerkleTree.build(items)
    idx = seed % len(items)
    proof = list(tree.generate_proof(idx))
    roll = random.random()
    if roll < 0.2 and proof:
        # flip one hex nibble of a sibling
        step = proof[0]
        sib = step.sibling_digest
        mutated = ("1" if sib[0] == "0" else "0") + sib[1:]
        proof[0] = ProofStep(sibling_digest=mutated, orientation=step.orientation)
        if tree.verify_proof(items[idx], proof, tree.root):
            raise RuntimeError("tampered proof unexpectedly verified")
    elif roll < 0.4:
        if tree.verify_proof(items[idx] + b"tampered", proof, tree.root):
            raise RuntimeError("tampered data unexpectedly verified")
    else:
        if not tree.verify_proof(items[idx], proof, tree.root):
            raise RuntimeError("valid proof failed")


def main():
    atheris.Setup(sys.argv, TestOneInput, enable_python_coverage=True)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
