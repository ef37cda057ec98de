"""Fuzz harness for Merkle tree construction & inclusion proof round trip."""
from __future__ import annotations
import atheris
import sys

with atheris.instrument_imports():
    from merkle_engine.merkle import MerkleTree, verify_proof


def TestOneInput(data: bytes):  # noqa: N802
    if not data:
        return
    # Split data deterministically into items (bounded count)
    # Use fixed-size chunks to avoid quadratic blowups.
    size = max(1, min(32, data[0]))
    items = [data[i : i + size] for i in range(1, min(len(data), 1 + size * 32), size)]
    if not items:
        return
    algorithm = "sha512" if data[0] & 0x80 else "sha256"
    tree = MerkleTree.build(items, {"hash_algorithm": algorithm})
    if tree.depth != len(tree.levels()) - 1:
        raise RuntimeError("depth does not match level count")
    # Pick an index based on trailing byte
    idx = data[-1] % len(items)
    proof = tree.generate_proof(idx)
    if len(proof) > tree.depth:
        raise RuntimeError("proof longer than tree depth")
    if not verify_proof(items[idx], proof, tree.root, algorithm):
        raise RuntimeError("valid inclusion proof failed")


def main():
    atheris.Setup(sys.argv, TestOneInput, enable_python_coverage=True)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
