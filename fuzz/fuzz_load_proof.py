"""Fuzz harness for untrusted serialized proofs.

Arbitrary fuzzer bytes are fed to the SDK verifier as proof JSON. It must
return a bool and never raise; any exception is a crash.
"""
from __future__ import annotations
import atheris
import sys

with atheris.instrument_imports():
    from merkle_engine.merkle import MerkleTree
    from merkle_sdk.verify import verify_proof_json

_TREE = MerkleTree.build(["apple", "banana", "cherry", "date", "elderberry"])


def TestOneInput(data: bytes):  # noqa: N802 (Atheris signature)
    ok = verify_proof_json("banana", data, _TREE.root)
    if not isinstance(ok, bool):
        raise RuntimeError("verifier returned a non-bool")


def main():
    atheris.Setup(sys.argv, TestOneInput, enable_python_coverage=True)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
