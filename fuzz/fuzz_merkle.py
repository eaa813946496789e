"""Fuzz harness for Merkle tree construction & inclusion proof verification."""
from __future__ import annotations
import atheris
import sys

with atheris.instrument_imports():
    from merkle_core.crypto import sha256_hex
    from merkle_core.merkle import MerkleTree, verify_inclusion


def TestOneInput(data: bytes):  # noqa: N802
    if not data:
        return
    # Split data deterministically into pseudo-leaves (bounded count)
    size = max(1, min(32, data[0]))
    chunks = [data[i : i + size] for i in range(1, min(len(data), 1 + size * 32), size)]
    leaves = [sha256_hex(c) for c in chunks if c]
    if not leaves:
        return
    tree = MerkleTree.from_leaves(leaves)
    if len(tree.levels[0]) != 1:
        raise RuntimeError("root level must hold a single node")
    idx = data[-1] % len(leaves)
    proof = tree.inclusion_proof(idx)
    if len(proof) != len(tree.levels) - 1:
        raise RuntimeError("proof length does not match tree depth")
    if not verify_inclusion(tree, leaves[idx], proof):
        raise RuntimeError("valid inclusion proof failed")


def main():
    atheris.Setup(sys.argv, TestOneInput, enable_python_coverage=True)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
