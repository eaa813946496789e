"""Inclusion proof fuzzing with mutated proofs and serialized documents."""
from __future__ import annotations
import atheris
import sys
import random

with atheris.instrument_imports():
    from merkle_core.crypto import sha256_hex
    from merkle_core.merkle import MerkleTree, verify_inclusion
    from merkle_core.models import ProofDocument
    from merkle_sdk.verify import verify_proof


def TestOneInput(data: bytes):  # noqa: N802
    if len(data) < 8:
        return
    seed = int.from_bytes(data[:4], "little")
    random.seed(seed)
    chunk_len = 1 + (data[4] % 32)
    body = data[5:]
    leaves_raw = [body[i:i+chunk_len] for i in range(0, min(len(body), chunk_len * 16), chunk_len)]
    leaves = [sha256_hex(x) for x in leaves_raw if x]
    if len(leaves) < 3:
        return
    tree = MerkleTree.from_leaves(leaves)
    idx = seed % len(leaves)
    proof = tree.inclusion_proof(idx)
    # With some probability, mutate one sibling to exercise negative path
    if random.random() < 0.2:
        sib = proof[0]
        flipped = "0" if sib[0] != "0" else "1"
        proof[0] = flipped + sib[1:]
        if verify_inclusion(tree, leaves[idx], proof):
            raise RuntimeError("tampered proof unexpectedly verified")
    else:
        if not verify_inclusion(tree, leaves[idx], proof):
            raise RuntimeError("valid proof failed")
        doc = ProofDocument.from_tree(tree, idx).model_dump()
        if not verify_proof(doc):
            raise RuntimeError("serialized proof failed")


def main():
    atheris.Setup(sys.argv, TestOneInput, enable_python_coverage=True)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
