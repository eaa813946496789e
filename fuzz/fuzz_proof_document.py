"""Fuzz harness feeding arbitrary JSON to the proof document verifier."""
from __future__ import annotations
import atheris
import sys
import json

with atheris.instrument_imports():
    from merkle_sdk.verify import verify_proof, verify_tree


def TestOneInput(data: bytes):  # noqa: N802
    fdp = atheris.FuzzedDataProvider(data)
    s = fdp.ConsumeUnicodeNoSurrogates(4096)
    try:
        obj = json.loads(s)
    except Exception:
        return
    # Both verifiers must return a bool, never raise
    res = verify_proof(obj)
    if not isinstance(res, bool):
        raise RuntimeError("verify_proof returned non-bool")
    res = verify_tree(obj)
    if not isinstance(res, bool):
        raise RuntimeError("verify_tree returned non-bool")


def main():
    atheris.Setup(sys.argv, TestOneInput, enable_python_coverage=True)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
