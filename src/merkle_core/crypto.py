from __future__ import annotations
import hashlib

import rfc8785


def sha256_hex(data: bytes) -> str:
    """SHA-256 of ``data`` as a lowercase hex string."""
    return hashlib.sha256(data).hexdigest()


def pair_hash(left: str, right: str) -> str:
    """Hash two node hashes, smaller hex string first.

    Ordering the pair makes the combinator commutative, so a proof is a flat
    list of siblings with no left/right marker.
    """
    if left < right:
        joined = left + right
    else:
        joined = right + left
    return sha256_hex(joined.encode("utf-8"))


def jcs_dumps(obj) -> bytes:
    """Deterministic canonical JSON bytes per RFC8785."""
    return rfc8785.dumps(obj)
