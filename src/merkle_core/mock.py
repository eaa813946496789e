from __future__ import annotations
import random
from dataclasses import dataclass
from typing import List, Optional


def _int32(v: int) -> int:
    v &= 0xFFFFFFFF
    return v - 0x100000000 if v & 0x80000000 else v


def magical_hex(seed: int) -> str:
    """Token derived from the seed: ``(1 << (seed / 4)) * seed`` as hex.

    The shift follows 32-bit integer semantics (truncated quarter, shift count
    masked to 5 bits, signed result) so tokens match the published vectors.
    """
    shifted = _int32(1 << (int(seed / 4) & 31))
    return format(shifted * seed, "x")


@dataclass(frozen=True)
class LeafRecord:
    account: str
    token: str
    balance: int

    def render(self) -> str:
        return f"{self.account}-{self.token}:{self.balance}"

    def to_bytes(self) -> bytes:
        return self.render().encode("utf-8")


def create_leaf(seed: int) -> LeafRecord:
    return LeafRecord(
        account=f"Account{seed}",
        token=magical_hex(seed),
        balance=seed * 100,
    )


def random_range(a: int, b: int, rng: Optional[random.Random] = None) -> int:
    """Random integer in ``[a, b)``."""
    if not b > a:
        raise ValueError(f"empty range [{a}, {b})")
    rng = rng or random
    return a + int(rng.random() * (b - a))


def random_leaves(
    count: int, seed_max: int, rng: Optional[random.Random] = None
) -> List[LeafRecord]:
    return [create_leaf(random_range(0, seed_max, rng)) for _ in range(count)]
