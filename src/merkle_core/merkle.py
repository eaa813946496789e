from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .crypto import pair_hash
from .errors import EmptyInputError, InputTooLargeError, IndexOutOfRangeError
from .settings import settings

logger = logging.getLogger(__name__)

Level = Tuple[str, ...]


def _next_level(nodes: Sequence[str]) -> Level:
    parents = []
    for i in range(0, len(nodes), 2):
        a = nodes[i]
        b = nodes[i + 1] if i + 1 < len(nodes) else nodes[i]  # duplicate last if odd
        parents.append(pair_hash(a, b))
    return tuple(parents)


@dataclass(frozen=True)
class MerkleTree:
    levels: Tuple[Level, ...]  # levels[0] = root level, levels[-1] = leaves

    @classmethod
    def from_leaves(
        cls, leaves: Sequence[str], max_size: Optional[int] = None
    ) -> "MerkleTree":
        limit = settings.max_tree_size if max_size is None else max_size
        if not leaves:
            raise EmptyInputError("no leaves")
        if len(leaves) >= limit:
            raise InputTooLargeError(
                f"tree of {len(leaves)} leaves exceeds maximum size {limit}"
            )
        lvl: Level = tuple(leaves)
        built = [lvl]
        while len(lvl) > 1:
            lvl = _next_level(lvl)
            built.append(lvl)
        logger.debug("built merkle tree: %d leaves, %d levels", len(leaves), len(built))
        return cls(tuple(reversed(built)))

    @property
    def root(self) -> str:
        return self.levels[0][0]

    @property
    def leaves(self) -> Level:
        return self.levels[-1]

    @property
    def size(self) -> int:
        return len(self.leaves)

    def inclusion_proof(self, index: int) -> List[str]:
        """Return sibling hashes from the leaf level up to, not including, the root."""
        if index < 0 or index >= self.size:
            raise IndexOutOfRangeError(
                f"leaf index {index} out of range for tree of size {self.size}"
            )
        proof = []
        idx = index
        for level in reversed(self.levels[1:]):
            sibling_idx = idx ^ 1
            if sibling_idx >= len(level):
                # odd level, the last node was paired with itself
                proof.append(level[idx])
            else:
                proof.append(level[sibling_idx])
            idx //= 2
        return proof

    def verify(self, leaf: str, proof: Sequence[str]) -> bool:
        return verify_root(self.root, leaf, proof)

    def as_lists(self) -> List[List[str]]:
        return [list(level) for level in self.levels]


def proof_length(tree_size: int) -> int:
    """Number of siblings in an inclusion proof for a tree of ``tree_size`` leaves."""
    depth = 0
    n = tree_size
    while n > 1:
        n = (n + 1) // 2
        depth += 1
    return depth


def verify_root(root: str, leaf: str, proof: Sequence[str]) -> bool:
    h = leaf
    for sibling in proof:
        h = pair_hash(h, sibling)
    return h == root


def verify_inclusion(tree: MerkleTree, leaf: str, proof: Sequence[str]) -> bool:
    return verify_root(tree.root, leaf, proof)
