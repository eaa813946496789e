from __future__ import annotations
import re
from typing import List
from pydantic import BaseModel, field_validator, model_validator
from pydantic import ConfigDict

from .merkle import MerkleTree, proof_length

_HEX64 = re.compile(r"^[0-9a-f]{64}$")


def _check_hash(v):
    if not isinstance(v, str) or not _HEX64.match(v):
        raise ValueError("hash must be 64 lowercase hex characters")
    return v


class TreeDocument(BaseModel):
    """Serialized tree: every level as a list of hex hashes, root level first."""

    model_config = ConfigDict(strict=True)

    tree_size: int
    root: str
    levels: List[List[str]]

    @field_validator("root")
    @classmethod
    def _root_is_hash(cls, v):  # type: ignore[override]
        return _check_hash(v)

    @field_validator("levels")
    @classmethod
    def _levels_are_hashes(cls, v):  # type: ignore[override]
        if not v:
            raise ValueError("levels must not be empty")
        for level in v:
            if not level:
                raise ValueError("levels must not contain an empty level")
            for h in level:
                _check_hash(h)
        return v

    @model_validator(mode="after")
    def _shape(self):
        if len(self.levels[0]) != 1 or self.levels[0][0] != self.root:
            raise ValueError("root level must hold exactly the root hash")
        if len(self.levels[-1]) != self.tree_size:
            raise ValueError("tree_size does not match the leaf level")
        return self

    @classmethod
    def from_tree(cls, tree: MerkleTree) -> "TreeDocument":
        return cls(tree_size=tree.size, root=tree.root, levels=tree.as_lists())

    def to_tree(self) -> MerkleTree:
        """Rebuild from the leaf level; raise ValueError if any level disagrees."""
        tree = MerkleTree.from_leaves(self.levels[-1])
        if tree.as_lists() != self.levels:
            raise ValueError("levels are inconsistent with the leaf level")
        return tree


class ProofDocument(BaseModel):
    model_config = ConfigDict(strict=True)

    tree_size: int
    leaf_index: int
    leaf_hash: str
    proof: List[str]
    root: str

    @field_validator("leaf_hash", "root")
    @classmethod
    def _is_hash(cls, v):  # type: ignore[override]
        return _check_hash(v)

    @field_validator("proof")
    @classmethod
    def _proof_hashes(cls, v):  # type: ignore[override]
        for h in v:
            _check_hash(h)
        return v

    @model_validator(mode="after")
    def _index_in_range(self):
        if self.tree_size < 1:
            raise ValueError("tree_size must be positive")
        if not 0 <= self.leaf_index < self.tree_size:
            raise ValueError("leaf_index out of range")
        if len(self.proof) != proof_length(self.tree_size):
            raise ValueError("proof length does not match tree_size")
        return self

    @classmethod
    def from_tree(cls, tree: MerkleTree, index: int) -> "ProofDocument":
        proof = tree.inclusion_proof(index)
        return cls(
            tree_size=tree.size,
            leaf_index=index,
            leaf_hash=tree.leaves[index],
            proof=proof,
            root=tree.root,
        )
