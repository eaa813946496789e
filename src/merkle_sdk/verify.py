from typing import Dict, Any
from pydantic import ValidationError

from merkle_core.merkle import verify_root
from merkle_core.models import ProofDocument, TreeDocument


def verify_proof(proof_json: Dict[str, Any]) -> bool:
    """Return True if the proof document folds its leaf hash to its root.

    Expects tree_size, leaf_index, leaf_hash, proof and root fields. Malformed
    documents are reported as invalid rather than raised.
    """
    try:
        doc = ProofDocument.model_validate(proof_json)
    except ValidationError:
        return False
    return verify_root(doc.root, doc.leaf_hash, doc.proof)


def verify_tree(tree_json: Dict[str, Any]) -> bool:
    """Recompute every level of a serialized tree from its leaf level."""
    try:
        doc = TreeDocument.model_validate(tree_json)
        doc.to_tree()
    except ValueError:
        return False
    return True


def verify_inclusion(proof_json: Dict[str, Any], tree_json: Dict[str, Any]) -> bool:
    """Check a proof document against a full tree document.

    The proof must verify, the tree must be consistent, and both must commit to
    the same root and size. The leaf at leaf_index must be the proven leaf.
    """
    if not verify_proof(proof_json) or not verify_tree(tree_json):
        return False
    proof = ProofDocument.model_validate(proof_json)
    tree = TreeDocument.model_validate(tree_json)
    if proof.root != tree.root or proof.tree_size != tree.tree_size:
        return False
    return tree.levels[-1][proof.leaf_index] == proof.leaf_hash
