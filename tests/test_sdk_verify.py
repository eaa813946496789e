from merkle_core.merkle import MerkleTree
from merkle_core.models import ProofDocument, TreeDocument
from merkle_sdk.verify import verify_inclusion, verify_proof, verify_tree
from tests._helpers import tamper


def _docs(leaves, index):
    tree = MerkleTree.from_leaves(leaves)
    return (
        ProofDocument.from_tree(tree, index).model_dump(),
        TreeDocument.from_tree(tree).model_dump(),
    )


def test_verify_proof_ok(mock_leaf_hashes):
    proof, _ = _docs(mock_leaf_hashes(9), 8)
    assert verify_proof(proof) is True


def test_verify_proof_tampered(mock_leaf_hashes):
    proof, _ = _docs(mock_leaf_hashes(9), 2)
    proof["proof"][1] = tamper(proof["proof"][1])
    assert verify_proof(proof) is False


def test_verify_proof_malformed():
    assert verify_proof({}) is False
    assert verify_proof({"leaf_hash": "zz"}) is False
    assert verify_proof([]) is False  # type: ignore[arg-type]


def test_verify_tree(mock_leaf_hashes):
    _, tree = _docs(mock_leaf_hashes(6), 0)
    assert verify_tree(tree) is True
    tree["levels"][-1][0] = tamper(tree["levels"][-1][0])
    assert verify_tree(tree) is False
    assert verify_tree({"levels": "nope"}) is False


def test_verify_inclusion(mock_leaf_hashes):
    leaves = mock_leaf_hashes(6)
    proof, tree = _docs(leaves, 4)
    assert verify_inclusion(proof, tree) is True
    other_proof, other_tree = _docs(mock_leaf_hashes(7), 4)
    assert verify_inclusion(other_proof, tree) is False
    assert verify_inclusion(proof, other_tree) is False


def test_verify_proof_rejects_root_as_leaf(mock_leaf_hashes):
    tree = MerkleTree.from_leaves(mock_leaf_hashes(5))
    forged = {
        "tree_size": 5,
        "leaf_index": 3,
        "leaf_hash": tree.root,
        "proof": [],
        "root": tree.root,
    }
    assert verify_proof(forged) is False


def test_verify_proof_rejects_internal_node_as_leaf(mock_leaf_hashes):
    tree = MerkleTree.from_leaves(mock_leaf_hashes(5))
    forged = {
        "tree_size": 5,
        "leaf_index": 0,
        "leaf_hash": tree.levels[1][0],
        "proof": [tree.levels[1][1]],
        "root": tree.root,
    }
    assert verify_proof(forged) is False


def test_verify_proof_single_leaf_tree(mock_leaf_hashes):
    proof, _ = _docs(mock_leaf_hashes(1), 0)
    assert proof["proof"] == []
    assert verify_proof(proof) is True
