from __future__ import annotations
import json
import logging
import pathlib
import random
from typing import List, Optional
import typer
from rich import print

from merkle_core.crypto import sha256_hex, jcs_dumps
from merkle_core.errors import MerkleError
from merkle_core.logutil import setup_logging
from merkle_core.merkle import MerkleTree, verify_inclusion
from merkle_core.mock import random_leaves, random_range
from merkle_core.models import ProofDocument, TreeDocument
from merkle_core.settings import settings

logger = logging.getLogger("merkle_cli")

app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.callback()
def main():
    level = logging.getLevelName(settings.log_level.upper())
    setup_logging(level if isinstance(level, int) else logging.INFO)


def _read_leaf_hashes(path: str) -> List[str]:
    p = pathlib.Path(path)
    if not p.exists():
        raise typer.BadParameter(f"no such file: {path}")
    try:
        lines = p.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise typer.BadParameter(f"cannot read leaves: {e}")
    return [sha256_hex(line.encode("utf-8")) for line in lines if line]


def _build(leaf_hashes: List[str]) -> MerkleTree:
    try:
        return MerkleTree.from_leaves(leaf_hashes)
    except MerkleError as e:
        raise typer.BadParameter(str(e))


def _echo_json(obj) -> None:
    typer.echo(jcs_dumps(obj).decode("utf-8"))


@app.command()
def run(
    leaves: int = typer.Argument(..., help="Number of mock leaves to create"),
    index: Optional[int] = typer.Option(
        None, help="Leaf index to prove (random when omitted)"
    ),
    seed: Optional[int] = typer.Option(None, help="Seed for the leaf generator"),
    as_json: bool = typer.Option(False, "--json", help="Emit canonical JSON"),
):
    """Build a tree over random mock leaves, prove one leaf and verify it."""
    if leaves <= 0:
        raise typer.BadParameter("Number of leaves should be more than 0")
    rng = random.Random(seed)
    records = random_leaves(leaves, settings.leaf_seed_max, rng)
    leaf_hashes = [sha256_hex(r.to_bytes()) for r in records]
    tree = _build(leaf_hashes)

    if index is None:
        index = random_range(0, tree.size, rng)
    elif not 0 <= index < tree.size:
        raise typer.BadParameter(f"index must be in [0, {tree.size})")
    proof = tree.inclusion_proof(index)
    ok = verify_inclusion(tree, leaf_hashes[index], proof)
    logger.debug("leaf %d of %d verified=%s", index, tree.size, ok)

    if as_json:
        _echo_json(
            {
                "tree": tree.as_lists(),
                "leaf_index": index,
                "proof": proof,
                "verified": ok,
            }
        )
    else:
        print("[cyan]Tree[/cyan]", tree.as_lists())
        print(f"[cyan]Leaf Index[/cyan]: {index}")
        print("[cyan]Proof[/cyan]", proof)
        if ok:
            print("[green]Proof verified[/green]")
        else:
            print("[red]Proof failed to verify[/red]")
    if not ok:
        raise typer.Exit(code=1)


@app.command()
def build(
    path: str = typer.Argument(..., help="Text file with one leaf per line"),
    as_json: bool = typer.Option(False, "--json", help="Emit canonical JSON"),
):
    """Build a tree over the SHA-256 of each non-empty line of a file."""
    tree = _build(_read_leaf_hashes(path))
    doc = TreeDocument.from_tree(tree)
    if as_json:
        _echo_json(doc.model_dump())
    else:
        print(f"[cyan]Root[/cyan]: {doc.root}")
        print(f"[cyan]Leaves[/cyan]: {doc.tree_size}")
        print(doc.levels)


@app.command()
def prove(
    path: str = typer.Argument(..., help="Text file with one leaf per line"),
    index: int = typer.Option(..., help="Leaf index to prove"),
    out: Optional[str] = typer.Option(None, help="Write the proof JSON here"),
):
    """Emit an inclusion proof document for one line of a file."""
    tree = _build(_read_leaf_hashes(path))
    if not 0 <= index < tree.size:
        raise typer.BadParameter(f"index must be in [0, {tree.size})")
    doc = ProofDocument.from_tree(tree, index)
    if out is None:
        _echo_json(doc.model_dump())
        return
    out_path = pathlib.Path(out)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_bytes(jcs_dumps(doc.model_dump()))
    print(f"[green]Wrote proof to {out}[/green]")


@app.command()
def verify(path: str):
    """Verify a proof document written by ``prove``."""
    from merkle_sdk.verify import verify_proof

    try:
        obj = json.loads(pathlib.Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise typer.BadParameter(f"cannot read proof: {e}")
    ok = verify_proof(obj)
    print({"proof_valid": ok})
    if not ok:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
