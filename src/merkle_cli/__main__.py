from __future__ import annotations
import pathlib
from typing import List, Optional

import typer
from rich import print
from rich.console import Console
from rich.table import Table

from merkle_engine.errors import MerkleError
from merkle_engine.logutil import abbreviate, setup_logging
from merkle_engine.merkle import MerkleTree
from merkle_engine.proof import dump_proof
from merkle_engine.settings import settings
from merkle_sdk.verify import verify_proof_json

app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.callback()
def main():
    """Build Merkle trees, emit inclusion proofs and verify them."""
    setup_logging(settings.log_level)


def _items(items: Optional[List[str]], file: Optional[str]) -> List[str]:
    out = list(items or [])
    if file:
        out.extend(pathlib.Path(file).read_text(encoding="utf-8").splitlines())
    return out


def _tree(items: List[str], algorithm: Optional[str]) -> MerkleTree:
    try:
        return MerkleTree.build(
            items, {"hash_algorithm": algorithm or settings.hash_algorithm}
        )
    except MerkleError as e:
        print(f"[red]{e}[/red]")
        raise typer.Exit(code=2)


@app.command()
def build(
    items: Optional[List[str]] = typer.Argument(None, help="Data items, in order"),
    file: Optional[str] = typer.Option(None, help="Read one item per line"),
    algorithm: Optional[str] = typer.Option(None, help="Hash algorithm"),
):
    """Print the root, depth and leaf count of a tree over ITEMS."""
    tree = _tree(_items(items, file), algorithm)
    print(
        {
            "root": tree.root,
            "depth": tree.depth,
            "leaf_count": tree.leaf_count,
            "hash_algorithm": tree.hash_algorithm,
        }
    )


@app.command()
def prove(
    index: int = typer.Argument(..., help="Leaf index to prove"),
    items: Optional[List[str]] = typer.Argument(None, help="Data items, in order"),
    file: Optional[str] = typer.Option(None, help="Read one item per line"),
    algorithm: Optional[str] = typer.Option(None, help="Hash algorithm"),
    out: Optional[str] = typer.Option(None, help="Write the proof JSON here"),
):
    """Emit the canonical JSON inclusion proof for leaf INDEX."""
    tree = _tree(_items(items, file), algorithm)
    try:
        proof = tree.generate_proof(index)
    except MerkleError as e:
        print(f"[red]{e}[/red]")
        raise typer.Exit(code=2)
    raw = dump_proof(proof)
    if out:
        pathlib.Path(out).write_bytes(raw)
        print(f"[green]Wrote proof for leaf {index} to {out}[/green]")
        print(f"root: {tree.root}")
    else:
        typer.echo(raw.decode("utf-8"))


@app.command()
def verify(
    data: str = typer.Argument(..., help="Claimed data item"),
    proof_path: str = typer.Argument(..., help="Proof JSON file"),
    root: str = typer.Argument(..., help="Expected root digest"),
    algorithm: Optional[str] = typer.Option(None, help="Hash algorithm"),
):
    """Check DATA against a proof file and an expected ROOT."""
    try:
        ok = verify_proof_json(
            data,
            pathlib.Path(proof_path).read_bytes(),
            root,
            algorithm or settings.hash_algorithm,
        )
    except MerkleError as e:
        print(f"[red]{e}[/red]")
        raise typer.Exit(code=2)
    print({"proof_valid": ok})
    if not ok:
        raise typer.Exit(code=1)


@app.command()
def show(
    items: Optional[List[str]] = typer.Argument(None, help="Data items, in order"),
    file: Optional[str] = typer.Option(None, help="Read one item per line"),
    algorithm: Optional[str] = typer.Option(None, help="Hash algorithm"),
):
    """Render the tree level by level, root first."""
    tree = _tree(_items(items, file), algorithm)
    table = Table(title=f"Merkle Tree ({tree.hash_algorithm})")
    table.add_column("Level", no_wrap=True)
    table.add_column("Nodes")
    table.add_column("Count", justify="right", no_wrap=True)
    levels = tree.levels()
    for height in range(len(levels) - 1, -1, -1):
        level = levels[height]
        if height == tree.depth:
            name = "Root"
        elif height == 0:
            name = "Leaves"
        else:
            name = f"Level {height}"
        count = f"{len(level)} node{'s' if len(level) != 1 else ''}"
        table.add_row(name, " | ".join(abbreviate(d) for d in level), count)
    Console().print(table)


if __name__ == "__main__":
    app()
