"""Rich output helpers for the operator table, split tree, result formatting."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from pocketcalc.evaluator import parse_number
from pocketcalc.models import SUPPORTED_OPERATORS, Leaf, Node, Split


def format_result(value: float) -> str:
    """Format like a default C++ output stream: 6 significant digits."""
    return f"{value:g}"


def render_operators(console: Console) -> None:
    """Render a table of supported operators in split order."""
    table = Table(title="Supported Operators", show_header=True, header_style="bold")
    table.add_column("Operator", style="green", justify="center")
    table.add_column("Name", min_width=15)
    table.add_column("Split order", justify="right")

    for rank, op in enumerate(SUPPORTED_OPERATORS, 1):
        table.add_row(op.value, op.label, str(rank))

    console.print()
    console.print(table)
    console.print("[dim]Lower split order binds looser: + is split first, / last.[/dim]")
    console.print()


def _leaf_label(leaf: Leaf) -> str:
    if leaf.is_empty:
        return "[red](missing operand)[/red]"
    return f"[cyan]{escape(leaf.text)}[/cyan] [dim]= {format_result(parse_number(leaf.text))}[/dim]"


def _split_label(split: Split) -> str:
    return f"[bold]{escape(split.operator.value)}[/bold] [dim]{escape(split.text)}[/dim]"


def render_split_tree(node: Node, console: Console) -> None:
    """Render the split tree: one branch per split, one line per leaf."""
    if isinstance(node, Leaf):
        console.print(Tree(_leaf_label(node)))
        return

    tree = Tree(_split_label(node))
    # Right child pushed first so the left child is added first.
    pending: list[tuple[Tree, Node]] = [(tree, node.right), (tree, node.left)]
    while pending:
        parent, child = pending.pop()
        if isinstance(child, Leaf):
            parent.add(_leaf_label(child))
            continue
        branch = parent.add(_split_label(child))
        pending.append((branch, child.right))
        pending.append((branch, child.left))
    console.print(tree)
