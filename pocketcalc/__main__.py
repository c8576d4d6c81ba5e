"""CLI for the pocketcalc expression evaluator.

Usage:
    python -m pocketcalc repl                    # Interactive session
    python -m pocketcalc eval "34+5*12-311/8"    # One-shot evaluation
    python -m pocketcalc explain "2+3*4-5/5"     # Show the split tree
    python -m pocketcalc operators               # Operator table
"""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape

from pocketcalc.config import DEFAULT_PROMPT, SessionConfig, configure_logging
from pocketcalc.errors import CalcError
from pocketcalc.evaluator import decompose, evaluate
from pocketcalc.render import format_result, render_operators, render_split_tree
from pocketcalc.session import run_session
from pocketcalc.validator import normalize, validate

app = typer.Typer(
    name="pocketcalc",
    help="Four-function arithmetic expression evaluator",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)


@app.command("repl")
def cmd_repl(
    prompt: str = typer.Option(DEFAULT_PROMPT, "--prompt", "-p", help="Prompt shown before each line"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every split and leaf"),
) -> None:
    """Start an interactive session. Enter q or Q to quit."""
    config = SessionConfig(prompt=prompt, verbose=verbose)
    configure_logging(config.verbose)
    raise typer.Exit(run_session(console, config=config))


@app.command("eval")
def cmd_eval(
    expression: str = typer.Argument(help="Expression, e.g. '34+5*12-311/8'"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every split and leaf"),
) -> None:
    """Evaluate a single expression and print '<expression>=<result>'."""
    configure_logging(verbose)
    expr = normalize(expression)
    try:
        validate(expr)
        value = evaluate(expr)
    except CalcError as exc:
        err_console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(1)
    console.print(f"{escape(expression)}={format_result(value)}", soft_wrap=True)


@app.command("explain")
def cmd_explain(
    expression: str = typer.Argument(help="Expression to decompose"),
) -> None:
    """Show how an expression is split, then its value."""
    expr = normalize(expression)
    try:
        validate(expr)
    except CalcError as exc:
        err_console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(1)

    render_split_tree(decompose(expr), console)
    try:
        value = evaluate(expr)
    except CalcError as exc:
        err_console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(1)
    console.print(f"{escape(expr.text)}={format_result(value)}", soft_wrap=True)


@app.command("operators")
def cmd_operators() -> None:
    """Show supported operators and the order they are split on."""
    render_operators(console)


if __name__ == "__main__":
    app()
