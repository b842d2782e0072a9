"""ISL CLI — Typer-based entry point.

Commands
--------
run         Execute a program file and print its total cost.
repl        Start the interactive session.
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from islcanvas.errors import IslError

app = typer.Typer(
    name="islcanvas",
    help="ICFP ISL interpreter — cut, color, swap and merge canvas blocks.",
    add_completion=False,
)


def _setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s  %(name)-30s  %(levelname)-7s  %(message)s",
    )


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.command()
def run(
    file: Path = typer.Argument(..., help="ISL program to execute."),
    verbose: bool = typer.Option(False, "--verbose", "-v", "--v", help="Show a per-move cost trace and debug logs."),
) -> None:
    """Execute a program file and print the total cost."""
    _setup_logging(verbose)
    from islcanvas.engine.interpreter import Interpreter
    from islcanvas.interfaces.terminal_ui import TerminalUI
    from islcanvas.runner import run_file

    ui = TerminalUI()
    interpreter = Interpreter()
    try:
        cost, _ = run_file(file, interpreter, verbose=verbose)
    except IslError as exc:
        ui.print_error(exc)
        raise typer.Exit(1)

    if verbose:
        ui.print_trace(interpreter.trace)
    ui.print_cost(cost, total=True)


@app.command()
def repl(
    verbose: bool = typer.Option(False, "--verbose", "-v", "--v", help="Show a per-move cost trace and debug logs."),
) -> None:
    """Start the interactive session (':q' or 'exit' to quit)."""
    _setup_logging(verbose)
    from islcanvas.interfaces.repl import run_repl

    code = run_repl(verbose=verbose)
    raise typer.Exit(code)


def main() -> int:
    """Console-script entry point."""
    app()
    return 0
