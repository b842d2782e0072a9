"""Rich terminal rendering for the ISL interpreter.

``TerminalUI`` wraps every console operation: the REPL banner, costs, the
verbose move trace and positioned error reports.
"""

from __future__ import annotations

from typing import Sequence

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from islcanvas import __version__
from islcanvas.engine.interpreter import MoveReport
from islcanvas.errors import IslError

# ---------------------------------------------------------------------------
# Theme
# ---------------------------------------------------------------------------

ISL_THEME = Theme(
    {
        "isl.name": "bold cyan",
        "isl.dim": "dim white",
        "isl.success": "bold green",
        "isl.error": "bold red",
        "isl.cost": "bold bright_white",
        "isl.hint": "dim italic",
        "isl.caret": "bold red",
        "isl.source": "white",
    }
)


class TerminalUI:
    """Encapsulates all Rich-based rendering for the ISL CLI and REPL."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(theme=ISL_THEME, highlight=False)

    # ------------------------------------------------------------------
    # Banner
    # ------------------------------------------------------------------

    def print_banner(self) -> None:
        title = Text.assemble(
            ("ICFP ISL Interpreter", "isl.name"),
            "  ",
            (f"Version {__version__}", "isl.dim"),
        )
        self.console.print(title)
        self.console.print("Enter ':q' to quit.", style="isl.hint")

    def print_goodbye(self) -> None:
        self.console.print("Goodbye and thanks for all the fish", style="isl.success")

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------

    def print_cost(self, cost: int, total: bool = False) -> None:
        label = "Total Cost:" if total else "Cost:"
        self.console.print(Text.assemble((label, "isl.cost"), " ", str(cost)))

    def print_trace(self, reports: Sequence[MoveReport]) -> None:
        """Table of every move with its base cost, block size and charge."""
        if not reports:
            return
        table = Table(show_header=True, header_style="bold cyan", box=None, pad_edge=False)
        table.add_column("#", justify="right", style="isl.dim")
        table.add_column("Move")
        table.add_column("Base", justify="right")
        table.add_column("Size", justify="right")
        table.add_column("Cost", justify="right", style="isl.cost")
        for i, report in enumerate(reports, start=1):
            table.add_row(
                str(i),
                Text(str(report.move)),
                str(report.base_cost),
                str(report.block_size),
                str(report.cost),
            )
        self.console.print(table)

    # ------------------------------------------------------------------
    # Errors
    # ------------------------------------------------------------------

    def render_error(self, error: IslError) -> Group | Text:
        headline = Text.assemble((f"{error.kind} Error:", "isl.error"), " ", error.message)
        position = error.position
        if position is None:
            return headline

        gutter = f"{position.line + 1} | "
        snippet = Text.assemble(
            (gutter, "isl.dim"), (position.line_text(), "isl.source"), "\n",
            (" " * len(gutter) + position.caret(), "isl.caret"),
        )
        where = Text(f"at {position}", style="isl.dim")
        return Group(headline, Panel(snippet, border_style="red", expand=False), where)

    def print_error(self, error: IslError) -> None:
        self.console.print(self.render_error(error))
