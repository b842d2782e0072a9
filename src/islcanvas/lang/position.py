"""Source positions attached to tokens, moves and errors."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Position:
    """A 0-based line and a ``(start, end)`` column span on that line.

    ``source`` keeps a reference to the whole program text so diagnostics
    can show the offending line.  It takes no part in equality.
    """

    line: int
    col: tuple[int, int]
    source: str = field(default="", repr=False, compare=False)

    @property
    def start(self) -> int:
        return self.col[0]

    @property
    def end(self) -> int:
        return self.col[1]

    def line_text(self) -> str:
        """Return the text of the line this position points into."""
        lines = self.source.split("\n")
        if 0 <= self.line < len(lines):
            return lines[self.line].rstrip("\r")
        return ""

    def caret(self) -> str:
        """Underline for the column span, aligned under :meth:`line_text`."""
        width = max(self.end - self.start, 1)
        return " " * self.start + "^" * width

    def __str__(self) -> str:
        return f"line {self.line + 1}, columns {self.start}-{self.end}"
