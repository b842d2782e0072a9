"""Token kinds produced by the scanner."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from islcanvas.lang.position import Position


class TokenType(str, Enum):
    NUMBER = "number"
    CUT = "cut"
    COLOR = "color"
    SWAP = "swap"
    MERGE = "merge"
    VERTICAL = "x"
    HORIZONTAL = "y"
    LEFT_BRACE = "["
    RIGHT_BRACE = "]"
    COMMA = ","
    DOT = "."
    NEWLINE = "newline"
    EOF = "end of input"


KEYWORDS: dict[str, TokenType] = {
    "cut": TokenType.CUT,
    "color": TokenType.COLOR,
    "swap": TokenType.SWAP,
    "merge": TokenType.MERGE,
}


@dataclass(frozen=True)
class Token:
    type: TokenType
    position: Position
    number: int | None = None
    """Value of a ``NUMBER`` token, ``None`` for every other kind."""
