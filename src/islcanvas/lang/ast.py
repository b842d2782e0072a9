"""Typed move sequence produced by the parser.

``Move`` is a closed union of frozen dataclasses.  Consumers dispatch on it
with ``match``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, NamedTuple, Union

from islcanvas.lang.position import Position


class BlockId(tuple):
    """Dot-separated block path, root segment first (``3.1.0``)."""

    __slots__ = ()

    def __new__(cls, segments: Iterable[int] = (0,)) -> BlockId:
        segments = tuple(int(s) for s in segments)
        if not segments:
            raise ValueError("BlockId needs at least one segment")
        if any(s < 0 for s in segments):
            raise ValueError(f"BlockId segments must be non-negative: {segments}")
        return super().__new__(cls, segments)

    def child(self, segment: int) -> BlockId:
        return BlockId((*self, segment))

    def __str__(self) -> str:
        return ".".join(str(s) for s in self)

    def __repr__(self) -> str:
        return f"BlockId({str(self)!r})"


class Point(NamedTuple):
    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


class Color(NamedTuple):
    r: int
    g: int
    b: int
    a: int

    def __str__(self) -> str:
        return f"[{self.r},{self.g},{self.b},{self.a}]"


WHITE = Color(255, 255, 255, 255)


class Orientation(str, Enum):
    VERTICAL = "x"
    HORIZONTAL = "y"


_NOWHERE = Position(0, (0, 0))


@dataclass(frozen=True)
class PCut:
    block: BlockId
    point: Point
    position: Position = field(default=_NOWHERE, compare=False)

    def __str__(self) -> str:
        return f"cut [{self.block}] [{self.point.x},{self.point.y}]"


@dataclass(frozen=True)
class LCut:
    block: BlockId
    orientation: Orientation
    line_no: int
    position: Position = field(default=_NOWHERE, compare=False)

    def __str__(self) -> str:
        return f"cut [{self.block}] [{self.orientation.value}] [{self.line_no}]"


@dataclass(frozen=True)
class ColorMove:
    block: BlockId
    color: Color
    position: Position = field(default=_NOWHERE, compare=False)

    def __str__(self) -> str:
        return f"color [{self.block}] {self.color}"


@dataclass(frozen=True)
class Swap:
    block_1: BlockId
    block_2: BlockId
    position: Position = field(default=_NOWHERE, compare=False)

    def __str__(self) -> str:
        return f"swap [{self.block_1}] [{self.block_2}]"


@dataclass(frozen=True)
class Merge:
    block_1: BlockId
    block_2: BlockId
    position: Position = field(default=_NOWHERE, compare=False)

    def __str__(self) -> str:
        return f"merge [{self.block_1}] [{self.block_2}]"


Move = Union[PCut, LCut, ColorMove, Swap, Merge]
