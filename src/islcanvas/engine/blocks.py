"""Rectangle algebra for canvas blocks.

Coordinates grow rightwards in x and upwards in y.  A block covers the
half-open pixel range ``[left, right) x [bottom, top)``.
"""

from __future__ import annotations

from dataclasses import dataclass

from islcanvas.lang.ast import Point


@dataclass(frozen=True)
class BlockData:
    """A block's shape, stored as its four corners."""

    tl: Point
    tr: Point
    bl: Point
    br: Point

    def __post_init__(self) -> None:
        if not (self.tl.x == self.bl.x and self.tr.x == self.br.x
                and self.tl.y == self.tr.y and self.bl.y == self.br.y):
            raise ValueError(f"corners are not axis-aligned: {self!r}")
        if self.tr.x <= self.tl.x or self.tl.y <= self.bl.y:
            raise ValueError(f"block has no area: {self!r}")

    @classmethod
    def from_bounds(cls, left: int, bottom: int, right: int, top: int) -> BlockData:
        return cls(
            tl=Point(left, top),
            tr=Point(right, top),
            bl=Point(left, bottom),
            br=Point(right, bottom),
        )

    @property
    def left(self) -> int:
        return self.bl.x

    @property
    def right(self) -> int:
        return self.tr.x

    @property
    def bottom(self) -> int:
        return self.bl.y

    @property
    def top(self) -> int:
        return self.tr.y

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.top - self.bottom

    def size(self) -> int:
        return self.width * self.height

    def corners(self) -> tuple[Point, Point, Point, Point]:
        return (self.tl, self.tr, self.br, self.bl)

    def strictly_contains(self, point: Point) -> bool:
        return self.left < point.x < self.right and self.bottom < point.y < self.top

    def same_size(self, other: BlockData) -> bool:
        return self.size() == other.size()

    def same_shape(self, other: BlockData) -> bool:
        return self.width == other.width and self.height == other.height

    def adjoint(self, other: BlockData) -> bool:
        """True when the two blocks share at least two corner points."""
        shared = set(self.corners()) & set(other.corners())
        return len(shared) >= 2

    def join(self, other: BlockData) -> BlockData:
        """Axis-aligned bounding rectangle of both blocks."""
        return BlockData.from_bounds(
            min(self.left, other.left),
            min(self.bottom, other.bottom),
            max(self.right, other.right),
            max(self.top, other.top),
        )

    def quadrants(self, point: Point) -> tuple[BlockData, BlockData, BlockData, BlockData]:
        """Split around *point*: bottom-left, bottom-right, top-right, top-left."""
        x, y = point
        return (
            BlockData.from_bounds(self.left, self.bottom, x, y),
            BlockData.from_bounds(x, self.bottom, self.right, y),
            BlockData.from_bounds(x, y, self.right, self.top),
            BlockData.from_bounds(self.left, y, x, self.top),
        )

    def split_vertical(self, x: int) -> tuple[BlockData, BlockData]:
        """Split along the vertical line at absolute *x*: left, right."""
        return (
            BlockData.from_bounds(self.left, self.bottom, x, self.top),
            BlockData.from_bounds(x, self.bottom, self.right, self.top),
        )

    def split_horizontal(self, y: int) -> tuple[BlockData, BlockData]:
        """Split along the horizontal line at absolute *y*: bottom, top."""
        return (
            BlockData.from_bounds(self.left, self.bottom, self.right, y),
            BlockData.from_bounds(self.left, y, self.right, self.top),
        )

    def __str__(self) -> str:
        return f"[({self.left}, {self.bottom}) .. ({self.right}, {self.top})]"
