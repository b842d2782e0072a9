"""Interpreter for ISL move sequences.

Owns the block map and the pixel buffer.  Moves are replayed in order; each
one is fully validated before it touches state, so a failing move leaves
the canvas exactly as its predecessor left it.  Every move is charged
``base_cost * canvas_area // block_size``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from islcanvas.engine.blocks import BlockData
from islcanvas.engine.canvas import Pixels, fill_block, new_pixels, pixel_at, swap_blocks
from islcanvas.errors import (
    BlockNotFoundError,
    NotAdjointError,
    NotTheSameSizeError,
    OutOfBoundsError,
)
from islcanvas.lang.ast import (
    BlockId,
    Color,
    ColorMove,
    LCut,
    Merge,
    Move,
    Orientation,
    PCut,
    Point,
    Swap,
)
from islcanvas.lang.position import Position

logger = logging.getLogger(__name__)

PCUT_COST = 10
LCUT_COST = 7
COLOR_COST = 5
SWAP_COST = 3
MERGE_COST = 1

ROOT_ID = BlockId((0,))


@dataclass
class MoveReport:
    """What a single move was charged."""

    move: Move
    base_cost: int
    block_size: int
    cost: int


class Interpreter:
    """Replays moves against one canvas.

    The instance keeps its state between :meth:`interpret` calls so an
    interactive session can feed it one line at a time.
    """

    def __init__(
        self,
        width: int | None = None,
        height: int | None = None,
        background: Color | None = None,
    ) -> None:
        if width is None or height is None or background is None:
            from islcanvas.config.settings import settings

            width = settings.canvas.width if width is None else width
            height = settings.canvas.height if height is None else height
            background = settings.canvas.background if background is None else background

        self.width = width
        self.height = height
        self.background = Color(*background)
        self.canvas_size = width * height
        self.reset()

    def reset(self) -> None:
        """Return to a single root block over a freshly filled canvas."""
        self.blocks: dict[BlockId, BlockData] = {
            ROOT_ID: BlockData.from_bounds(0, 0, self.width, self.height),
        }
        self.counter = 1
        self.pixels: Pixels = new_pixels(self.width, self.height, self.background)
        self.total_cost = 0
        self.trace: list[MoveReport] = []

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------

    def interpret(self, moves: Iterable[Move], verbose: bool = False) -> tuple[int, Pixels]:
        """Run *moves* and return ``(cost, pixels)`` for this call.

        The first failing move raises and the remaining moves are skipped.
        The pixels come back as a ``(height, width, 4)`` array; use
        :func:`~islcanvas.engine.canvas.flat_pixels` for the row-major list
        of colours indexed ``x + y * width``.
        """
        cost = 0
        reports: list[MoveReport] = []
        for move in moves:
            base_cost, block_size = self.execute(move)
            move_cost = base_cost * self.canvas_size // block_size
            cost += move_cost
            report = MoveReport(move, base_cost, block_size, move_cost)
            reports.append(report)
            logger.debug("%s -> cost %d (base %d, size %d)", move, move_cost, base_cost, block_size)

        self.total_cost += cost
        if verbose:
            self.trace.extend(reports)
        return cost, self.pixels.copy()

    def execute(self, move: Move) -> tuple[int, int]:
        """Apply one move and return ``(base_cost, block_size)``."""
        match move:
            case PCut(block=block_id, point=point, position=position):
                return self._point_cut(block_id, point, position)
            case LCut(block=block_id, orientation=orientation, line_no=line_no, position=position):
                return self._line_cut(block_id, orientation, line_no, position)
            case ColorMove(block=block_id, color=color, position=position):
                return self._color(block_id, color, position)
            case Swap(block_1=first, block_2=second, position=position):
                return self._swap(first, second, position)
            case Merge(block_1=first, block_2=second, position=position):
                return self._merge(first, second, position)
        raise TypeError(f"not a move: {move!r}")

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------

    def _point_cut(self, block_id: BlockId, point: Point, position: Position) -> tuple[int, int]:
        parent = self.get_block(block_id, position)
        if not parent.strictly_contains(point):
            raise OutOfBoundsError(point, parent, position)

        del self.blocks[block_id]
        for n, quadrant in enumerate(parent.quadrants(point)):
            self.blocks[block_id.child(n)] = quadrant
        return PCUT_COST, parent.size()

    def _line_cut(
        self,
        block_id: BlockId,
        orientation: Orientation,
        line_no: int,
        position: Position,
    ) -> tuple[int, int]:
        parent = self.get_block(block_id, position)

        if orientation is Orientation.VERTICAL:
            x = parent.left + line_no
            if not parent.left < x < parent.right:
                raise OutOfBoundsError(Point(x, parent.bottom), parent, position)
            halves = parent.split_vertical(x)
        else:
            y = parent.bottom + line_no
            if not parent.bottom < y < parent.top:
                raise OutOfBoundsError(Point(parent.left, y), parent, position)
            halves = parent.split_horizontal(y)

        del self.blocks[block_id]
        for n, half in enumerate(halves):
            self.blocks[block_id.child(n)] = half
        return LCUT_COST, parent.size()

    def _color(self, block_id: BlockId, color: Color, position: Position) -> tuple[int, int]:
        block = self.get_block(block_id, position)
        fill_block(self.pixels, block, color)
        return COLOR_COST, block.size()

    def _swap(self, first: BlockId, second: BlockId, position: Position) -> tuple[int, int]:
        block_1 = self.get_block(first, position)
        block_2 = self.get_block(second, position)
        if not block_1.same_shape(block_2):
            raise NotTheSameSizeError(first, second, position)

        # Contents move, id bindings stay put.
        swap_blocks(self.pixels, block_1, block_2)
        return SWAP_COST, block_1.size() + block_2.size()

    def _merge(self, first: BlockId, second: BlockId, position: Position) -> tuple[int, int]:
        block_1 = self.get_block(first, position)
        block_2 = self.get_block(second, position)
        if not block_1.same_size(block_2):
            raise NotTheSameSizeError(first, second, position)
        if first == second or not block_1.adjoint(block_2):
            raise NotAdjointError(first, second, position)

        joined = block_1.join(block_2)
        combined = block_1.size() + block_2.size()
        if joined.size() != combined:
            raise NotAdjointError(first, second, position)

        new_id = BlockId((self.counter,))
        self.counter += 1
        del self.blocks[first]
        del self.blocks[second]
        self.blocks[new_id] = joined
        logger.debug("Merged [%s] and [%s] into [%s].", first, second, new_id)
        return MERGE_COST, combined

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def get_block(self, block_id: BlockId, position: Position | None = None) -> BlockData:
        try:
            return self.blocks[block_id]
        except KeyError:
            raise BlockNotFoundError(block_id, position) from None

    def pixel(self, x: int, y: int) -> Color:
        return pixel_at(self.pixels, x, y)
