"""Pixel buffer backing the interpreter.

Pixels live in a ``uint8`` numpy array of shape ``(height, width, 4)``.
Row ``y`` is the canvas row at height ``y``, so row 0 is the bottom edge.
"""

from __future__ import annotations

import numpy as np

from islcanvas.engine.blocks import BlockData
from islcanvas.lang.ast import WHITE, Color

Pixels = np.ndarray  # (height, width, 4) uint8


def new_pixels(width: int, height: int, fill: Color = WHITE) -> Pixels:
    """Allocate a canvas filled with *fill*."""
    if width <= 0 or height <= 0:
        raise ValueError(f"canvas must have a positive size, got {width}x{height}")
    pixels = np.empty((height, width, 4), dtype=np.uint8)
    pixels[:, :] = tuple(fill)
    return pixels


def _region(pixels: Pixels, block: BlockData) -> np.ndarray:
    return pixels[block.bottom:block.top, block.left:block.right]


def fill_block(pixels: Pixels, block: BlockData, color: Color) -> None:
    """Paint every pixel inside *block* with *color*."""
    _region(pixels, block)[...] = tuple(color)


def swap_blocks(pixels: Pixels, first: BlockData, second: BlockData) -> None:
    """Exchange the contents of two equally shaped blocks."""
    if not first.same_shape(second):
        raise ValueError(f"cannot swap {first} with {second}: shapes differ")
    if first == second:
        return
    a = _region(pixels, first).copy()
    _region(pixels, first)[...] = _region(pixels, second)
    _region(pixels, second)[...] = a


def pixel_at(pixels: Pixels, x: int, y: int) -> Color:
    return Color(*(int(c) for c in pixels[y, x]))


def flat_pixels(pixels: Pixels) -> list[Color]:
    """Row-major list of colours, index ``x + y * width``."""
    height, width = pixels.shape[:2]
    return [Color(*map(int, p)) for p in pixels.reshape(height * width, 4)]
