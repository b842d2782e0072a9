"""Tests for the numpy pixel buffer helpers."""

from __future__ import annotations

import numpy as np
import pytest

from islcanvas.engine.blocks import BlockData
from islcanvas.engine.canvas import fill_block, flat_pixels, new_pixels, pixel_at, swap_blocks
from islcanvas.lang.ast import WHITE, Color

RED = Color(255, 0, 0, 255)
BLUE = Color(0, 0, 255, 255)


class TestNewPixels:
    def test_shape_and_fill(self) -> None:
        pixels = new_pixels(3, 2)
        assert pixels.shape == (2, 3, 4)
        assert pixels.dtype == np.uint8
        assert (pixels == 255).all()

    def test_rejects_empty(self) -> None:
        with pytest.raises(ValueError):
            new_pixels(0, 5)


class TestFill:
    def test_fill_is_half_open(self) -> None:
        pixels = new_pixels(4, 4)
        fill_block(pixels, BlockData.from_bounds(1, 1, 3, 2), RED)
        assert pixel_at(pixels, 1, 1) == RED
        assert pixel_at(pixels, 2, 1) == RED
        assert pixel_at(pixels, 3, 1) == WHITE
        assert pixel_at(pixels, 1, 2) == WHITE
        assert pixel_at(pixels, 0, 0) == WHITE

    def test_flat_is_row_major_from_bottom(self) -> None:
        pixels = new_pixels(3, 2)
        fill_block(pixels, BlockData.from_bounds(2, 1, 3, 2), RED)
        flat = flat_pixels(pixels)
        assert len(flat) == 6
        assert flat[2 + 1 * 3] == RED
        assert flat.count(RED) == 1


class TestSwap:
    def test_contents_exchanged(self) -> None:
        pixels = new_pixels(4, 2)
        left = BlockData.from_bounds(0, 0, 2, 2)
        right = BlockData.from_bounds(2, 0, 4, 2)
        fill_block(pixels, left, RED)
        fill_block(pixels, right, BLUE)
        swap_blocks(pixels, left, right)
        assert pixel_at(pixels, 0, 0) == BLUE
        assert pixel_at(pixels, 3, 1) == RED

    def test_shape_mismatch(self) -> None:
        pixels = new_pixels(4, 4)
        with pytest.raises(ValueError):
            swap_blocks(
                pixels,
                BlockData.from_bounds(0, 0, 4, 1),
                BlockData.from_bounds(0, 2, 2, 4),
            )
