"""Shared test fixtures for the ISL interpreter.

Provides small canvases and helpers so individual test modules stay
focused.
"""

from __future__ import annotations

import pytest

from islcanvas.engine.interpreter import Interpreter
from islcanvas.lang.ast import WHITE, Move
from islcanvas.lang.parser import parse
from islcanvas.lang.scanner import scan

# ---------------------------------------------------------------------------
# Interpreter fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def interpreter() -> Interpreter:
    """A 100x80 white canvas (area 8000)."""
    return Interpreter(width=100, height=80, background=WHITE)


@pytest.fixture()
def tiny() -> Interpreter:
    """A 4x4 white canvas, small enough to inspect pixel by pixel."""
    return Interpreter(width=4, height=4, background=WHITE)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def moves_of(source: str) -> list[Move]:
    return parse(scan(source))


@pytest.fixture()
def compile_moves():
    return moves_of
