"""Canvas block engine: block geometry, pixel buffer and the interpreter."""

from __future__ import annotations

from islcanvas.engine.blocks import BlockData
from islcanvas.engine.interpreter import Interpreter, MoveReport

__all__ = ["BlockData", "Interpreter", "MoveReport"]
