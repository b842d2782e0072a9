"""Glue between source text and a running interpreter."""

from __future__ import annotations

import logging
from pathlib import Path

from islcanvas.engine.canvas import Pixels
from islcanvas.engine.interpreter import Interpreter
from islcanvas.errors import SourceReadError
from islcanvas.lang.parser import parse
from islcanvas.lang.scanner import scan

logger = logging.getLogger(__name__)


def load_source(path: str | Path) -> bytes:
    """Read a program file, wrapping OS failures as :class:`SourceReadError`."""
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise SourceReadError(f"Could not read {path}: {exc.strerror or exc}") from exc


def execute_source(
    source: bytes | str,
    interpreter: Interpreter,
    verbose: bool = False,
) -> tuple[int, Pixels]:
    """Scan, parse and interpret *source* against *interpreter*.

    Raises the first :class:`~islcanvas.errors.IslError` from any stage.
    """
    tokens = scan(source)
    moves = parse(tokens)
    logger.debug("Executing %d moves.", len(moves))
    return interpreter.interpret(moves, verbose=verbose)


def run_file(
    path: str | Path,
    interpreter: Interpreter | None = None,
    verbose: bool = False,
) -> tuple[int, Pixels]:
    """Execute a program file on a fresh (or the given) interpreter."""
    source = load_source(path)
    return execute_source(source, interpreter or Interpreter(), verbose=verbose)
