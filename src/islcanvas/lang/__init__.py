"""ISL language front end: positions, tokens, scanner, AST and parser."""

from __future__ import annotations

from islcanvas.lang.parser import parse
from islcanvas.lang.scanner import scan

__all__ = ["parse", "scan"]
