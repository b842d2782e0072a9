"""Error taxonomy for the scan → parse → interpret pipeline.

Every stage raises a subclass of :class:`IslError`.  Nothing inside the
pipeline recovers from one; the interfaces catch, render and stop.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from islcanvas.engine.blocks import BlockData
    from islcanvas.lang.ast import BlockId, Point
    from islcanvas.lang.position import Position
    from islcanvas.lang.tokens import TokenType


class IslError(Exception):
    """Base class for every error the pipeline can surface."""

    kind = "ISL"

    def __init__(self, message: str, position: Position | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.position = position

    def __str__(self) -> str:
        if self.position is None:
            return self.message
        return f"{self.message} (at {self.position})"


# ---------------------------------------------------------------------------
# Lexical
# ---------------------------------------------------------------------------


class ScannerError(IslError):
    kind = "Scanner"


class UnknownIdentifierError(ScannerError):
    def __init__(self, lexeme: str, position: Position) -> None:
        super().__init__(f"Unexpected identifier: {lexeme!r}", position)
        self.lexeme = lexeme


class UnexpectedCharacterError(ScannerError):
    def __init__(self, char: str, position: Position) -> None:
        super().__init__(f"Unexpected character: {char!r}", position)
        self.char = char


class NumberTooLargeError(ScannerError):
    def __init__(self, lexeme: str, position: Position) -> None:
        super().__init__(f"Number does not fit in 64 bits: {lexeme}", position)
        self.lexeme = lexeme


# ---------------------------------------------------------------------------
# Syntactic
# ---------------------------------------------------------------------------


class ParserError(IslError):
    kind = "Parser"


class ExpectedTokenError(ParserError):
    def __init__(self, expected: TokenType, reason: str, position: Position) -> None:
        message = f"Expected {expected.value}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, position)
        self.expected = expected
        self.reason = reason


class ExpectedOneOfError(ParserError):
    def __init__(
        self, expected: tuple[TokenType, ...], reason: str, position: Position,
    ) -> None:
        names = ", ".join(t.value for t in expected)
        message = f"Expected one of [{names}]"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, position)
        self.expected = expected
        self.reason = reason


class RgbRangeError(ParserError):
    def __init__(self, value: int, position: Position) -> None:
        super().__init__(f"RGBA channel must be within 0-255, got {value}", position)
        self.value = value


class UnexpectedEofError(ParserError):
    def __init__(self, position: Position) -> None:
        super().__init__("Unexpected end of input", position)


# ---------------------------------------------------------------------------
# Semantic / runtime
# ---------------------------------------------------------------------------


class InterpreterError(IslError):
    kind = "Interpreter"


class OutOfBoundsError(InterpreterError):
    def __init__(self, point: Point, bounds: BlockData, position: Position | None) -> None:
        super().__init__(
            f"Point {point} is not strictly inside block bounds {bounds}", position,
        )
        self.point = point
        self.bounds = bounds


class BlockNotFoundError(InterpreterError):
    def __init__(self, block_id: BlockId, position: Position | None) -> None:
        super().__init__(f"Block [{block_id}] does not exist", position)
        self.block_id = block_id


class NotTheSameSizeError(InterpreterError):
    def __init__(self, first: BlockId, second: BlockId, position: Position | None) -> None:
        super().__init__(
            f"Blocks [{first}] and [{second}] are not the same size", position,
        )
        self.first = first
        self.second = second


class NotAdjointError(InterpreterError):
    def __init__(self, first: BlockId, second: BlockId, position: Position | None) -> None:
        super().__init__(f"Blocks [{first}] and [{second}] are not adjoint", position)
        self.first = first
        self.second = second


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------


class SourceReadError(IslError):
    """The program file or an input line could not be read."""

    kind = "IO"
