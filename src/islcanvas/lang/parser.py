"""Recursive-descent parser for ISL programs.

Grammar::

    program      ::= program-line*
    program-line ::= move [NEWLINE]
    move         ::= cut-move | color-move | swap-move | merge-move
    cut-move     ::= "cut" block ( point | orientation line-number )
    color-move   ::= "color" block color
    swap-move    ::= "swap" block block
    merge-move   ::= "merge" block block
    block        ::= "[" block-id "]"
    block-id     ::= NUMBER ( "." NUMBER )*
    point        ::= "[" NUMBER "," NUMBER "]"
    color        ::= "[" rgb "," rgb "," rgb "," rgb "]"
    orientation  ::= "[" ( "x" | "X" | "y" | "Y" ) "]"
    line-number  ::= "[" NUMBER "]"

Blank lines between moves are skipped.  Both cut variants open with ``[``,
so ``cut`` peeks one token past that bracket: a ``NUMBER`` selects a point
cut, anything else a line cut.
"""

from __future__ import annotations

import logging
from typing import Sequence

from islcanvas.errors import (
    ExpectedOneOfError,
    ExpectedTokenError,
    RgbRangeError,
    UnexpectedEofError,
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
from islcanvas.lang.tokens import Token, TokenType

logger = logging.getLogger(__name__)

_MOVE_KEYWORDS = (TokenType.CUT, TokenType.COLOR, TokenType.SWAP, TokenType.MERGE)
_ORIENTATIONS = (TokenType.VERTICAL, TokenType.HORIZONTAL)


class Parser:
    """Consumes a token list ending in ``EOF`` and builds moves."""

    def __init__(self, tokens: Sequence[Token]) -> None:
        if not tokens or tokens[-1].type is not TokenType.EOF:
            raise ValueError("token stream must end with an EOF token")
        self.tokens = list(tokens)
        self.current = 0

    # ------------------------------------------------------------------
    # Cursor helpers
    # ------------------------------------------------------------------

    def peek(self) -> Token:
        return self.tokens[self.current]

    def peek_next(self) -> Token:
        """The token after :meth:`peek`, or ``EOF`` when there is none."""
        index = min(self.current + 1, len(self.tokens) - 1)
        return self.tokens[index]

    def is_at_end(self) -> bool:
        return self.peek().type is TokenType.EOF

    def check(self, token_type: TokenType) -> bool:
        return self.peek().type is token_type

    def advance(self) -> Token:
        token = self.peek()
        if token.type is TokenType.EOF:
            raise UnexpectedEofError(token.position)
        self.current += 1
        return token

    def match(self, token_type: TokenType) -> bool:
        if self.check(token_type):
            self.advance()
            return True
        return False

    def consume(self, token_type: TokenType, reason: str = "") -> Token:
        if self.check(token_type):
            return self.advance()
        token = self.peek()
        if token.type is TokenType.EOF:
            raise UnexpectedEofError(token.position)
        raise ExpectedTokenError(token_type, reason, token.position)

    # ------------------------------------------------------------------
    # Productions
    # ------------------------------------------------------------------

    def parse(self) -> list[Move]:
        moves: list[Move] = []
        while True:
            while self.match(TokenType.NEWLINE):
                pass
            if self.is_at_end():
                break
            moves.append(self.program_line())
        logger.debug("Parsed %d moves.", len(moves))
        return moves

    def program_line(self) -> Move:
        move = self.move()
        if self.match(TokenType.NEWLINE) or self.is_at_end():
            return move
        # A trailing comment swallows its newline, so compare lines instead.
        last_line = self.tokens[self.current - 1].position.line
        token = self.peek()
        if token.position.line == last_line:
            raise ExpectedTokenError(
                TokenType.NEWLINE, "only one move is allowed per line", token.position,
            )
        return move

    def move(self) -> Move:
        token = self.peek()
        if token.type is TokenType.CUT:
            return self.cut_move()
        if token.type is TokenType.COLOR:
            return self.color_move()
        if token.type is TokenType.SWAP:
            return self.swap_move()
        if token.type is TokenType.MERGE:
            return self.merge_move()
        raise ExpectedOneOfError(
            _MOVE_KEYWORDS, "a line must start with a move name", token.position,
        )

    def cut_move(self) -> Move:
        position = self.consume(TokenType.CUT).position
        block = self.block()
        if self.peek_next().type is TokenType.NUMBER:
            return PCut(block, self.point(), position)
        orientation = self.orientation()
        line_no = self.line_number()
        return LCut(block, orientation, line_no, position)

    def color_move(self) -> ColorMove:
        position = self.consume(TokenType.COLOR).position
        block = self.block()
        return ColorMove(block, self.color(), position)

    def swap_move(self) -> Swap:
        position = self.consume(TokenType.SWAP).position
        return Swap(self.block(), self.block(), position)

    def merge_move(self) -> Merge:
        position = self.consume(TokenType.MERGE).position
        return Merge(self.block(), self.block(), position)

    def block(self) -> BlockId:
        self.consume(TokenType.LEFT_BRACE, "a block starts with '['")
        block_id = self.block_id()
        self.consume(TokenType.RIGHT_BRACE, "a block ends with ']'")
        return block_id

    def block_id(self) -> BlockId:
        segments = [self.number()]
        while self.match(TokenType.DOT):
            segments.append(self.number())
        return BlockId(segments)

    def point(self) -> Point:
        self.consume(TokenType.LEFT_BRACE, "a point starts with '['")
        x = self.number()
        self.consume(TokenType.COMMA, "expected ',' after the x value of a point")
        y = self.number()
        self.consume(TokenType.RIGHT_BRACE, "expected ']' after the y value of a point")
        return Point(x, y)

    def color(self) -> Color:
        self.consume(TokenType.LEFT_BRACE, "a color starts with '['")
        channels = [self.rgb_value()]
        for name in "rgb":
            self.consume(TokenType.COMMA, f"expected ',' after the '{name}' value of a color")
            channels.append(self.rgb_value())
        self.consume(TokenType.RIGHT_BRACE, "expected ']' after the 'a' value of a color")
        return Color(*channels)

    def rgb_value(self) -> int:
        token = self.consume(TokenType.NUMBER, "an rgba channel is a number from 0-255")
        assert token.number is not None
        if token.number > 255:
            raise RgbRangeError(token.number, token.position)
        return token.number

    def orientation(self) -> Orientation:
        self.consume(TokenType.LEFT_BRACE, "an orientation starts with '['")
        token = self.advance()
        if token.type is TokenType.VERTICAL:
            orientation = Orientation.VERTICAL
        elif token.type is TokenType.HORIZONTAL:
            orientation = Orientation.HORIZONTAL
        else:
            raise ExpectedOneOfError(_ORIENTATIONS, "expected an orientation", token.position)
        self.consume(TokenType.RIGHT_BRACE, "an orientation ends with ']'")
        return orientation

    def line_number(self) -> int:
        self.consume(TokenType.LEFT_BRACE, "a line number starts with '['")
        value = self.number()
        self.consume(TokenType.RIGHT_BRACE, "a line number ends with ']'")
        return value

    def number(self) -> int:
        token = self.consume(TokenType.NUMBER)
        assert token.number is not None
        return token.number


def parse(tokens: Sequence[Token]) -> list[Move]:
    """Parse *tokens* into moves; the first error aborts the whole parse."""
    return Parser(tokens).parse()
