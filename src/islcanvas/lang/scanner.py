"""Lexical scanner for ISL programs.

One forward pass over the source bytes with a single byte of lookahead.
Whitespace other than newline is skipped; any byte outside the recognised
classes raises :class:`~islcanvas.errors.UnexpectedCharacterError`.
"""

from __future__ import annotations

import logging

from islcanvas.errors import (
    NumberTooLargeError,
    UnexpectedCharacterError,
    UnknownIdentifierError,
)
from islcanvas.lang.position import Position
from islcanvas.lang.tokens import KEYWORDS, Token, TokenType

logger = logging.getLogger(__name__)

MAX_NUMBER = 2**64 - 1

_SINGLE_BYTE: dict[int, TokenType] = {
    ord("x"): TokenType.VERTICAL,
    ord("X"): TokenType.VERTICAL,
    ord("y"): TokenType.HORIZONTAL,
    ord("Y"): TokenType.HORIZONTAL,
    ord("["): TokenType.LEFT_BRACE,
    ord("]"): TokenType.RIGHT_BRACE,
    ord(","): TokenType.COMMA,
    ord("."): TokenType.DOT,
}

_BLANKS = frozenset(b" \t\r")


def _is_digit(byte: int) -> bool:
    return 0x30 <= byte <= 0x39


def _is_alpha(byte: int) -> bool:
    return 0x41 <= byte <= 0x5A or 0x61 <= byte <= 0x7A


def _is_ident(byte: int) -> bool:
    return _is_alpha(byte) or byte == ord("_")


class Scanner:
    """Turns source bytes into a flat list of :class:`Token`."""

    def __init__(self, source: bytes | str) -> None:
        if isinstance(source, str):
            self.text = source
            self.source = source.encode("utf-8")
        else:
            self.source = bytes(source)
            self.text = self.source.decode("utf-8", errors="replace")
        self.start = 0
        self.current = 0
        self.line = 0
        self.col_start = 0
        self.col_end = 0

    # ------------------------------------------------------------------
    # Cursor
    # ------------------------------------------------------------------

    def is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def peek(self) -> int | None:
        if self.is_at_end():
            return None
        return self.source[self.current]

    def advance(self) -> int:
        byte = self.source[self.current]
        self.current += 1
        self.col_end += 1
        return byte

    def lexeme(self) -> str:
        return self.source[self.start:self.current].decode("ascii")

    def position(self) -> Position:
        return Position(self.line, (self.col_start, self.col_end), self.text)

    def _new_line(self) -> None:
        self.line += 1
        self.col_start = 0
        self.col_end = 0

    def _token(self, token_type: TokenType, number: int | None = None) -> Token:
        return Token(token_type, self.position(), number)

    # ------------------------------------------------------------------
    # Scanning
    # ------------------------------------------------------------------

    def scan_tokens(self) -> list[Token]:
        tokens: list[Token] = []
        while not self.is_at_end():
            self.start = self.current
            self.col_start = self.col_end
            token = self.scan_token()
            if token is not None:
                tokens.append(token)

        self.start = self.current
        self.col_start = self.col_end
        tokens.append(self._token(TokenType.EOF))
        logger.debug("Scanned %d tokens over %d lines.", len(tokens), self.line + 1)
        return tokens

    def scan_token(self) -> Token | None:
        byte = self.advance()

        if byte in _SINGLE_BYTE:
            return self._token(_SINGLE_BYTE[byte])
        if byte == ord("\n"):
            token = self._token(TokenType.NEWLINE)
            self._new_line()
            return token
        if byte == ord("#"):
            self._skip_comment()
            return None
        if _is_digit(byte):
            return self._number()
        if _is_alpha(byte):
            return self._identifier()
        if byte in _BLANKS:
            return None

        raise UnexpectedCharacterError(
            self.source[self.start:self.current].decode("utf-8", errors="replace"),
            self.position(),
        )

    def _number(self) -> Token:
        while (byte := self.peek()) is not None and _is_digit(byte):
            self.advance()
        lexeme = self.lexeme()
        value = int(lexeme)
        if value > MAX_NUMBER:
            raise NumberTooLargeError(lexeme, self.position())
        return self._token(TokenType.NUMBER, value)

    def _identifier(self) -> Token:
        while (byte := self.peek()) is not None and _is_ident(byte):
            self.advance()
        lexeme = self.lexeme()
        token_type = KEYWORDS.get(lexeme)
        if token_type is None:
            raise UnknownIdentifierError(lexeme, self.position())
        return self._token(token_type)

    def _skip_comment(self) -> None:
        # The terminating newline belongs to the comment: no NEWLINE token.
        while not self.is_at_end():
            if self.advance() == ord("\n"):
                self._new_line()
                return


def scan(source: bytes | str) -> list[Token]:
    """Scan *source* into tokens, always ending with exactly one ``EOF``."""
    return Scanner(source).scan_tokens()
