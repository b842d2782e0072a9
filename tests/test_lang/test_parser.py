"""Tests for the ISL recursive-descent parser."""

from __future__ import annotations

import pytest

from islcanvas.errors import (
    ExpectedOneOfError,
    ExpectedTokenError,
    ParserError,
    RgbRangeError,
    UnexpectedEofError,
)
from islcanvas.lang.ast import (
    BlockId,
    Color,
    ColorMove,
    LCut,
    Merge,
    Orientation,
    PCut,
    Point,
    Swap,
)
from islcanvas.lang.parser import Parser, parse
from islcanvas.lang.scanner import scan
from islcanvas.lang.tokens import TokenType


def parse_str(source: str):
    return parse(scan(source))


class TestMoves:
    def test_point_cut(self) -> None:
        assert parse_str("cut [69] [1, 2]") == [PCut(BlockId((69,)), Point(1, 2))]

    def test_line_cut(self) -> None:
        assert parse_str("cut [69] [y] [75]") == [
            LCut(BlockId((69,)), Orientation.HORIZONTAL, 75),
        ]

    @pytest.mark.parametrize("letter,orientation", [
        ("x", Orientation.VERTICAL),
        ("X", Orientation.VERTICAL),
        ("y", Orientation.HORIZONTAL),
        ("Y", Orientation.HORIZONTAL),
    ])
    def test_orientation_letters(self, letter: str, orientation: Orientation) -> None:
        (move,) = parse_str(f"cut [0] [{letter}] [3]")
        assert isinstance(move, LCut)
        assert move.orientation is orientation

    def test_color(self) -> None:
        assert parse_str("color [12] [0, 0, 0, 1]") == [
            ColorMove(BlockId((12,)), Color(0, 0, 0, 1)),
        ]

    def test_swap(self) -> None:
        assert parse_str("swap [69] [96]") == [Swap(BlockId((69,)), BlockId((96,)))]

    def test_merge(self) -> None:
        assert parse_str("merge [69] [96]") == [Merge(BlockId((69,)), BlockId((96,)))]

    def test_dotted_block_id(self) -> None:
        (move,) = parse_str("color [3.1.0] [1,2,3,4]")
        assert move.block == BlockId((3, 1, 0))
        assert str(move.block) == "3.1.0"

    def test_move_keeps_keyword_position(self) -> None:
        (_, move) = parse_str("cut [0] [1,1]\n  swap [1] [2]")
        assert move.position.line == 1
        assert move.position.col == (2, 6)


class TestProgram:
    def test_lines_in_order(self) -> None:
        moves = parse_str("color [12] [0, 0, 0, 1]\ncut [69] [y] [17]\nmerge [1] [2]\n")
        assert [type(m) for m in moves] == [ColorMove, LCut, Merge]

    def test_trailing_newline_optional(self) -> None:
        assert len(parse_str("swap [1] [2]")) == len(parse_str("swap [1] [2]\n")) == 1

    def test_empty_program(self) -> None:
        assert parse_str("") == []

    def test_comment_lines(self) -> None:
        moves = parse_str("# start\ncut [0] [5,5]\n# between\ncolor [0.0] [1,1,1,1]\n")
        assert len(moves) == 2

    def test_blank_lines_skipped(self) -> None:
        assert len(parse_str("\ncut [0] [5,5]\n\n\ncolor [0.0] [1,1,1,1]\n\n")) == 2

    def test_trailing_comment_before_next_move(self) -> None:
        moves = parse_str("cut [0] [50,40]  # quarter\ncolor [0.0] [255,0,0,255]\n")
        assert [type(m) for m in moves] == [PCut, ColorMove]
        assert moves[1].position.line == 1

    def test_trailing_comment_on_last_line(self) -> None:
        assert len(parse_str("swap [1] [2] # done")) == 1

    def test_parser_requires_eof(self) -> None:
        tokens = scan("cut")[:-1]
        with pytest.raises(ValueError):
            Parser(tokens)


class TestErrors:
    def test_unknown_move_start(self) -> None:
        with pytest.raises(ExpectedOneOfError) as info:
            parse_str("[0]")
        assert info.value.expected == (
            TokenType.CUT, TokenType.COLOR, TokenType.SWAP, TokenType.MERGE,
        )

    def test_bad_orientation(self) -> None:
        with pytest.raises(ExpectedOneOfError) as info:
            parse_str("cut [0] [,] [3]")
        assert info.value.expected == (TokenType.VERTICAL, TokenType.HORIZONTAL)

    def test_missing_comma(self) -> None:
        with pytest.raises(ExpectedTokenError) as info:
            parse_str("cut [0] [1 2]")
        assert info.value.expected is TokenType.COMMA
        assert info.value.position.col == (11, 12)

    def test_rgb_out_of_range(self) -> None:
        with pytest.raises(RgbRangeError) as info:
            parse_str("color [0] [0, 256, 0, 0]")
        assert info.value.value == 256

    def test_rgb_upper_bound_accepted(self) -> None:
        (move,) = parse_str("color [0] [255, 255, 255, 255]")
        assert move.color == Color(255, 255, 255, 255)

    def test_unexpected_eof(self) -> None:
        with pytest.raises(UnexpectedEofError):
            parse_str("cut [0] [1,")

    def test_eof_inside_orientation(self) -> None:
        with pytest.raises(UnexpectedEofError):
            parse_str("cut [0] [")

    def test_two_moves_on_one_line(self) -> None:
        with pytest.raises(ExpectedTokenError) as info:
            parse_str("swap [1] [2] swap [3] [4]")
        assert info.value.expected is TokenType.NEWLINE

    def test_first_error_aborts(self) -> None:
        with pytest.raises(ParserError) as info:
            parse_str("cut [0] [1,1]\ncolor [0] [300,0,0,0]\ncolor [0] [")
        assert info.value.position.line == 1
        assert info.value.kind == "Parser"
