"""Tests for the interactive session loop."""

from __future__ import annotations

import io
from typing import Iterator

from rich.console import Console

from islcanvas.engine.interpreter import Interpreter
from islcanvas.interfaces.repl import is_quit, run_repl
from islcanvas.interfaces.terminal_ui import ISL_THEME, TerminalUI
from islcanvas.lang.ast import WHITE


def make_ui() -> tuple[TerminalUI, io.StringIO]:
    buffer = io.StringIO()
    console = Console(file=buffer, theme=ISL_THEME, width=120, highlight=False)
    return TerminalUI(console), buffer


def reader(lines: list[str]):
    it: Iterator[str] = iter(lines)

    def read() -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read


def run(lines: list[str], verbose: bool = False) -> tuple[int, str, Interpreter]:
    ui, buffer = make_ui()
    interp = Interpreter(width=100, height=80, background=WHITE)
    code = run_repl(verbose=verbose, interpreter=interp, read_line=reader(lines), ui=ui)
    return code, buffer.getvalue(), interp


class TestQuit:
    def test_colon_q(self) -> None:
        assert is_quit(":q")
        assert is_quit("  exit  ")
        assert not is_quit("cut [0] [1,1]")

    def test_quit_word_ends_session(self) -> None:
        code, out, interp = run([":q", "cut [0] [50,40]"])
        assert code == 0
        assert "Goodbye" in out
        assert len(interp.blocks) == 1

    def test_eof_ends_session(self) -> None:
        code, out, _ = run([])
        assert code == 0
        assert "ICFP ISL Interpreter" in out


class TestSession:
    def test_running_cost(self) -> None:
        code, out, interp = run(["cut [0] [50,40]", "", "color [0.0] [255,0,0,255]", "exit"])
        assert code == 0
        assert "Cost: 10" in out
        assert "Cost: 30" in out
        assert interp.total_cost == 30

    def test_error_ends_session(self) -> None:
        code, out, interp = run(["cut [0] [999,999]", "cut [0] [50,40]"])
        assert code == 1
        assert "Interpreter Error:" in out
        assert len(interp.blocks) == 1

    def test_scanner_error_ends_session(self) -> None:
        code, out, _ = run(["paint [0]"])
        assert code == 1
        assert "Scanner Error:" in out

    def test_verbose_prints_trace(self) -> None:
        _, out, _ = run(["cut [0] [50,40]", ":q"], verbose=True)
        assert "cut [0] [50,40]" in out

    def test_input_failure(self) -> None:
        ui, buffer = make_ui()

        def broken() -> str:
            raise OSError("device gone")

        code = run_repl(interpreter=Interpreter(10, 10, WHITE), read_line=broken, ui=ui)
        assert code == 1
        assert "IO Error:" in buffer.getvalue()
