"""Interactive ISL session.

Each line is scanned, parsed and interpreted against one persistent
interpreter, and the running cost is printed.  The session ends on a line
containing ``:q`` or ``exit``, on end of input, or on the first error of
any kind.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Callable

from islcanvas.config.settings import settings
from islcanvas.engine.interpreter import Interpreter
from islcanvas.errors import IslError, SourceReadError
from islcanvas.interfaces.terminal_ui import TerminalUI
from islcanvas.runner import execute_source

logger = logging.getLogger(__name__)

ReadLine = Callable[[], str]


# ---------------------------------------------------------------------------
# prompt_toolkit input (with fallback)
# ---------------------------------------------------------------------------


def _make_prompt_session() -> Any:
    """Create a prompt_toolkit PromptSession with file history, or return None."""
    try:
        from prompt_toolkit import PromptSession
        from prompt_toolkit.history import FileHistory

        history_path = settings.repl.history_file
        history_path.parent.mkdir(parents=True, exist_ok=True)
        return PromptSession(history=FileHistory(str(history_path)), multiline=False)
    except Exception:
        logger.debug("prompt_toolkit unavailable, using input().", exc_info=True)
        return None


def _default_reader() -> ReadLine:
    session = _make_prompt_session() if sys.stdin.isatty() else None
    prompt = settings.repl.prompt
    if session is not None:
        return lambda: session.prompt(prompt)
    return lambda: input(prompt)


def is_quit(line: str) -> bool:
    return any(word in line for word in settings.repl.quit_words)


# ---------------------------------------------------------------------------
# Main REPL
# ---------------------------------------------------------------------------


def run_repl(
    verbose: bool = False,
    interpreter: Interpreter | None = None,
    read_line: ReadLine | None = None,
    ui: TerminalUI | None = None,
) -> int:
    """Run the session and return an exit code (0 normal, 1 after an error)."""
    ui = ui or TerminalUI()
    interpreter = interpreter or Interpreter()
    read_line = read_line or _default_reader()

    ui.print_banner()

    while True:
        try:
            line = read_line()
        except (EOFError, KeyboardInterrupt):
            ui.print_goodbye()
            return 0
        except OSError as exc:
            ui.print_error(SourceReadError(f"Could not read input line: {exc}"))
            return 1

        if is_quit(line):
            ui.print_goodbye()
            return 0
        if not line.strip():
            continue

        try:
            seen = len(interpreter.trace)
            execute_source(line + "\n", interpreter, verbose=verbose)
        except IslError as exc:
            logger.debug("Session ended by %s.", type(exc).__name__)
            ui.print_error(exc)
            return 1

        if verbose:
            ui.print_trace(interpreter.trace[seen:])
        ui.print_cost(interpreter.total_cost)
