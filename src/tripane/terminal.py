"""Terminal control helpers for the TUI session.

Owns the raw-mode lifecycle: the terminal is switched into curses raw mode on
entry and restored on every way out of the ``with`` block, including
exceptions, Ctrl+C delivered as a signal, and termination signals.
"""

from __future__ import annotations

import contextlib
import curses
import logging
import signal
from typing import Dict, Iterator, Optional

from tripane.colors import init_colors
from tripane.events import KeyPress

logger = logging.getLogger(__name__)

# Signals that would otherwise end the process without restoring the terminal
_TERMINATING_SIGNALS = tuple(
    sig for sig in (getattr(signal, "SIGTERM", None), getattr(signal, "SIGHUP", None)) if sig is not None
)


def _raise_system_exit(signum: int, _frame) -> None:
    raise SystemExit(128 + signum)


@contextlib.contextmanager
def _exit_on_signals() -> Iterator[None]:
    """Turn termination signals into ``SystemExit`` while the block runs."""
    previous: Dict[int, object] = {}
    for sig in _TERMINATING_SIGNALS:
        try:
            previous[sig] = signal.signal(sig, _raise_system_exit)
        except (OSError, ValueError):
            # Not on the main thread; the caller keeps the default behaviour.
            continue
    try:
        yield
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler)


@contextlib.contextmanager
def terminal_session(poll_interval_ms: int = 16) -> Iterator["curses._CursesWindow"]:  # type: ignore[name-defined]
    """Context manager that yields a curses screen in raw mode.

    ``getch`` on the yielded window waits at most ``poll_interval_ms``.
    """
    with _exit_on_signals():
        stdscr = curses.initscr()
        try:
            curses.noecho()
            curses.raw()
            stdscr.keypad(True)
            # Deliver a lone Escape without the default one second delay
            curses.set_escdelay(25)
            try:
                curses.curs_set(0)
            except curses.error:
                pass
            init_colors()
            stdscr.timeout(poll_interval_ms)
            logger.debug("Terminal session started")
            yield stdscr
        finally:
            stdscr.keypad(False)
            curses.noraw()
            curses.echo()
            curses.endwin()
            logger.debug("Terminal session restored")


def poll(stdscr: "curses._CursesWindow") -> Optional[KeyPress]:  # type: ignore[name-defined]
    """Wait for one key press within the window's timeout."""
    code = stdscr.getch()
    if code == -1:
        return None
    return KeyPress.from_code(code)


__all__ = ["poll", "terminal_session"]
