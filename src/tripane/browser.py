"""Core three-pane browser loop."""

from __future__ import annotations

import curses
import logging
from pathlib import Path
from typing import Optional, Tuple

from .events import NavigationEvent, event_for_key
from .formatting import describe_state
from .listing import DirectoryLister
from .render import render_frame
from .rotator import PaneRotator
from .state import NavigationState
from .terminal import poll, terminal_session

logger = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL_MS = 16


class MillerBrowserError(Exception):
    """Raised when the browser cannot start or draw to the terminal."""


class MillerBrowser:
    """Display a parent, current and preview column in a curses interface.

    The browser owns the :class:`NavigationState`; every key press is turned
    into a :class:`NavigationEvent` and handed to the :class:`PaneRotator`,
    whose result replaces the state before the next frame is drawn.
    """

    def __init__(
        self,
        start_dir: Path,
        lister: Optional[DirectoryLister] = None,
        *,
        poll_interval_ms: int = DEFAULT_POLL_INTERVAL_MS,
    ) -> None:
        self.rotator = PaneRotator(lister)
        self.poll_interval_ms = poll_interval_ms
        self.state: NavigationState = self.rotator.initial_state(start_dir.expanduser().resolve())
        self._screen_size: Optional[Tuple[int, int]] = None
        self._status_for: Optional[NavigationState] = None
        self._status = ""

    @property
    def cursor_path(self) -> Path:
        return self.state.cursor_path

    def browse(self) -> Path:
        """Launch the UI and return the directory the user ended in."""
        try:
            with terminal_session(self.poll_interval_ms) as stdscr:
                return self._loop(stdscr)
        except curses.error as err:
            raise MillerBrowserError("Failed to drive the curses UI.") from err

    def status_text(self) -> str:
        """Describe the highlighted entry, reading its metadata once per state."""
        if self._status_for is not self.state:
            self._status = describe_state(self.state)
            self._status_for = self.state
        return self._status

    def handle_event(self, event: NavigationEvent) -> bool:
        """Apply ``event`` to the state; return ``False`` when it asks to quit."""
        if event is NavigationEvent.QUIT:
            return False
        self.state = self.rotator.apply(self.state, event)
        return True

    def _loop(self, stdscr: "curses._CursesWindow") -> Path:  # type: ignore[name-defined]
        """Main curses event loop."""
        self._screen_size = stdscr.getmaxyx()
        while True:
            render_frame(stdscr, self.state, self.status_text())

            key = poll(stdscr)
            if key is not None:
                if key.code == curses.KEY_RESIZE:
                    self._handle_resize(stdscr)
                    continue
                event = event_for_key(key)
                if event is not None:
                    logger.debug("Key %d -> %s", key.code, event.value)
                    if not self.handle_event(event):
                        break

            # Some terminals never send KEY_RESIZE; compare sizes every frame.
            if stdscr.getmaxyx() != self._screen_size:
                self._handle_resize(stdscr)

        return self.state.cursor_path

    def _handle_resize(self, stdscr: "curses._CursesWindow") -> None:  # type: ignore[name-defined]
        """Re-layout and force a full redraw on the next frame."""
        curses.update_lines_cols()
        self._screen_size = stdscr.getmaxyx()
        logger.debug("Terminal resized to %dx%d", self._screen_size[1], self._screen_size[0])
        stdscr.clear()


__all__ = ["DEFAULT_POLL_INTERVAL_MS", "MillerBrowser", "MillerBrowserError"]
