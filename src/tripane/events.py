"""Navigation events and the keys that trigger them."""

from __future__ import annotations

import curses
from dataclasses import dataclass
from enum import Enum
from typing import Optional

ESCAPE_KEY = 27
CTRL_C_KEY = 3


class NavigationEvent(Enum):
    UP = "up"
    DOWN = "down"
    ASCEND = "ascend"
    DESCEND = "descend"
    QUIT = "quit"

    @property
    def label(self) -> str:
        if self is NavigationEvent.UP:
            return "Up"
        elif self is NavigationEvent.DOWN:
            return "Down"
        elif self is NavigationEvent.ASCEND:
            return "Parent"
        elif self is NavigationEvent.DESCEND:
            return "Enter"
        else:
            return "Quit"


@dataclass(frozen=True)
class KeyPress:
    """A raw key code together with the control-modifier state."""

    code: int
    ctrl: bool = False

    @classmethod
    def from_code(cls, code: int) -> "KeyPress":
        # curses reports ctrl+letter as the ASCII control code 1-26
        return cls(code=code, ctrl=1 <= code <= 26 and code not in (9, 10, 13))


KEY_BINDINGS = {
    curses.KEY_UP: NavigationEvent.UP,
    ord("k"): NavigationEvent.UP,
    curses.KEY_DOWN: NavigationEvent.DOWN,
    ord("j"): NavigationEvent.DOWN,
    curses.KEY_LEFT: NavigationEvent.ASCEND,
    ord("h"): NavigationEvent.ASCEND,
    curses.KEY_RIGHT: NavigationEvent.DESCEND,
    ord("l"): NavigationEvent.DESCEND,
    ESCAPE_KEY: NavigationEvent.QUIT,
    ord("q"): NavigationEvent.QUIT,
}


def event_for_key(key: KeyPress) -> Optional[NavigationEvent]:
    """Translate a key press into a navigation event, or ``None`` if unbound."""
    if key.ctrl and key.code == CTRL_C_KEY:
        return NavigationEvent.QUIT
    return KEY_BINDINGS.get(key.code)


__all__ = [
    "CTRL_C_KEY",
    "ESCAPE_KEY",
    "KEY_BINDINGS",
    "KeyPress",
    "NavigationEvent",
    "event_for_key",
]
