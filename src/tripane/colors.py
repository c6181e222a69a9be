"""Color management for the three-pane browser."""

from __future__ import annotations

import curses
from enum import IntEnum

from tripane.state import Entry

# Set by init_colors() once the terminal reports color support
_colors_enabled = False


class ColorPair(IntEnum):
    """Color pair constants for curses."""
    DEFAULT = 0
    DIRECTORY = 1
    HIDDEN = 2
    SELECTION = 3
    HEADER = 4


def init_colors() -> None:
    """Initialize curses color pairs.

    Call this after curses initialization and before rendering.
    """
    global _colors_enabled
    if not curses.has_colors():
        _colors_enabled = False
        return

    curses.start_color()
    curses.use_default_colors()

    curses.init_pair(ColorPair.DIRECTORY, curses.COLOR_BLUE, -1)
    curses.init_pair(ColorPair.HIDDEN, 8 if curses.COLORS > 8 else curses.COLOR_WHITE, -1)
    curses.init_pair(ColorPair.SELECTION, curses.COLOR_WHITE, curses.COLOR_BLUE)
    curses.init_pair(ColorPair.HEADER, curses.COLOR_CYAN, -1)
    _colors_enabled = True


def get_entry_color(entry: Entry) -> int:
    """Get the curses attributes used to draw an entry name."""
    if not _colors_enabled:
        return curses.A_BOLD if entry.is_directory else curses.A_NORMAL

    if entry.is_directory:
        return curses.color_pair(ColorPair.DIRECTORY) | curses.A_BOLD

    # Hidden files (dotfiles)
    if entry.is_hidden:
        return curses.color_pair(ColorPair.HIDDEN)

    return curses.A_NORMAL


def get_selection_color() -> int:
    """Attributes for the highlighted row of the current pane."""
    if not _colors_enabled:
        return curses.A_REVERSE
    return curses.color_pair(ColorPair.SELECTION) | curses.A_BOLD


def get_header_color() -> int:
    if not _colors_enabled:
        return curses.A_BOLD
    return curses.color_pair(ColorPair.HEADER) | curses.A_BOLD


__all__ = [
    "ColorPair",
    "get_entry_color",
    "get_header_color",
    "get_selection_color",
    "init_colors",
]
