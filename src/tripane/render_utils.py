"""Utility functions for rendering."""

from __future__ import annotations

import curses
from typing import List, Sequence, Tuple

# Box drawing characters (rounded corners)
BOX_TOP_LEFT = "╭"
BOX_TOP_RIGHT = "╮"
BOX_BOTTOM_LEFT = "╰"
BOX_BOTTOM_RIGHT = "╯"
BOX_HORIZONTAL = "─"
BOX_VERTICAL = "│"

# Share of the screen width given to the ancestor, current and descendant panes
PANE_WIDTH_PERCENTAGES = (15, 45, 30)


def split_columns(
    width: int, percentages: Sequence[int] = PANE_WIDTH_PERCENTAGES
) -> List[Tuple[int, int]]:
    """Split ``width`` into ``(x, width)`` column spans by percentage.

    Columns are laid out left to right from ``x = 0``; whatever the
    percentages leave over stays unused on the right.
    """
    columns: List[Tuple[int, int]] = []
    x_axis = 0
    for percentage in percentages:
        column_width = max(width * percentage // 100, 0)
        columns.append((x_axis, column_width))
        x_axis += column_width
    return columns


def draw_frame(
    stdscr: "curses._CursesWindow",  # type: ignore[name-defined]
    origin_y: int,
    origin_x: int,
    height: int,
    width: int,
) -> None:
    """Draw a rectangular frame with rounded corners."""
    if height < 2 or width < 2:
        return

    top = origin_y
    bottom = origin_y + height - 1
    left = origin_x
    right = origin_x + width - 1

    try:
        stdscr.addstr(top, left, BOX_TOP_LEFT)
        stdscr.addstr(top, right, BOX_TOP_RIGHT)
        stdscr.addstr(bottom, left, BOX_BOTTOM_LEFT)
        # Writing the bottom-right cell of the screen moves the cursor off it
        try:
            stdscr.addstr(bottom, right, BOX_BOTTOM_RIGHT)
        except curses.error:
            pass

        if right - left > 1:
            stdscr.addstr(top, left + 1, BOX_HORIZONTAL * (right - left - 1))
            stdscr.addstr(bottom, left + 1, BOX_HORIZONTAL * (right - left - 1))

        for y_axis in range(top + 1, bottom):
            stdscr.addstr(y_axis, left, BOX_VERTICAL)
            stdscr.addstr(y_axis, right, BOX_VERTICAL)
    except curses.error:
        pass


def draw_frame_title(
    stdscr: "curses._CursesWindow",  # type: ignore[name-defined]
    origin_y: int,
    origin_x: int,
    width: int,
    title: str,
) -> None:
    """Overlay a title along the top border of a frame."""
    available = max(width - 4, 0)
    if available <= 0 or not title:
        return
    truncated = truncate_end(title, available)
    try:
        stdscr.addnstr(origin_y, origin_x + 2, truncated, available, curses.A_BOLD)
    except curses.error:
        pass


def truncate(text: str, max_width: int) -> str:
    """Truncate text to fit within max_width, appending ellipsis if needed."""
    if max_width <= 0:
        return ""
    if len(text) <= max_width:
        return text
    if max_width <= 3:
        return text[:max_width]
    return text[: max_width - 3] + "..."


def truncate_end(text: str, max_width: int) -> str:
    """Truncate text from the end to fit within max_width."""
    if max_width <= 0:
        return ""
    if len(text) <= max_width:
        return text
    return text[-max_width:]


__all__ = [
    "BOX_TOP_LEFT",
    "BOX_TOP_RIGHT",
    "BOX_BOTTOM_LEFT",
    "BOX_BOTTOM_RIGHT",
    "BOX_HORIZONTAL",
    "BOX_VERTICAL",
    "PANE_WIDTH_PERCENTAGES",
    "draw_frame",
    "draw_frame_title",
    "split_columns",
    "truncate",
    "truncate_end",
]
