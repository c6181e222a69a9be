"""Convert the navigation state into characters on the screen.

The renderer only reads the :class:`NavigationState` it is handed; it never
lists directories or moves cursors.  The layout is fixed:

1. A three-row frame at the top showing the highlighted path.
2. The ancestor, current and descendant panes side by side.
3. A status line describing the highlighted entry.
4. The one-line help strip.
"""

from __future__ import annotations

import curses
from pathlib import Path
from typing import Optional

from tripane.colors import get_entry_color, get_header_color, get_selection_color
from tripane.help_text import build_help_lines
from tripane.render_utils import draw_frame, draw_frame_title, split_columns, truncate, truncate_end
from tripane.state import NavigationState, Pane

# Terminal size limits
MIN_TERMINAL_HEIGHT = 8
MIN_TERMINAL_WIDTH = 30

HEADER_HEIGHT = 3
FOOTER_HEIGHT = 2  # status line + help strip

SELECTOR = "> "


def render_frame(stdscr: "curses._CursesWindow", state: NavigationState, status: str = "") -> None:  # type: ignore[name-defined]
    """Render the full three-pane layout for ``state``.

    ``status`` is the precomputed description of the highlighted entry.
    """
    height, width = stdscr.getmaxyx()
    stdscr.erase()

    if height < MIN_TERMINAL_HEIGHT or width < MIN_TERMINAL_WIDTH:
        try:
            stdscr.addnstr(0, 0, "Terminal too small for browser.", max(width - 1, 0))
        except curses.error:
            pass
        stdscr.refresh()
        return

    render_header(stdscr, state, width=width)

    pane_height = height - HEADER_HEIGHT - FOOTER_HEIGHT
    parent = state.cursor_path.parent
    (ancestor_x, ancestor_w), (current_x, current_w), (descendant_x, descendant_w) = split_columns(width)

    render_pane(
        stdscr,
        pane=state.ancestor,
        title=_title_for(parent if parent != state.cursor_path else None),
        origin_y=HEADER_HEIGHT,
        origin_x=ancestor_x,
        height=pane_height,
        width=ancestor_w,
        show_marker=True,
    )
    render_pane(
        stdscr,
        pane=state.current,
        title=_title_for(state.cursor_path),
        origin_y=HEADER_HEIGHT,
        origin_x=current_x,
        height=pane_height,
        width=current_w,
        show_marker=True,
        highlight=True,
        placeholder="(empty)",
    )
    selected = state.selected_entry()
    render_pane(
        stdscr,
        pane=state.descendant,
        title=selected.name if selected is not None and selected.is_directory else "",
        origin_y=HEADER_HEIGHT,
        origin_x=descendant_x,
        height=pane_height,
        width=descendant_w,
    )

    render_status_line(stdscr, status, origin_y=height - 2, width=width)
    render_help_hints(stdscr, origin_y=height - 1, width=width)

    stdscr.refresh()


def render_header(stdscr: "curses._CursesWindow", state: NavigationState, *, width: int) -> None:  # type: ignore[name-defined]
    """Draw the framed path bar at the top of the screen."""
    draw_frame(stdscr, 0, 0, HEADER_HEIGHT, width)
    selected = state.selected_entry()
    path = selected.path if selected is not None else state.cursor_path
    interior = max(width - 2, 0)
    try:
        stdscr.addnstr(1, 1, truncate_end(str(path), interior), interior, get_header_color())
    except curses.error:
        pass


def render_pane(
    stdscr: "curses._CursesWindow",  # type: ignore[name-defined]
    *,
    pane: Pane,
    title: str,
    origin_y: int,
    origin_x: int,
    height: int,
    width: int,
    show_marker: bool = False,
    highlight: bool = False,
    placeholder: str = "",
) -> None:
    """Render a single pane within the provided bounds."""
    if height < 3 or width < 6:
        return

    draw_frame(stdscr, origin_y, origin_x, height, width)
    draw_frame_title(stdscr, origin_y, origin_x, width, title)

    interior_width = width - 2
    viewport_height = height - 2
    start_x = origin_x + 1

    if pane.is_empty:
        if placeholder:
            try:
                stdscr.addnstr(origin_y + 1, start_x, truncate(placeholder, interior_width), interior_width, curses.A_DIM)
            except curses.error:
                pass
        return

    offset = pane.scroll_offset(viewport_height) if show_marker else 0
    visible = pane.entries[offset : offset + viewport_height]
    gutter = len(SELECTOR) if show_marker else 0
    name_width = max(interior_width - gutter, 0)

    for index, entry in enumerate(visible):
        y = origin_y + 1 + index
        is_selected = show_marker and offset + index == pane.selected
        prefix = SELECTOR if is_selected else " " * gutter
        text = prefix + truncate(entry.display_name, name_width)
        if is_selected and highlight:
            attrs = get_selection_color()
            text = text.ljust(interior_width)
        elif is_selected:
            attrs = get_entry_color(entry) | curses.A_BOLD
        else:
            attrs = get_entry_color(entry)
        try:
            stdscr.addnstr(y, start_x, text, interior_width, attrs)
        except curses.error:
            pass


def render_status_line(stdscr: "curses._CursesWindow", text: str, *, origin_y: int, width: int) -> None:  # type: ignore[name-defined]
    """Describe the highlighted entry on a single row."""
    try:
        stdscr.addnstr(origin_y, 0, truncate(text, width - 1), width - 1, curses.A_BOLD)
    except curses.error:
        pass


def render_help_hints(stdscr: "curses._CursesWindow", *, origin_y: int, width: int) -> None:  # type: ignore[name-defined]
    """Render the compact key hints on the last row."""
    for line in build_help_lines(width - 1)[:1]:
        try:
            stdscr.addnstr(origin_y, 0, truncate(line, width - 1), width - 1, curses.A_DIM)
        except curses.error:
            pass


def _title_for(path: Optional[Path]) -> str:
    if path is None:
        return ""
    return path.name or str(path)


__all__ = [
    "render_frame",
    "render_header",
    "render_help_hints",
    "render_pane",
    "render_status_line",
]
