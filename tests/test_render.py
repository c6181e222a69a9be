"""Tests for drawing the three panes into a curses window."""

from __future__ import annotations

from pathlib import Path

from tripane.render import render_frame
from tripane.render_utils import split_columns, truncate, truncate_end
from tripane.rotator import PaneRotator

from conftest import FakeLister, FakeWindow


def _row_containing(window: FakeWindow, text: str) -> int:
    for y in range(window.height):
        if text in window.line(y):
            return y
    raise AssertionError(f"{text!r} not drawn:\n{window.text()}")


def test_split_columns_uses_fixed_percentages():
    assert split_columns(100) == [(0, 15), (15, 45), (60, 30)]
    assert split_columns(0) == [(0, 0), (0, 0), (0, 0)]


def test_truncate_helpers():
    assert truncate("abcdefgh", 6) == "abc..."
    assert truncate("abc", 6) == "abc"
    assert truncate("abcdef", 2) == "ab"
    assert truncate_end("/very/long/path", 5) == "/path"
    assert truncate_end("x", 0) == ""


def test_render_shows_all_three_panes(scenario_lister: FakeLister) -> None:
    state = PaneRotator(scenario_lister).initial_state(Path("/"))
    window = FakeWindow(height=20, width=100)

    render_frame(window, state)

    row = _row_containing(window, "> alpha/")
    line = window.line(row)
    # Current pane starts at 15% of the width, preview at 60%
    assert line.index("> alpha/") == 16
    assert "gamma/" in line
    assert line.index("gamma/") == 61
    assert "beta" in window.line(row + 1)
    assert window.refreshes == 1


def test_render_header_shows_highlighted_path(scenario_lister: FakeLister) -> None:
    state = PaneRotator(scenario_lister).initial_state(Path("/"))
    window = FakeWindow()

    render_frame(window, state)

    assert "/alpha" in window.line(1)


def test_render_marks_directory_in_ancestor(scenario_lister: FakeLister) -> None:
    rotator = PaneRotator(scenario_lister)
    state = rotator.descend(rotator.initial_state(Path("/")))
    window = FakeWindow()

    render_frame(window, state)

    row = _row_containing(window, "> alpha/")
    assert window.line(row).index("> alpha/") == 1
    assert "> gamma/" in window.line(row)


def test_render_empty_directory_placeholder() -> None:
    lister = FakeLister({"/": ["empty"], "/empty": []})
    state = PaneRotator(lister).initial_state(Path("/empty"))
    window = FakeWindow()

    render_frame(window, state)

    assert "(empty)" in window.text()


def test_render_scrolls_to_keep_cursor_visible() -> None:
    names = [f"file{index:02d}" for index in range(40)]
    lister = FakeLister({"/": ["big"], "/big": names})
    rotator = PaneRotator(lister)
    state = rotator.initial_state(Path("/big"))
    for _ in range(30):
        state = rotator.move_down(state)
    window = FakeWindow(height=15, width=100)

    render_frame(window, state)

    assert "> file30" in window.text()
    assert "file00" not in window.text()


def test_render_small_terminal_message(scenario_lister: FakeLister) -> None:
    state = PaneRotator(scenario_lister).initial_state(Path("/"))
    window = FakeWindow(height=5, width=20)

    render_frame(window, state)

    assert window.line(0).startswith("Terminal too small")


def test_render_draws_given_status_line(scenario_lister: FakeLister) -> None:
    state = PaneRotator(scenario_lister).initial_state(Path("/"))
    window = FakeWindow(height=20, width=100)

    render_frame(window, state, "alpha/  1 item")

    assert window.line(18).startswith("alpha/  1 item")
    assert "Parent" in window.line(19)
