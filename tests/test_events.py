"""Tests for key to navigation event mapping."""

import curses

from tripane.events import CTRL_C_KEY, ESCAPE_KEY, KeyPress, NavigationEvent, event_for_key


def test_arrow_keys_map_to_navigation():
    assert event_for_key(KeyPress(curses.KEY_UP)) is NavigationEvent.UP
    assert event_for_key(KeyPress(curses.KEY_DOWN)) is NavigationEvent.DOWN
    assert event_for_key(KeyPress(curses.KEY_LEFT)) is NavigationEvent.ASCEND
    assert event_for_key(KeyPress(curses.KEY_RIGHT)) is NavigationEvent.DESCEND


def test_vim_keys_map_to_navigation():
    assert event_for_key(KeyPress(ord("k"))) is NavigationEvent.UP
    assert event_for_key(KeyPress(ord("j"))) is NavigationEvent.DOWN
    assert event_for_key(KeyPress(ord("h"))) is NavigationEvent.ASCEND
    assert event_for_key(KeyPress(ord("l"))) is NavigationEvent.DESCEND


def test_escape_and_q_quit():
    assert event_for_key(KeyPress(ESCAPE_KEY)) is NavigationEvent.QUIT
    assert event_for_key(KeyPress(ord("q"))) is NavigationEvent.QUIT


def test_ctrl_c_quits_only_with_ctrl_modifier():
    assert event_for_key(KeyPress.from_code(CTRL_C_KEY)) is NavigationEvent.QUIT
    assert event_for_key(KeyPress(CTRL_C_KEY, ctrl=False)) is None


def test_ctrl_modifier_detection():
    assert KeyPress.from_code(CTRL_C_KEY).ctrl
    assert not KeyPress.from_code(ord("c")).ctrl
    # Tab and Enter share control codes but are not ctrl chords
    assert not KeyPress.from_code(9).ctrl
    assert not KeyPress.from_code(10).ctrl


def test_unbound_keys_are_ignored():
    assert event_for_key(KeyPress(ord("x"))) is None
    assert event_for_key(KeyPress(curses.KEY_RESIZE)) is None


def test_event_labels():
    assert NavigationEvent.ASCEND.label == "Parent"
    assert NavigationEvent.DESCEND.label == "Enter"
    assert NavigationEvent.QUIT.value == "quit"
