"""Pane rotation: the rules that keep the three columns consistent.

Every transition takes a :class:`NavigationState` and returns a new one; the
input state is never modified, so a caller can keep the previous snapshot
around and compare.  Only one directory is enumerated per transition because
the pane moving into a new role already holds the listing that role needs:

* Ascend: the old ancestor is the listing of the new current directory and
  the old current is the listing of its selected child.  Only the new
  grandparent has to be read, unless the directory being left is missing
  from its parent's listing and the preview must follow another entry.
* Descend: the old current becomes the ancestor and the old descendant
  becomes the current pane.  Only the new preview has to be read.

Boundary cases (the filesystem root, an empty pane, a file selection, an
empty subdirectory) return the state unchanged.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Tuple

from tripane.events import NavigationEvent
from tripane.listing import DirectoryLister
from tripane.state import Entry, NavigationState, Pane

logger = logging.getLogger(__name__)


def parent_of(path: Path) -> Optional[Path]:
    """Return the parent directory of ``path``, or ``None`` at the root."""
    parent = path.parent
    if parent == path:
        return None
    return parent


class PaneRotator:
    """Apply navigation events to a :class:`NavigationState`."""

    def __init__(self, lister: Optional[DirectoryLister] = None) -> None:
        self.lister = lister if lister is not None else DirectoryLister()

    def initial_state(self, path: Path) -> NavigationState:
        """Build a consistent state for ``path`` from scratch."""
        current = Pane.from_entries(self._list(path))
        state = NavigationState(
            cursor_path=path,
            ancestor=self._ancestor_for(path),
            current=current,
        )
        state.descendant = self._descendant_for(current)
        return state

    def apply(self, state: NavigationState, event: NavigationEvent) -> NavigationState:
        """Dispatch ``event`` to its transition; unknown events are no-ops."""
        if event is NavigationEvent.DOWN:
            return self.move_down(state)
        if event is NavigationEvent.UP:
            return self.move_up(state)
        if event is NavigationEvent.ASCEND:
            return self.ascend(state)
        if event is NavigationEvent.DESCEND:
            return self.descend(state)
        return state

    def move_down(self, state: NavigationState) -> NavigationState:
        """Select the next sibling and refresh the preview."""
        if state.current.is_empty:
            return state
        current = state.current.copy()
        current.select_next()
        return self._with_current(state, current)

    def move_up(self, state: NavigationState) -> NavigationState:
        """Select the previous sibling and refresh the preview."""
        if state.current.is_empty:
            return state
        current = state.current.copy()
        current.select_previous()
        return self._with_current(state, current)

    def ascend(self, state: NavigationState) -> NavigationState:
        """Make the parent directory current."""
        new_cursor_path = parent_of(state.cursor_path)
        if new_cursor_path is None:
            return state

        ancestor = self._ancestor_for(new_cursor_path)
        current = state.ancestor.copy()
        if current.is_empty:
            # The parent could not be listed; nothing is selected to preview.
            descendant = Pane.empty()
        elif current.locate(state.cursor_path):
            descendant = state.current.copy()
            descendant.selected = 0
        else:
            # The directory we leave is hidden, past the entry cap or gone, so
            # the preview follows whatever the cursor fell back to.
            logger.debug("%s is not listed in %s", state.cursor_path, new_cursor_path)
            current.selected = 0
            descendant = self._descendant_for(current)
        return NavigationState(
            cursor_path=new_cursor_path,
            ancestor=ancestor,
            current=current,
            descendant=descendant,
        )

    def descend(self, state: NavigationState) -> NavigationState:
        """Enter the selected subdirectory when it has something to show."""
        entry = state.selected_entry()
        if entry is None or not entry.is_directory:
            return state
        if state.descendant.is_empty:
            return state

        current = state.descendant.copy()
        return NavigationState(
            cursor_path=entry.path,
            ancestor=state.current.copy(),
            current=current,
            descendant=self._descendant_for(current),
        )

    def _with_current(self, state: NavigationState, current: Pane) -> NavigationState:
        return NavigationState(
            cursor_path=state.cursor_path,
            ancestor=state.ancestor,
            current=current,
            descendant=self._descendant_for(current),
        )

    def _ancestor_for(self, path: Path) -> Pane:
        parent = parent_of(path)
        if parent is None:
            return Pane.empty()
        ancestor = Pane.from_entries(self._list(parent))
        if not ancestor.locate(path):
            # Renamed or removed since it was listed; the cursor stays on top.
            logger.debug("%s is no longer listed in %s", path, parent)
        return ancestor

    def _descendant_for(self, current: Pane) -> Pane:
        if current.is_empty:
            return Pane.empty()
        entry: Entry = current.current_entry()
        if not entry.is_directory:
            return Pane.empty()
        return Pane.from_entries(self._list(entry.path))

    def _list(self, path: Path) -> Tuple[Entry, ...]:
        try:
            return tuple(self.lister.list_children(path))
        except OSError as err:
            logger.warning("Listing %s failed: %s", path, err)
            return ()


__all__ = ["PaneRotator", "parent_of"]
