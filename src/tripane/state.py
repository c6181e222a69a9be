"""Directory pane and navigation state models."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional, Tuple


class PaneStateError(Exception):
    """Raised when pane state operations fail."""


class EmptyPaneError(PaneStateError):
    """Raised when the selection of an empty pane is read."""


@dataclass(frozen=True)
class Entry:
    """One child of a directory as reported by the lister."""

    path: Path
    name: str
    is_directory: bool

    @property
    def display_name(self) -> str:
        """Return the text shown for the entry."""
        suffix = "/" if self.is_directory else ""
        return f"{self.name}{suffix}"

    @property
    def is_hidden(self) -> bool:
        return self.name.startswith(".")


@dataclass
class Pane:
    """An ordered directory listing with a selection cursor.

    ``selected`` is only meaningful while ``entries`` is non-empty.
    """

    entries: Tuple[Entry, ...] = ()
    selected: int = 0

    @classmethod
    def empty(cls) -> "Pane":
        return cls()

    @classmethod
    def from_entries(cls, entries: Iterable[Entry]) -> "Pane":
        """Build a freshly populated pane with the cursor on the first entry."""
        return cls(entries=tuple(entries), selected=0)

    @property
    def is_empty(self) -> bool:
        return not self.entries

    def copy(self) -> "Pane":
        """Return a pane sharing the (immutable) entries with its own cursor."""
        return Pane(entries=self.entries, selected=self.selected)

    def select_next(self) -> None:
        """Move the cursor down one entry, stopping at the last one."""
        if self.selected + 1 < len(self.entries):
            self.selected += 1

    def select_previous(self) -> None:
        """Move the cursor up one entry, stopping at the first one."""
        if self.selected > 0:
            self.selected -= 1

    def current_entry(self) -> Entry:
        """Return the highlighted entry.

        Callers must check :attr:`is_empty` first; reading the selection of an
        empty pane raises :class:`EmptyPaneError`.
        """
        if not self.entries:
            raise EmptyPaneError("Pane has no entries to select.")
        return self.entries[self.selected]

    def locate(self, path: Path) -> bool:
        """Point the cursor at the entry for ``path``.

        Returns ``False`` and leaves the cursor alone when no entry matches.
        """
        for index, entry in enumerate(self.entries):
            if entry.path == path:
                self.selected = index
                return True
        return False

    def scroll_offset(self, viewport_height: int) -> int:
        """Return the first visible row that keeps the cursor on screen."""
        if viewport_height <= 0 or not self.entries:
            return 0
        offset = max(self.selected - viewport_height + 1, 0)
        max_offset = max(len(self.entries) - viewport_height, 0)
        return min(offset, max_offset)


@dataclass
class NavigationState:
    """The three panes bound to their roles plus the active directory."""

    cursor_path: Path
    ancestor: Pane = field(default_factory=Pane.empty)
    current: Pane = field(default_factory=Pane.empty)
    descendant: Pane = field(default_factory=Pane.empty)

    def selected_entry(self) -> Optional[Entry]:
        """Return the highlighted entry of the current pane, if any."""
        if self.current.is_empty:
            return None
        return self.current.current_entry()


__all__ = ["Entry", "EmptyPaneError", "NavigationState", "Pane", "PaneStateError"]
