"""Directory enumeration used to populate the panes."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path
from typing import List, Optional, Tuple

from tripane.state import Entry

logger = logging.getLogger(__name__)


class DirectoryLister:
    """List the immediate children of a directory as :class:`Entry` values.

    Listing never raises for I/O problems: a directory that cannot be read
    (permission denied, removed from disk, not a directory) yields an empty
    tuple so the pane showing it simply stays empty.

    Args:
        show_hidden: Include entries whose name starts with a dot.
        max_entries: Upper bound on the number of entries returned; ``None``
            or ``0`` means unlimited.
    """

    def __init__(self, *, show_hidden: bool = True, max_entries: Optional[int] = None) -> None:
        self.show_hidden = show_hidden
        self.max_entries = max_entries or None

    def list_children(self, path: Path, depth: int = 1) -> Tuple[Entry, ...]:
        """Return the children of ``path`` sorted directories first."""
        if depth != 1:
            raise ValueError(f"Only immediate children can be listed (depth={depth}).")

        directory = Path(path)
        try:
            with os.scandir(directory) as iterator:
                candidates = [item for item in iterator]
        except PermissionError:
            logger.debug("Permission denied reading directory: %s", directory)
            return ()
        except (FileNotFoundError, NotADirectoryError):
            logger.debug("Directory not available: %s", directory)
            return ()
        except OSError as err:
            logger.warning("Could not list %s: %s", directory, err)
            return ()

        items: List[Entry] = []
        for item in candidates:
            if not self.show_hidden and item.name.startswith("."):
                continue
            items.append(
                Entry(
                    path=directory / item.name,
                    name=item.name,
                    is_directory=self._is_dir(item),
                )
            )

        items.sort(key=self._sort_key)
        if self.max_entries is not None and len(items) > self.max_entries:
            logger.info(
                "Truncated listing of %s to %d of %d entries",
                directory,
                self.max_entries,
                len(items),
            )
            items = items[: self.max_entries]
        return tuple(items)

    @staticmethod
    def _sort_key(entry: Entry) -> Tuple[int, str]:
        """Directories come first, then files alphabetically."""
        return (0 if entry.is_directory else 1, entry.name.lower())

    @staticmethod
    def _is_dir(item: os.DirEntry) -> bool:
        """Determine whether the entry refers to a directory, following symlinks."""
        try:
            return stat.S_ISDIR(item.stat().st_mode)
        except OSError:
            return False


def list_children(path: Path, depth: int = 1) -> Tuple[Entry, ...]:
    """List ``path`` with the default lister settings."""
    return DirectoryLister().list_children(path, depth)


__all__ = ["DirectoryLister", "list_children"]
