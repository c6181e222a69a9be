"""Small helpers that turn raw file metadata into readable text."""

from __future__ import annotations

import os
import stat
from datetime import datetime
from typing import Optional

from tripane.state import Entry, NavigationState


def format_size(size: int) -> str:
    """Convert a byte count into a friendly string such as ``12.4K``."""
    units = ["B", "K", "M", "G", "T", "P", "E", "Z", "Y"]
    value = float(size)
    index = 0
    while value >= 1024 and index < len(units) - 1:
        value /= 1024
        index += 1
    unit = units[index]
    if unit == "B":
        return f"{int(value)}{unit}"
    formatted = f"{value:.1f}".rstrip("0").rstrip(".")
    return f"{formatted}{unit}"


def format_timestamp(timestamp: datetime) -> str:
    """Render a timestamp using the short ``Jan 15 14:30`` format."""
    return timestamp.strftime("%b %d %H:%M")


def describe_entry(entry: Optional[Entry], child_count: Optional[int] = None) -> str:
    """Build the status line text for the highlighted entry.

    Directories report how many children the preview pane holds; files report
    their permissions, size and modification time.  Metadata that cannot be
    read is left out rather than reported as an error.
    """
    if entry is None:
        return "(empty)"

    parts = [entry.display_name]
    try:
        info: Optional[os.stat_result] = os.stat(entry.path)
    except OSError:
        info = None

    if info is not None:
        parts.append(stat.filemode(info.st_mode))
    if entry.is_directory:
        if child_count is not None:
            noun = "item" if child_count == 1 else "items"
            parts.append(f"{child_count} {noun}")
    elif info is not None:
        parts.append(format_size(info.st_size))
    if info is not None:
        parts.append(format_timestamp(datetime.fromtimestamp(info.st_mtime)))
    return "  ".join(parts)


def describe_state(state: NavigationState) -> str:
    """Status line text for the entry highlighted in ``state``."""
    selected = state.selected_entry()
    child_count = len(state.descendant.entries) if selected is not None and selected.is_directory else None
    return describe_entry(selected, child_count)


__all__ = ["describe_entry", "describe_state", "format_size", "format_timestamp"]
