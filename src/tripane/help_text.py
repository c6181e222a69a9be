"""Build the help strip shown under the panes."""

from __future__ import annotations

from typing import List, Tuple

from tripane.events import NavigationEvent

# (full key hint, compact key hint, event)
_HINTS: Tuple[Tuple[str, str, NavigationEvent], ...] = (
    ("↑/k", "k", NavigationEvent.UP),
    ("↓/j", "j", NavigationEvent.DOWN),
    ("←/h", "h", NavigationEvent.ASCEND),
    ("→/l", "l", NavigationEvent.DESCEND),
    ("Esc/q/Ctrl+C", "q", NavigationEvent.QUIT),
)


def build_help_lines(width: int = 0) -> List[str]:
    """Return the key hints, compacted when the screen is narrow."""
    full = " | ".join(f"{keys} {event.label}" for keys, _short, event in _HINTS)
    if width and len(full) > width:
        return [" ".join(f"{short} {event.label}" for _keys, short, event in _HINTS)]
    return [full]


__all__ = ["build_help_lines"]
