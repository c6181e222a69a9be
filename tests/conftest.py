"""Shared fixtures: an in-memory directory tree and a fake curses window."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Optional

import pytest

from tripane import config
from tripane.state import Entry


class FakeLister:
    """Lister backed by a dict of ``directory -> child names``.

    A child is a directory when its path is itself a key of the tree; the
    children keep the order they are given in.
    """

    def __init__(self, tree: Dict[str, Iterable[str]]) -> None:
        self.tree: Dict[Path, List[str]] = {Path(key): list(value) for key, value in tree.items()}
        self.calls: List[Path] = []
        self.failing: set = set()

    def list_children(self, path: Path, depth: int = 1):
        path = Path(path)
        self.calls.append(path)
        if path in self.failing:
            raise PermissionError(f"Permission denied: {path}")
        return tuple(
            Entry(path=path / name, name=name, is_directory=(path / name) in self.tree)
            for name in self.tree.get(path, [])
        )


class FakeWindow:
    """Records what the renderer writes into a grid of characters."""

    def __init__(self, height: int = 24, width: int = 100, keys: Optional[List[int]] = None) -> None:
        self.height = height
        self.width = width
        self.rows = [[" "] * width for _ in range(height)]
        self.attrs: Dict[tuple, int] = {}
        self.keys = list(keys or [])
        self.refreshes = 0
        self.clears = 0

    def getmaxyx(self):
        return self.height, self.width

    def erase(self) -> None:
        self.rows = [[" "] * self.width for _ in range(self.height)]
        self.attrs = {}

    def clear(self) -> None:
        self.clears += 1
        self.erase()

    def refresh(self) -> None:
        self.refreshes += 1

    def addstr(self, y: int, x: int, text: str, attr: int = 0) -> None:
        self.addnstr(y, x, text, len(text), attr)

    def addnstr(self, y: int, x: int, text: str, n: int, attr: int = 0) -> None:
        if not 0 <= y < self.height:
            return
        for offset, char in enumerate(text[: max(n, 0)]):
            if 0 <= x + offset < self.width:
                self.rows[y][x + offset] = char
        self.attrs[(y, x)] = attr

    def getch(self) -> int:
        if self.keys:
            return self.keys.pop(0)
        return 27  # Escape, so loops under test always terminate

    def line(self, y: int) -> str:
        return "".join(self.rows[y])

    def text(self) -> str:
        return "\n".join(self.line(y) for y in range(self.height))


@pytest.fixture
def scenario_lister() -> FakeLister:
    """Root holds ``alpha`` (directory) and ``beta`` (file); alpha holds ``gamma``."""
    return FakeLister(
        {
            "/": ["alpha", "beta"],
            "/alpha": ["gamma"],
            "/alpha/gamma": [],
        }
    )


@pytest.fixture
def config_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the configuration module at a throwaway file."""
    path = tmp_path / "tripane.toml"
    monkeypatch.setattr(config, "CONFIG_FILE", path)
    return path
