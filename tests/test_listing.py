"""Tests for directory enumeration."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from tripane.listing import DirectoryLister, list_children


def _make_tree(root: Path) -> None:
    (root / "Zeta").mkdir()
    (root / "alpha").mkdir()
    (root / "b.txt").write_text("b", encoding="utf-8")
    (root / "A.txt").write_text("a", encoding="utf-8")
    (root / ".hidden").write_text("h", encoding="utf-8")


def test_directories_first_then_files_alphabetically(tmp_path: Path) -> None:
    """Directories come first, each group sorted case-insensitively."""
    _make_tree(tmp_path)

    names = [entry.name for entry in DirectoryLister().list_children(tmp_path)]

    assert names == ["alpha", "Zeta", ".hidden", "A.txt", "b.txt"]


def test_entries_carry_absolute_paths_and_directory_flag(tmp_path: Path) -> None:
    _make_tree(tmp_path)

    entries = {entry.name: entry for entry in list_children(tmp_path)}

    assert entries["alpha"].path == tmp_path / "alpha"
    assert entries["alpha"].is_directory
    assert not entries["b.txt"].is_directory


def test_hidden_entries_can_be_filtered(tmp_path: Path) -> None:
    _make_tree(tmp_path)

    names = [entry.name for entry in DirectoryLister(show_hidden=False).list_children(tmp_path)]

    assert ".hidden" not in names
    assert len(names) == 4


def test_max_entries_caps_listing(tmp_path: Path) -> None:
    _make_tree(tmp_path)

    entries = DirectoryLister(max_entries=2).list_children(tmp_path)

    assert [entry.name for entry in entries] == ["alpha", "Zeta"]


def test_zero_max_entries_means_unlimited(tmp_path: Path) -> None:
    _make_tree(tmp_path)
    assert len(DirectoryLister(max_entries=0).list_children(tmp_path)) == 5


def test_missing_directory_lists_nothing(tmp_path: Path) -> None:
    """Listing failures surface as an empty result rather than an exception."""
    assert DirectoryLister().list_children(tmp_path / "gone") == ()


def test_listing_a_file_lists_nothing(tmp_path: Path) -> None:
    target = tmp_path / "file.txt"
    target.write_text("data", encoding="utf-8")
    assert DirectoryLister().list_children(target) == ()


def test_symlink_to_directory_counts_as_directory(tmp_path: Path) -> None:
    (tmp_path / "real").mkdir()
    os.symlink(tmp_path / "real", tmp_path / "link")
    os.symlink(tmp_path / "nowhere", tmp_path / "broken")

    entries = {entry.name: entry for entry in DirectoryLister().list_children(tmp_path)}

    assert entries["link"].is_directory
    assert not entries["broken"].is_directory


def test_only_immediate_children_are_supported(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        DirectoryLister().list_children(tmp_path, depth=2)

