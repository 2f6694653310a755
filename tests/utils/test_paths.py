# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""Tests for path helpers."""

from pathlib import Path

from planesplit.utils.paths import ensure_directory


def test_creates_nested_directories(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b" / "c"
    result = ensure_directory(target)
    assert result == target
    assert target.is_dir()


def test_existing_directory_is_fine(tmp_path: Path) -> None:
    assert ensure_directory(tmp_path) == tmp_path
    assert tmp_path.is_dir()
