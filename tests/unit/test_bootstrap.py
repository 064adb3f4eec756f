"""Unit tests for the output directory bootstrap."""

from __future__ import annotations

from pathlib import Path

import pytest

from ioexamples.bootstrap import ensure_output_dir


def test_creates_missing_directory(tmp_path: Path) -> None:
    target = tmp_path / "out"
    assert ensure_output_dir(target) is True
    assert target.is_dir()


def test_idempotent_and_keeps_contents(tmp_path: Path) -> None:
    target = tmp_path / "out"
    ensure_output_dir(target)
    (target / "keep.txt").write_text("x")
    assert ensure_output_dir(target) is False
    assert ensure_output_dir(str(target)) is False
    assert (target / "keep.txt").read_text() == "x"


def test_regular_file_in_the_way_raises(tmp_path: Path) -> None:
    target = tmp_path / "out"
    target.write_text("not a directory")
    with pytest.raises(FileExistsError):
        ensure_output_dir(target)


def test_missing_parent_propagates(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        ensure_output_dir(tmp_path / "missing" / "out")
