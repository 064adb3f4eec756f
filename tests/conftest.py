"""Shared fixtures: keep config lookups away from the real home directory."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the global config at a temp dir and run each test from a fresh working directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr("ioexamples.config._global_config_dir", lambda: home / ".ioexamples")
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return home
