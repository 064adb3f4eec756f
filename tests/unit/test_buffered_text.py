"""Unit tests for buffered text I/O."""

from __future__ import annotations

from pathlib import Path

import pytest

from ioexamples.styles.buffered_text import PAYLOAD, read_buffered, write_buffered


def test_round_trip_payload(tmp_path: Path) -> None:
    f = tmp_path / "escrituraBuffer.txt"
    write_buffered(f)
    assert list(read_buffered(f)) == [PAYLOAD]


def test_multiline_lines_join_back(tmp_path: Path) -> None:
    text = "primera línea\nsegunda línea\ntercera ñandú"
    f = tmp_path / "multi.txt"
    write_buffered(f, text, encoding="utf-8")
    lines = list(read_buffered(f, encoding="utf-8"))
    assert lines == ["primera línea", "segunda línea", "tercera ñandú"]
    assert "\n".join(lines) == text


def test_write_overwrites(tmp_path: Path) -> None:
    f = tmp_path / "b.txt"
    write_buffered(f, "first")
    write_buffered(f, "second")
    assert list(read_buffered(f)) == ["second"]


def test_other_encoding_round_trip(tmp_path: Path) -> None:
    f = tmp_path / "utf16.txt"
    write_buffered(f, "año", encoding="utf-16")
    assert list(read_buffered(f, encoding="utf-16")) == ["año"]


def test_encoding_mismatch_corrupts_silently(tmp_path: Path) -> None:
    f = tmp_path / "mismatch.txt"
    write_buffered(f, "año", encoding="utf-8")
    lines = list(read_buffered(f, encoding="latin-1"))
    assert lines == ["aÃ±o"]


def test_reader_is_lazy(tmp_path: Path) -> None:
    missing = tmp_path / "missing.txt"
    gen = read_buffered(missing)
    # Nothing is opened until iteration starts
    with pytest.raises(FileNotFoundError):
        next(gen)


def test_closing_generator_early(tmp_path: Path) -> None:
    f = tmp_path / "lines.txt"
    write_buffered(f, "a\nb\nc")
    gen = read_buffered(f)
    assert next(gen) == "a"
    gen.close()
    # File can be replaced after the reader released it
    write_buffered(f, "z")
    assert list(read_buffered(f)) == ["z"]
