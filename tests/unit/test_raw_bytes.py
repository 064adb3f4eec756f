"""Unit tests for whole-file byte I/O."""

from __future__ import annotations

from pathlib import Path

import pytest

from ioexamples.styles.raw_bytes import PAYLOAD, format_byte_values, read_bytes, write_bytes


def test_payload_spells_message() -> None:
    assert len(PAYLOAD) == 61
    assert PAYLOAD.decode("ascii") == "Hola! Esto es un mensaje para el curso de Java Intermedio! :D"


def test_round_trip_is_byte_exact(tmp_path: Path) -> None:
    f = tmp_path / "escrituraBytes.txt"
    write_bytes(f)
    assert read_bytes(f) == PAYLOAD


def test_round_trip_binary_values(tmp_path: Path) -> None:
    data = bytes(range(256))
    f = tmp_path / "all.bin"
    write_bytes(f, data)
    assert read_bytes(f) == data


def test_write_replaces_existing_content(tmp_path: Path) -> None:
    f = tmp_path / "b.txt"
    f.write_bytes(b"a much longer previous content than the new one")
    write_bytes(f, b"\x01\x02")
    assert read_bytes(f) == b"\x01\x02"


def test_format_byte_values() -> None:
    assert format_byte_values(b"Hola") == "72, 111, 108, 97"
    assert format_byte_values(b"\xff\x00") == "255, 0"
    assert format_byte_values(b"") == ""


def test_read_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        read_bytes(tmp_path / "missing.txt")
