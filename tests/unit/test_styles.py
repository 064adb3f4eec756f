"""Unit tests for the style registry."""

from __future__ import annotations

from pathlib import Path

import pytest

from ioexamples.styles import STYLE_KEYS, STYLES, select_styles


def test_canonical_order() -> None:
    assert STYLE_KEYS == ("bytes", "buffered", "stream", "channel")


def test_file_names(tmp_path: Path) -> None:
    names = [s.path(tmp_path).name for s in STYLES]
    assert names == [
        "escrituraBytes.txt",
        "escrituraBuffer.txt",
        "escrituraFlujoBytes.txt",
        "escrituraCanal.txt",
    ]


def test_select_all_by_default() -> None:
    assert select_styles() == list(STYLES)
    assert select_styles([]) == list(STYLES)


def test_select_keeps_canonical_order() -> None:
    selected = select_styles(["channel", "bytes"])
    assert [s.key for s in selected] == ["bytes", "channel"]


def test_select_unknown_key() -> None:
    with pytest.raises(ValueError, match="Unknown style"):
        select_styles(["nope"])


def test_each_style_round_trips(tmp_path: Path) -> None:
    config = {"encoding": {"default": "utf-8", "buffered": "utf-8"}, "channel_capacity": 7}
    for style in STYLES:
        path = style.path(tmp_path)
        style.write(path, config)
        text = style.separator.join(style.read(path, config))
        if isinstance(style.payload, bytes):
            assert text == ", ".join(str(b) for b in style.payload)
        else:
            assert text == style.payload


def test_zero_channel_capacity_is_rejected(tmp_path: Path) -> None:
    channel_style = select_styles(["channel"])[0]
    path = channel_style.path(tmp_path)
    channel_style.write(path, {"encoding": {"default": "utf-8"}})
    with pytest.raises(ValueError, match="capacity must be positive, got 0"):
        channel_style.read(path, {"channel_capacity": 0, "encoding": {"default": "utf-8"}})
