"""The four I/O styles, in the order the runner executes them."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ioexamples.config import (
    DEFAULT_CHANNEL_CAPACITY,
    buffered_encoding,
    default_encoding,
    example_file,
)
from ioexamples.styles import buffered_text, byte_stream, channel, raw_bytes


@dataclass(frozen=True)
class IOStyle:
    """One write/read pair and the file it works on."""

    key: str
    title: str
    file_style: str
    payload: str | bytes
    write: Callable[[Path, dict[str, Any]], Any]
    read: Callable[[Path, dict[str, Any]], Iterable[str]]
    # Printed between the pieces that read() yields
    separator: str = "\n"

    def path(self, directory: Path) -> Path:
        return example_file(directory, self.file_style)


def _read_bytes(path: Path, config: dict[str, Any]) -> Iterable[str]:
    return [raw_bytes.format_byte_values(raw_bytes.read_bytes(path))]


def _channel_capacity(config: dict[str, Any]) -> int:
    return int(config.get("channel_capacity", DEFAULT_CHANNEL_CAPACITY))


STYLES: tuple[IOStyle, ...] = (
    IOStyle(
        key="bytes",
        title="bytes",
        file_style=raw_bytes.FILE_STYLE,
        payload=raw_bytes.PAYLOAD,
        write=lambda path, config: raw_bytes.write_bytes(path),
        read=_read_bytes,
    ),
    IOStyle(
        key="buffered",
        title="buffered text",
        file_style=buffered_text.FILE_STYLE,
        payload=buffered_text.PAYLOAD,
        write=lambda path, config: buffered_text.write_buffered(path, encoding=buffered_encoding(config)),
        read=lambda path, config: buffered_text.read_buffered(path, encoding=buffered_encoding(config)),
    ),
    IOStyle(
        key="stream",
        title="byte stream",
        file_style=byte_stream.FILE_STYLE,
        payload=byte_stream.PAYLOAD,
        write=lambda path, config: byte_stream.write_stream(path, encoding=default_encoding(config)),
        read=lambda path, config: byte_stream.read_stream(path, encoding=default_encoding(config)),
    ),
    IOStyle(
        key="channel",
        title="channel",
        file_style=channel.FILE_STYLE,
        payload=channel.PAYLOAD,
        write=lambda path, config: channel.write_channel(path, encoding=default_encoding(config)),
        read=lambda path, config: channel.read_channel(
            path, capacity=_channel_capacity(config), encoding=default_encoding(config)
        ),
        separator="",
    ),
)

STYLE_KEYS: tuple[str, ...] = tuple(s.key for s in STYLES)


def select_styles(keys: Iterable[str] | None = None) -> list[IOStyle]:
    """Styles matching keys, in canonical order. None or empty selects all."""
    if not keys:
        return list(STYLES)
    wanted = set(keys)
    unknown = wanted.difference(STYLE_KEYS)
    if unknown:
        raise ValueError(f"Unknown style(s): {', '.join(sorted(unknown))}")
    return [s for s in STYLES if s.key in wanted]


__all__ = ["IOStyle", "STYLES", "STYLE_KEYS", "select_styles"]
