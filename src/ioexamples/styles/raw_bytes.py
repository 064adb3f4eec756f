"""Whole-file byte I/O: write a byte string in one call, read it back in one call."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

FILE_STYLE = "Bytes"

# "Hola! Esto es un mensaje para el curso de Java Intermedio! :D", spelled as byte values
PAYLOAD = bytes([
    72, 111, 108, 97, 33, 32, 69, 115, 116, 111, 32, 101, 115, 32, 117, 110, 32,
    109, 101, 110, 115, 97, 106, 101, 32, 112, 97, 114, 97, 32, 101, 108, 32, 99,
    117, 114, 115, 111, 32, 100, 101, 32, 74, 97, 118, 97, 32, 73, 110, 116, 101,
    114, 109, 101, 100, 105, 111, 33, 32, 58, 68,
])


def write_bytes(path: Path | str, data: bytes = PAYLOAD) -> None:
    """Store data verbatim as the file's entire contents, replacing what was there."""
    path = Path(path)
    path.write_bytes(data)
    logger.debug("Wrote %d bytes to %s", len(data), path)


def read_bytes(path: Path | str) -> bytes:
    """Load the whole file into memory. No text decoding happens."""
    path = Path(path)
    data = path.read_bytes()
    logger.debug("Read %d bytes from %s", len(data), path)
    return data


def format_byte_values(data: bytes) -> str:
    """Decimal value of each byte (0..255), comma separated."""
    return ", ".join(str(b) for b in data)
