"""
Buffered text I/O with a declared encoding.

The writer and the reader must agree on the encoding. Reading UTF-8 text as,
say, latin-1 does not fail; it silently yields mangled characters.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

logger = logging.getLogger(__name__)

FILE_STYLE = "Buffer"
PAYLOAD = "Esta es otra cadena para el uso de ejemplos en Java Intermedio"


def write_buffered(path: Path | str, text: str = PAYLOAD, encoding: str = "utf-8") -> None:
    """Overwrite the file with text through a buffered writer; flushed and closed on every exit path."""
    path = Path(path)
    with path.open("w", encoding=encoding) as writer:
        writer.write(text)
    logger.debug("Wrote %d characters to %s (%s)", len(text), path, encoding)


def read_buffered(path: Path | str, encoding: str = "utf-8") -> Iterator[str]:
    """
    Yield the file's lines lazily, without line terminators.

    The file stays open only while the generator runs; exhausting, closing,
    or dropping the generator closes it.
    """
    path = Path(path)
    with path.open("r", encoding=encoding, errors="replace") as reader:
        for line in reader:
            yield line.rstrip("\r\n")
