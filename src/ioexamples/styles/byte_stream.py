"""
Layered byte streams: raw file -> buffering layer -> (for reading) text decoding.

Writes open the file in append mode, so every run adds another copy of the
payload instead of replacing it. With an encoding that writes a byte order
mark (utf-16, utf-32, utf-8-sig) each copy carries its own BOM, and from the
second run on the reader shows a U+FEFF in the middle of the text.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Iterator
from pathlib import Path

from ioexamples.config import default_encoding

logger = logging.getLogger(__name__)

FILE_STYLE = "FlujoBytes"
PAYLOAD = "En este ejemplo primero escribimos en una cadena y luego lo convertimos a bytes."


def write_stream(path: Path | str, text: str = PAYLOAD, encoding: str | None = None) -> None:
    """Encode text and append the bytes through a BufferedWriter over a raw FileIO."""
    path = Path(path)
    data = text.encode(encoding or default_encoding())
    with io.FileIO(path, "a") as raw, io.BufferedWriter(raw) as out:
        out.write(data)
    logger.debug("Appended %d bytes to %s", len(data), path)


def read_stream(path: Path | str, encoding: str | None = None) -> Iterator[str]:
    """Yield lines decoded from a raw FileIO wrapped in BufferedReader and TextIOWrapper."""
    path = Path(path)
    encoding = encoding or default_encoding()
    with io.FileIO(path, "r") as raw, io.TextIOWrapper(
        io.BufferedReader(raw), encoding=encoding, errors="replace"
    ) as reader:
        for line in reader:
            yield line.rstrip("\r\n")
