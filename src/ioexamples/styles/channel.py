"""
Channel I/O: an unbuffered, seekable raw file read through a small reusable buffer.

Stream I/O hands out characters as the reader asks for them; channel I/O moves
a whole buffer per call. Reading a 10-byte buffer at a time, the example payload
comes back as "Esto es un", "a cadena q", and so on.

The default write options append. As with the byte-stream example, an encoding
that writes a byte order mark adds one per run, which reads back as U+FEFF.
"""

from __future__ import annotations

import codecs
import enum
import functools
import io
import logging
import operator
import os
from collections.abc import Iterable, Iterator
from pathlib import Path

from ioexamples.config import DEFAULT_CHANNEL_CAPACITY, default_encoding

logger = logging.getLogger(__name__)

FILE_STYLE = "Canal"
PAYLOAD = "Esto es una cadena que representa al metodo Canales y ByteBuffers"


class OpenOption(enum.Flag):
    """How a channel is opened. Combine with ``|``."""

    READ = enum.auto()
    WRITE = enum.auto()
    APPEND = enum.auto()
    CREATE = enum.auto()
    CREATE_NEW = enum.auto()
    TRUNCATE_EXISTING = enum.auto()


_WRITING = OpenOption.WRITE | OpenOption.APPEND


def _combine(options: OpenOption | Iterable[OpenOption]) -> OpenOption:
    if isinstance(options, OpenOption):
        return options
    return functools.reduce(operator.or_, options, OpenOption(0))


def channel_flags(options: OpenOption | Iterable[OpenOption]) -> int:
    """
    Translate open options into ``os.open`` flags.

    No write option means read-only; CREATE, CREATE_NEW and TRUNCATE_EXISTING
    only matter when writing. APPEND together with TRUNCATE_EXISTING is rejected.
    """
    options = _combine(options)
    writing = bool(options & _WRITING)
    if options & OpenOption.APPEND and options & OpenOption.TRUNCATE_EXISTING:
        raise ValueError("APPEND and TRUNCATE_EXISTING cannot be combined")

    if not writing:
        flags = os.O_RDONLY
    elif options & OpenOption.READ:
        flags = os.O_RDWR
    else:
        flags = os.O_WRONLY

    if writing:
        if options & OpenOption.APPEND:
            flags |= os.O_APPEND
        if options & OpenOption.CREATE_NEW:
            flags |= os.O_CREAT | os.O_EXCL
        elif options & OpenOption.CREATE:
            flags |= os.O_CREAT
        if options & OpenOption.TRUNCATE_EXISTING:
            flags |= os.O_TRUNC
    return flags | getattr(os, "O_BINARY", 0)


def _fileio_mode(options: OpenOption) -> str:
    writing = bool(options & _WRITING)
    if not writing:
        return "r"
    if options & OpenOption.READ:
        return "a+" if options & OpenOption.APPEND else "r+"
    return "a" if options & OpenOption.APPEND else "w"


def open_channel(
    path: Path | str,
    options: OpenOption | Iterable[OpenOption] = OpenOption.READ,
) -> io.FileIO:
    """Open an unbuffered seekable channel on path. Use it as a context manager."""
    options = _combine(options)
    fd = os.open(path, channel_flags(options), 0o666)
    try:
        return io.FileIO(fd, _fileio_mode(options), closefd=True)
    except Exception:
        os.close(fd)
        raise


def write_channel(
    path: Path | str,
    text: str = PAYLOAD,
    encoding: str | None = None,
    options: OpenOption | Iterable[OpenOption] = OpenOption.APPEND | OpenOption.CREATE,
) -> int:
    """Encode text into a fixed-size buffer and write all of it through a channel. Returns bytes written."""
    path = Path(path)
    buffer = memoryview(text.encode(encoding or default_encoding()))
    written = 0
    with open_channel(path, options) as channel:
        while written < len(buffer):
            n = channel.write(buffer[written:])
            if not n:
                raise OSError(f"No progress writing to {path}")
            written += n
        logger.debug("Wrote %d bytes to %s, position now %d", written, path, channel.tell())
    return written


def read_channel(
    path: Path | str,
    capacity: int = DEFAULT_CHANNEL_CAPACITY,
    encoding: str | None = None,
) -> Iterator[str]:
    """
    Yield the file's text one buffer-load at a time.

    A multi-byte character split across two reads is held back by the
    incremental decoder and emitted with the next chunk, so joining the
    chunks reproduces the text exactly.
    """
    if capacity <= 0:
        raise ValueError(f"capacity must be positive, got {capacity}")
    return _read_chunks(Path(path), capacity, encoding or default_encoding())


def _read_chunks(path: Path, capacity: int, encoding: str) -> Iterator[str]:
    decoder = codecs.getincrementaldecoder(encoding)(errors="replace")
    buffer = bytearray(capacity)
    with open_channel(path) as channel:
        # readinto returns 0 at end of file and None when a non-blocking channel
        # has nothing ready; both end the loop. Local files always block.
        while True:
            n = channel.readinto(buffer)
            if not n:
                break
            logger.debug("Read %d bytes from %s", n, path)
            text = decoder.decode(bytes(buffer[:n]))
            if text:
                yield text
        tail = decoder.decode(b"", final=True)
        if tail:
            yield tail
