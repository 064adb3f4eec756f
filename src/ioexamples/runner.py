"""Example runner: make sure the output directory exists, then write and read each style in turn."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import Any, TextIO

from ioexamples.bootstrap import ensure_output_dir
from ioexamples.config import default_config
from ioexamples.styles import IOStyle, select_styles

logger = logging.getLogger(__name__)


def print_contents(style: IOStyle, directory: Path, config: dict[str, Any], out: TextIO) -> None:
    """Read a style's file back and print it between start/end banners."""
    path = style.path(directory)
    print(f"\nReading {style.title} from {path.name}...", file=out)
    first = True
    for piece in style.read(path, config):
        if not first:
            out.write(style.separator)
        out.write(piece)
        first = False
    print(file=out)
    print(f"END of {style.title} read.", file=out)


def run_style(style: IOStyle, directory: Path, config: dict[str, Any], out: TextIO) -> Path:
    """Write the style's payload, then read it back. Returns the file path."""
    path = style.path(directory)
    logger.debug("Running %s example on %s", style.key, path)
    style.write(path, config)
    print(f"\n\t==FILE WRITTEN WITH {style.title.upper()}==", file=out)
    print_contents(style, directory, config, out)
    return path


def run_examples(
    directory: Path,
    config: dict[str, Any] | None = None,
    keys: Iterable[str] | None = None,
    out: TextIO | None = None,
) -> list[Path]:
    """
    Bootstrap directory and run the selected styles (all by default) in order.

    Errors are not caught here: the first failing example stops the run and
    files written by earlier examples stay as they are.
    """
    config = config if config is not None else default_config()
    out = out if out is not None else sys.stdout
    styles = select_styles(keys)
    ensure_output_dir(directory)
    return [run_style(style, directory, config, out) for style in styles]
