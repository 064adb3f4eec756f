"""Run the examples: write each style's file, then read it back."""

from __future__ import annotations

import sys
from argparse import Namespace
from pathlib import Path

from ioexamples.config import check_config, load_config, output_dir
from ioexamples.runner import run_examples


def resolve_output_dir(args: Namespace, config: dict) -> Path:
    """--output-dir if given, else the configured output directory."""
    given = getattr(args, "output_dir", None)
    if given is not None:
        return Path(given)
    return output_dir(config)


def run(args: Namespace) -> None:
    """Run the selected styles (all by default). Config and I/O errors are reported and end the run."""
    config = load_config(Path.cwd())
    directory = resolve_output_dir(args, config)
    keys = getattr(args, "styles", None)
    try:
        check_config(config)
    except ValueError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        run_examples(directory, config, keys=keys)
    except FileExistsError as e:
        print(f"Output directory already exists: {e}", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"I/O error in example files: {e}", file=sys.stderr)
        sys.exit(1)
