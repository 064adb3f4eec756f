"""Remove the example files so the next run starts from empty (resets appended content)."""

from __future__ import annotations

import sys
from argparse import Namespace
from pathlib import Path

from ioexamples.commands.run_cmd import resolve_output_dir
from ioexamples.config import load_config
from ioexamples.styles import STYLES


def run(args: Namespace) -> None:
    """Run the clean command. The output directory itself is kept."""
    config = load_config(Path.cwd())
    directory = resolve_output_dir(args, config)
    dry_run = getattr(args, "dry_run", False)

    to_delete = [p for p in (s.path(directory) for s in STYLES) if p.is_file()]
    if not to_delete:
        print("No example files to remove.")
        return

    if dry_run:
        print(f"Would delete {len(to_delete)} file{'' if len(to_delete) == 1 else 's'}:")
        for path in to_delete:
            print(f"  {path.as_posix()}")
        return

    for path in to_delete:
        try:
            path.unlink()
        except OSError as e:
            print(f"Error: could not delete {path.as_posix()}: {e}", file=sys.stderr)
            sys.exit(1)
    print(f"Deleted {len(to_delete)} file{'' if len(to_delete) == 1 else 's'}.")
