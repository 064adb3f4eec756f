"""Print the current contents of the example files without writing them."""

from __future__ import annotations

import sys
from argparse import Namespace
from pathlib import Path

from ioexamples.commands.run_cmd import resolve_output_dir
from ioexamples.config import check_config, load_config
from ioexamples.runner import print_contents
from ioexamples.styles import select_styles


def run(args: Namespace) -> None:
    """Run the show command. Missing files are skipped with a note on stderr."""
    config = load_config(Path.cwd())
    try:
        check_config(config)
    except ValueError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)

    directory = resolve_output_dir(args, config)
    if not directory.is_dir():
        print(
            f"No example files yet ({directory.as_posix()} does not exist). Run 'ioexamples run' first.",
            file=sys.stderr,
        )
        sys.exit(1)

    for style in select_styles(getattr(args, "styles", None)):
        if not style.path(directory).is_file():
            print(f"Note: {style.path(directory).name} not found, skipping.", file=sys.stderr)
            continue
        try:
            print_contents(style, directory, config, sys.stdout)
        except OSError as e:
            print(f"I/O error in example files: {e}", file=sys.stderr)
            sys.exit(1)
