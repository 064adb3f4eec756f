"""CLI entry point: argument parsing and subcommand dispatch."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from ioexamples import __version__
from ioexamples.config import load_config
from ioexamples.styles import STYLE_KEYS


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure the package logger: level from --verbose/--quiet or config, console handler,
    optional file handler from config.
    """
    config = load_config(Path.cwd())
    log_cfg = config.get("logging") or {}
    if verbose:
        level_name = "DEBUG"
    elif quiet:
        level_name = "ERROR"
    else:
        level_name = (log_cfg.get("level") or "WARNING").upper()
    level = getattr(logging, level_name, logging.WARNING)
    root = logging.getLogger("ioexamples")
    root.setLevel(level)
    if not root.handlers:
        fmt = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(fmt)
        root.addHandler(console)
        log_file = log_cfg.get("file")
        if log_file:
            try:
                fh = logging.FileHandler(Path(log_file).expanduser(), encoding="utf-8")
                fh.setFormatter(fmt)
                root.addHandler(fh)
            except OSError:
                pass


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ioexamples",
        description="Write and read example files with raw bytes, buffered text, byte streams and channels.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    log_group = parser.add_mutually_exclusive_group()
    log_group.add_argument("-v", "--verbose", action="store_true", help="Verbose (DEBUG) output.")
    log_group.add_argument("-q", "--quiet", action="store_true", help="Quiet (errors only).")

    # Shared by the commands that work on the example files
    files_flags = argparse.ArgumentParser(add_help=False)
    files_flags.add_argument(
        "--output-dir",
        "-o",
        type=Path,
        help="Directory for the example files (default: output_dir from config, archivosEjemplos).",
    )

    style_flags = argparse.ArgumentParser(add_help=False)
    style_flags.add_argument(
        "--style",
        "-s",
        dest="styles",
        action="append",
        choices=STYLE_KEYS,
        help="Only this style (repeatable). Styles always run in the order: " + ", ".join(STYLE_KEYS) + ".",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # run (default when no command is given)
    p_run = subparsers.add_parser(
        "run",
        help="Write each example file and read it back (default).",
        parents=[files_flags, style_flags],
    )
    p_run.set_defaults(run="run")

    # show
    p_show = subparsers.add_parser(
        "show",
        help="Read back the existing example files without writing.",
        parents=[files_flags, style_flags],
    )
    p_show.set_defaults(run="show")

    # clean
    p_clean = subparsers.add_parser(
        "clean",
        help="Delete the example files (resets appended content).",
        parents=[files_flags],
    )
    p_clean.add_argument("--dry-run", action="store_true", help="List what would be deleted.")
    p_clean.set_defaults(run="clean")

    # config
    p_config = subparsers.add_parser("config", help="Show or edit configuration.")
    p_config.add_argument("--show", action="store_true", help="Display current settings.")
    p_config.add_argument("--set", dest="set_key", metavar="KEY=VALUE", help="Set a configuration value.")
    p_config.add_argument(
        "--global",
        dest="global_",
        action="store_true",
        help="With --set: write to ~/.ioexamples/config.json instead of ./.ioexamples/config.json.",
    )
    p_config.set_defaults(run="config")

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(
        verbose=getattr(args, "verbose", False),
        quiet=getattr(args, "quiet", False),
    )
    # No command given: run the examples
    run = getattr(args, "run", None) or "run"

    if run == "show":
        from ioexamples.commands.show import run as cmd_run
    elif run == "clean":
        from ioexamples.commands.clean import run as cmd_run
    elif run == "config":
        from ioexamples.commands.config_cmd import run as cmd_run
    else:
        from ioexamples.commands.run_cmd import run as cmd_run

    cmd_run(args)
