"""Subcommands. Each module exposes ``run(args)``."""
