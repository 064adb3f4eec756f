"""Configuration: output layout constants, defaults, and config loading (global + project overrides)."""

from __future__ import annotations

import codecs
import json
import locale
from pathlib import Path
from typing import Any

# Directory (relative to the working directory) that receives the example files
OUTPUT_DIR = "archivosEjemplos"
FILE_PREFIX = "escritura"
FILE_SUFFIX = ".txt"

# Project-local settings directory and config file name
SETTINGS_DIR = ".ioexamples"
CONFIG_FILENAME = "config.json"

DEFAULT_CHANNEL_CAPACITY = 10


def _global_config_dir() -> Path:
    return Path.home() / ".ioexamples"


def global_config_path() -> Path:
    """Path to global config file (~/.ioexamples/config.json)."""
    return _global_config_dir() / CONFIG_FILENAME


def project_config_path(project_root: Path) -> Path:
    """Path to project-local config (<project>/.ioexamples/config.json)."""
    return project_root / SETTINGS_DIR / CONFIG_FILENAME


def default_config() -> dict[str, Any]:
    """Default configuration. ``encoding.default`` of None means the locale's preferred encoding."""
    return {
        "output_dir": OUTPUT_DIR,
        "channel_capacity": DEFAULT_CHANNEL_CAPACITY,
        "encoding": {
            "buffered": "utf-8",
            "default": None,
        },
        "logging": {
            "level": "WARNING",
            "file": None,
        },
    }


def _load_json(path: Path) -> dict[str, Any] | None:
    """Load JSON from path; return None if file missing or invalid."""
    if not path.is_file():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError):
        return None
    return data if isinstance(data, dict) else None


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge override into base recursively. Mutates base; returns base."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def load_global_config() -> dict[str, Any]:
    """Load global config from ~/.ioexamples/config.json. Returns defaults if missing."""
    data = _load_json(global_config_path())
    if data is None:
        return default_config()
    return _deep_merge(default_config(), data)


def load_config(project_root: Path | None = None) -> dict[str, Any]:
    """
    Load merged configuration: defaults + global + project overrides.

    If project_root is None, only global config (and defaults) are used.
    """
    merged = load_global_config()
    if project_root is not None:
        project_data = _load_json(project_config_path(project_root.resolve()))
        if project_data is not None:
            _deep_merge(merged, project_data)
    return merged


def save_config(path: Path, data: dict[str, Any]) -> None:
    """Write config as indented JSON, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")


def output_dir(config: dict[str, Any], base: Path | None = None) -> Path:
    """Output directory from config; relative values are taken against base (default: cwd)."""
    path = Path(config.get("output_dir") or OUTPUT_DIR)
    if not path.is_absolute():
        path = (base or Path.cwd()) / path
    return path


def example_file(directory: Path, style: str) -> Path:
    """Path of the example file for a style suffix, e.g. 'Bytes' -> escrituraBytes.txt."""
    return directory / f"{FILE_PREFIX}{style}{FILE_SUFFIX}"


def default_encoding(config: dict[str, Any] | None = None) -> str:
    """
    Encoding used where the examples rely on "the platform default".

    Taken from ``encoding.default`` when set, else the locale's preferred encoding.
    """
    configured = ((config or {}).get("encoding") or {}).get("default")
    if configured:
        return configured
    return locale.getpreferredencoding(False)


def buffered_encoding(config: dict[str, Any] | None = None) -> str:
    """Declared encoding for the buffered text example (utf-8 unless configured)."""
    return ((config or {}).get("encoding") or {}).get("buffered") or "utf-8"


def check_config(config: dict[str, Any]) -> None:
    """
    Reject config values that would only fail halfway through a run.

    Raises ValueError for an unknown codec in ``encoding.*`` or a
    ``channel_capacity`` that is not a positive integer.
    """
    for name, encoding in (("buffered", buffered_encoding(config)), ("default", default_encoding(config))):
        try:
            codecs.lookup(encoding)
        except (LookupError, TypeError):
            raise ValueError(f"encoding.{name}: unknown encoding {encoding!r}") from None

    capacity = config.get("channel_capacity", DEFAULT_CHANNEL_CAPACITY)
    if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
        raise ValueError(f"channel_capacity must be a positive integer, got {capacity!r}")
