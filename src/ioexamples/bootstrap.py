"""Create the output directory that holds the example files."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def ensure_output_dir(path: Path | str) -> bool:
    """
    Create path as a directory if it is not one already.

    Returns True when the directory was created, False when it already existed
    (its contents are left alone). A regular file at path raises FileExistsError;
    any other OSError propagates unchanged.
    """
    path = Path(path)
    if path.is_dir():
        logger.debug("Output directory already present: %s", path)
        return False
    path.mkdir()
    logger.info("Created output directory %s", path)
    return True
