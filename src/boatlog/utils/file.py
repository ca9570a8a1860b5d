"""File utility functions."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Final, TextIO

from boatlog.errors import StorageError

logger: Final = logging.getLogger(__name__)


def ensure_directory_exists(directory: Path) -> None:
    """Create directory (and missing parents) if it doesn't exist.

    Args:
        directory: Path to create

    Raises:
        StorageError: If the directory cannot be created
    """
    if directory.is_dir():
        return
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise StorageError("Failed to create directory", directory, exc) from exc
    logger.debug("Created directory: %s", directory)


def open_for_append(file_path: Path) -> TextIO:
    """Open a text file for appending, creating it if missing.

    Args:
        file_path: Path to open

    Returns:
        File object positioned at the end of the file

    Raises:
        StorageError: If the file cannot be opened
    """
    try:
        return file_path.open("a", encoding="utf-8", newline="")
    except OSError as exc:
        raise StorageError("Failed to open", file_path, exc) from exc
