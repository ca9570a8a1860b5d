"""Common utility functions and helpers for the boatlog package."""

from boatlog.utils.file import ensure_directory_exists, open_for_append
from boatlog.utils.time import TimeUtils

__all__ = [
    "TimeUtils",
    "ensure_directory_exists",
    "open_for_append",
]
