"""Exception classes for settings and ledger operations.

Every failure raised by boatlog derives from :class:`BoatLogError`, so the
CLI can report all of them the same way. The subclasses separate
configuration problems, filesystem problems and (de)serialization problems.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class BoatLogError(Exception):
    """Base error for boatlog operations.

    Carries the path involved (when there is one) so messages name the
    file the operation was working on.
    """

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            path: File or directory the failing operation was using
        """
        super().__init__(f"{message}: {path}" if path is not None else message)
        self.message: str = message
        self.path: Optional[Path] = path


class ConfigurationError(BoatLogError):
    """Raised when settings are missing, unreadable or incomplete."""

    pass


class SettingsNotFoundError(ConfigurationError):
    """Raised when the settings file does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__("No settings file found, use set --boat to create one", path)


class NoBoatConfiguredError(ConfigurationError):
    """Raised when a ledger entry is attempted without a boat."""

    def __init__(self) -> None:
        super().__init__("No boat is set!, use set --boat to set a boat")


class StorageError(BoatLogError):
    """Raised when a directory or file cannot be created, opened or written."""

    def __init__(
        self, message: str, path: Path, original_error: Optional[Exception] = None
    ) -> None:
        """Initialize with filesystem error details.

        Args:
            message: Description of the operation that failed
            path: Path the operation was using
            original_error: The original exception that was caught
        """
        super().__init__(message, path)
        self.original_error = original_error


class SerializationError(BoatLogError):
    """Raised when settings content cannot be converted to or from text."""

    def __init__(
        self, message: str, path: Path, original_error: Optional[Exception] = None
    ) -> None:
        super().__init__(message, path)
        self.original_error = original_error


class SettingsParseError(SerializationError, ConfigurationError):
    """Raised when the settings file exists but its content is malformed."""

    pass


class SettingsSerializationError(SerializationError):
    """Raised when settings cannot be serialized for writing."""

    pass
