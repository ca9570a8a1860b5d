"""Settings persisted in settings.ron in the working directory."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Final

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from boatlog.constants import SETTINGS_ENV_VAR, SETTINGS_FILE
from boatlog.errors import (
    SettingsNotFoundError,
    SettingsParseError,
    SettingsSerializationError,
    StorageError,
)

# Load environment variables from .env file(s)
load_dotenv()

logger: Final = logging.getLogger(__name__)


class Settings(BaseModel):
    """Persisted user settings.

    Every field is optional, so the same model doubles as the partial
    update passed to :func:`save`.
    """

    model_config = ConfigDict(extra="forbid")

    boat: str | None = Field(None, description="Boat that ledger entries are logged against")


def resolve_settings_path(path: Path | None = None) -> Path:
    """Return the settings file path.

    An explicit path wins, then the BOATLOG_SETTINGS environment variable,
    then settings.ron in the working directory.
    """
    if path is not None:
        return path
    return Path(os.environ.get(SETTINGS_ENV_VAR) or SETTINGS_FILE)


def merge(old: Settings, new: Settings) -> Settings:
    """Overlay the fields set on ``new`` onto ``old``.

    Fields left unset (None) on ``new`` keep the stored value, so a partial
    update never erases unrelated settings.
    """
    updates = new.model_dump(exclude_none=True)
    return old.model_copy(update=updates)


def load(path: Path | None = None) -> Settings:
    """Load settings from disk.

    Args:
        path: Settings file (default: see :func:`resolve_settings_path`)

    Returns:
        Validated Settings object

    Raises:
        SettingsNotFoundError: If the settings file does not exist
        SettingsParseError: If the file cannot be parsed or is invalid
        StorageError: If the file exists but cannot be read
    """
    path = resolve_settings_path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise SettingsNotFoundError(path) from exc
    except OSError as exc:
        raise StorageError("Failed to read settings", path, exc) from exc

    try:
        data: Any = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise SettingsParseError("Unable to parse settings", path, exc) from exc

    # An empty file is an empty mapping
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise SettingsParseError("Settings must be a mapping", path)

    try:
        return Settings.model_validate(data)
    except ValidationError as exc:
        raise SettingsParseError(f"Invalid settings:\n{exc}", path, exc) from exc


def save(incoming: Settings, path: Path | None = None) -> Settings:
    """Merge ``incoming`` into the stored settings and rewrite the file.

    When no settings file exists yet, ``incoming`` is written as-is.

    Args:
        incoming: Fields to update; unset fields keep their stored value
        path: Settings file (default: see :func:`resolve_settings_path`)

    Returns:
        The settings that were written

    Raises:
        SettingsParseError: If an existing file is malformed
        SettingsSerializationError: If the settings cannot be serialized
        StorageError: If the file cannot be written
    """
    path = resolve_settings_path(path)
    merged = merge(load(path), incoming) if path.exists() else incoming

    try:
        text = yaml.safe_dump(merged.model_dump(), sort_keys=False)
    except yaml.YAMLError as exc:
        raise SettingsSerializationError("Unable to serialize settings", path, exc) from exc

    try:
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise StorageError("Failed to write settings", path, exc) from exc

    logger.info("Settings written to %s (boat=%s)", path, merged.boat)
    return merged
