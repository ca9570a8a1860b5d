"""Persisted settings management.

This package provides:
- Settings: The persisted record holding the current boat
- load/save/merge: Reading, field-level merging and rewriting the settings file
"""

from boatlog.settings.store import Settings, load, merge, resolve_settings_path, save

__all__ = ["Settings", "load", "merge", "resolve_settings_path", "save"]
