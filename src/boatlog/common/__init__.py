"""Shared types used across the boatlog package."""

from boatlog.common.enums import InventoryItem

__all__ = ["InventoryItem"]
