"""Ledger writer: appends one timestamped record to the current boat's CSV."""

from __future__ import annotations

import logging
import os
from datetime import date, datetime, time
from pathlib import Path
from typing import Final

from pydantic import BaseModel, Field

from boatlog.common.enums import InventoryItem
from boatlog.constants import (
    AMOUNT_MAX,
    AMOUNT_MIN,
    DATA_DIR,
    DATA_DIR_ENV_VAR,
    DEFAULT_AMOUNT,
    LEDGER_SUFFIX,
)
from boatlog.errors import NoBoatConfiguredError, StorageError
from boatlog.settings import store
from boatlog.utils.file import ensure_directory_exists, open_for_append
from boatlog.utils.time import TimeUtils

logger: Final = logging.getLogger(__name__)


class LedgerRecord(BaseModel):
    """A single consumption event.

    Serialized without quoting as ``<timestamp>,<Item>,<amount>``; item
    names never contain commas.
    """

    timestamp: datetime
    item: InventoryItem
    amount: int = Field(DEFAULT_AMOUNT, ge=AMOUNT_MIN, le=AMOUNT_MAX)

    def to_line(self) -> str:
        """Render the record as one ledger line (without newline)."""
        stamp = self.timestamp.isoformat(timespec="seconds")
        return f"{stamp},{self.item.ledger_name},{self.amount}"


def resolve_data_dir(data_dir: Path | None = None) -> Path:
    """Return the ledger directory.

    An explicit path wins, then the BOATLOG_DATA_DIR environment variable,
    then ``data`` in the working directory.
    """
    if data_dir is not None:
        return data_dir
    return Path(os.environ.get(DATA_DIR_ENV_VAR) or DATA_DIR)


def ledger_path(boat: str, data_dir: Path | None = None) -> Path:
    """Path of the ledger owned by ``boat``."""
    return resolve_data_dir(data_dir) / f"{boat}{LEDGER_SUFFIX}"


def compose_timestamp(
    day: date | None = None, time_of_day: time | None = None, now: datetime | None = None
) -> datetime:
    """Timestamp for a record, defaulting missing parts to ``now``."""
    return TimeUtils.combine_local(day, time_of_day, now)


def add_entry(
    item: InventoryItem,
    amount: int = DEFAULT_AMOUNT,
    time_of_day: time | None = None,
    day: date | None = None,
    *,
    settings_path: Path | None = None,
    data_dir: Path | None = None,
    now: datetime | None = None,
) -> LedgerRecord:
    """Append a record to the ledger of the configured boat.

    Args:
        item: Item that was used
        amount: Signed count (zero and negative values are allowed)
        time_of_day: Time of the event (default: current local time)
        day: Date of the event (default: current local date)
        settings_path: Settings file to read the boat from
        data_dir: Directory holding the ledgers
        now: Clock reading used for defaults (default: current local time)

    Returns:
        The record that was written

    Raises:
        ConfigurationError: If settings are missing, malformed or have no boat
        StorageError: If the ledger directory or file cannot be written
    """
    settings = store.load(settings_path)
    if not settings.boat:
        raise NoBoatConfiguredError()

    directory = resolve_data_dir(data_dir)
    ensure_directory_exists(directory)
    path = ledger_path(settings.boat, directory)

    record = LedgerRecord(
        timestamp=compose_timestamp(day, time_of_day, now),
        item=item,
        amount=amount,
    )

    with open_for_append(path) as fh:
        try:
            fh.write(record.to_line() + "\n")
        except OSError as exc:
            raise StorageError("Failed to write", path, exc) from exc

    logger.debug("Appended %s to %s", record.to_line(), path)
    return record
