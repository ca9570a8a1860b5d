"""Append-only per-boat CSV ledgers."""

from boatlog.ledger.writer import (
    LedgerRecord,
    add_entry,
    compose_timestamp,
    ledger_path,
    resolve_data_dir,
)

__all__ = [
    "LedgerRecord",
    "add_entry",
    "compose_timestamp",
    "ledger_path",
    "resolve_data_dir",
]
