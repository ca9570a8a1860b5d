"""Boat inventory logging CLI.

This module provides the command-line interface: ``add`` appends a record
to the current boat's ledger and ``set`` updates the persisted settings.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from typing import Final

import typer

from boatlog import __version__
from boatlog.common.enums import InventoryItem
from boatlog.constants import AMOUNT_MAX, AMOUNT_MIN, DEFAULT_AMOUNT
from boatlog.errors import BoatLogError
from boatlog.ledger import add_entry
from boatlog.settings import Settings, save

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="A simple program to track how much stuff is used", add_completion=False)

logger: Final = logging.getLogger(__name__)  # Will be "boatlog.cli"

ITEM_ARGUMENT = typer.Argument(..., case_sensitive=False, help="The item type to add")
AMOUNT_ARGUMENT = typer.Argument(
    DEFAULT_AMOUNT, min=AMOUNT_MIN, max=AMOUNT_MAX, help="The amount of the item to add"
)
TIME_OPTION = typer.Option(
    None,
    "--time",
    "-t",
    formats=["%H:%M:%S", "%H:%M"],
    help="A time, will default to current time",
)
DATE_OPTION = typer.Option(
    None, "--date", "-d", formats=["%Y-%m-%d"], help="A date, will default to current date"
)
BOAT_OPTION = typer.Option(None, "--boat", "-b", help="Set the current boat")
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"boatlog {__version__}")
        raise typer.Exit()


VERSION_OPTION = typer.Option(
    False,
    "--version",
    "-V",
    callback=_version_callback,
    is_eager=True,
    help="Show the version and exit",
)


def _report_failure(command: str, exc: BoatLogError) -> None:
    """Print a failed command without signalling it through the exit code."""
    logger.debug("%s failed", command, exc_info=exc)
    typer.echo(f"Failed to {command}: {exc}")


@app.callback()
def main(debug: bool = DEBUG_OPTION, version: bool = VERSION_OPTION) -> None:
    """A simple program to track how much stuff is used."""
    # Logs go to stderr; stdout only carries command output
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


# Negative amounts ("add milk -2") must not be mistaken for options
@app.command(context_settings={"ignore_unknown_options": True})
def add(
    item: InventoryItem = ITEM_ARGUMENT,
    amount: int = AMOUNT_ARGUMENT,
    time: datetime | None = TIME_OPTION,
    date: datetime | None = DATE_OPTION,
) -> None:
    """Add an item that has been opened or a new Thermos."""
    try:
        record = add_entry(
            item,
            amount,
            time_of_day=time.time() if time else None,
            day=date.date() if date else None,
        )
    except BoatLogError as exc:
        _report_failure("add", exc)
        return
    logger.info("Logged %s x%d at %s", record.item.ledger_name, record.amount, record.timestamp)


@app.command("set")
def set_settings(boat: str | None = BOAT_OPTION) -> None:
    """Set the settings stored in settings.ron."""
    try:
        settings = save(Settings(boat=boat))
    except BoatLogError as exc:
        _report_failure("set", exc)
        return
    logger.info("Current boat: %s", settings.boat)


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)
