from datetime import date, datetime, time, timedelta
from pathlib import Path

import pytest
from pydantic import ValidationError

from boatlog.common.enums import InventoryItem
from boatlog.errors import (
    ConfigurationError,
    NoBoatConfiguredError,
    SettingsNotFoundError,
    StorageError,
)
from boatlog.ledger import LedgerRecord, add_entry, compose_timestamp, ledger_path


@pytest.mark.usefixtures("utc_local_time")
def test_add_entry_writes_exact_line(orca_settings: Path, workdir: Path) -> None:
    record = add_entry(InventoryItem.MILK, 2, time(10, 0, 0), date(2024, 3, 1))

    assert record.to_line() == "2024-03-01T10:00:00+00:00,Milk,2"
    ledger = workdir / "data" / "Orca.csv"
    assert ledger.read_bytes() == b"2024-03-01T10:00:00+00:00,Milk,2\n"


@pytest.mark.usefixtures("utc_local_time")
def test_add_entry_appends_in_call_order(orca_settings: Path, workdir: Path) -> None:
    add_entry(InventoryItem.COFFEE, 1, time(8, 0), date(2024, 3, 1))
    add_entry(InventoryItem.THERMOS, 3, time(7, 0), date(2024, 3, 1))

    lines = (workdir / "data" / "Orca.csv").read_text().splitlines()
    assert lines == [
        "2024-03-01T08:00:00+00:00,Coffee,1",
        "2024-03-01T07:00:00+00:00,Thermos,3",
    ]


def test_add_entry_without_settings_writes_nothing(workdir: Path) -> None:
    with pytest.raises(SettingsNotFoundError) as exc_info:
        add_entry(InventoryItem.MILK)
    assert isinstance(exc_info.value, ConfigurationError)
    assert not (workdir / "data").exists()


def test_add_entry_without_boat_fails(workdir: Path) -> None:
    (workdir / "settings.ron").write_text("boat: null\n")
    with pytest.raises(NoBoatConfiguredError):
        add_entry(InventoryItem.SUGAR)
    assert not (workdir / "data").exists()


def test_add_entry_creates_data_directory(orca_settings: Path, workdir: Path) -> None:
    assert not (workdir / "data").exists()
    add_entry(InventoryItem.MUGS)
    assert (workdir / "data").is_dir()
    assert (workdir / "data" / "Orca.csv").exists()


def test_add_entry_creates_nested_data_directory(orca_settings: Path, workdir: Path) -> None:
    data_dir = workdir / "logs" / "2024"
    add_entry(InventoryItem.STICKS, data_dir=data_dir)
    assert (data_dir / "Orca.csv").exists()


def test_add_entry_default_timestamp_is_now(orca_settings: Path, workdir: Path) -> None:
    before = datetime.now().astimezone()
    record = add_entry(InventoryItem.MILK)
    after = datetime.now().astimezone()

    line = (workdir / "data" / "Orca.csv").read_text().strip()
    stamp, item, amount = line.split(",")
    written = datetime.fromisoformat(stamp)
    assert written.tzinfo is not None
    assert before - timedelta(seconds=1) <= written <= after
    assert record.timestamp.tzinfo is not None
    assert (item, amount) == ("Milk", "1")


@pytest.mark.usefixtures("utc_local_time")
def test_add_entry_defaults_from_injected_clock(orca_settings: Path) -> None:
    now = datetime(2024, 3, 1, 12, 30, 15)
    assert add_entry(InventoryItem.MILK, time_of_day=time(6, 0), now=now).to_line() == (
        "2024-03-01T06:00:00+00:00,Milk,1"
    )
    assert add_entry(InventoryItem.MILK, day=date(2024, 1, 1), now=now).to_line() == (
        "2024-01-01T12:30:15+00:00,Milk,1"
    )


@pytest.mark.parametrize("amount", [0, -1, -128, 127])
def test_add_entry_accepts_any_int8_amount(orca_settings: Path, amount: int) -> None:
    record = add_entry(InventoryItem.COFFEE, amount)
    assert record.to_line().endswith(f",Coffee,{amount}")


@pytest.mark.parametrize("amount", [-129, 128])
def test_ledger_record_rejects_out_of_range_amount(amount: int) -> None:
    with pytest.raises(ValidationError):
        LedgerRecord(timestamp=datetime.now().astimezone(), item=InventoryItem.MILK, amount=amount)


def test_add_entry_reports_unwritable_data_directory(orca_settings: Path, workdir: Path) -> None:
    (workdir / "data").write_text("in the way")
    with pytest.raises(StorageError) as exc_info:
        add_entry(InventoryItem.MILK)
    assert exc_info.value.path == Path("data")


def test_data_dir_from_environment(
    orca_settings: Path, workdir: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("BOATLOG_DATA_DIR", str(workdir / "ledgers"))
    add_entry(InventoryItem.MILK)
    assert (workdir / "ledgers" / "Orca.csv").exists()
    assert not (workdir / "data").exists()


def test_ledger_path_uses_boat_as_stem() -> None:
    assert ledger_path("Orca") == Path("data/Orca.csv")
    assert ledger_path("Orca", Path("/tmp/x")) == Path("/tmp/x/Orca.csv")


@pytest.mark.parametrize(
    "item, name",
    [
        (InventoryItem.MILK, "Milk"),
        (InventoryItem.COFFEE, "Coffee"),
        (InventoryItem.MUGS, "Mugs"),
        (InventoryItem.SUGAR, "Sugar"),
        (InventoryItem.STICKS, "Sticks"),
        (InventoryItem.THERMOS, "Thermos"),
    ],
)
def test_ledger_names_are_stable(item: InventoryItem, name: str) -> None:
    assert item.ledger_name == name
    assert "," not in item.ledger_name


@pytest.mark.usefixtures("utc_local_time")
def test_compose_timestamp_attaches_local_zone() -> None:
    stamp = compose_timestamp(date(2024, 3, 1), time(10, 0))
    assert stamp.isoformat() == "2024-03-01T10:00:00+00:00"
