import time
from collections.abc import Generator
from pathlib import Path

import pytest

from boatlog.constants import DATA_DIR_ENV_VAR, SETTINGS_ENV_VAR


@pytest.fixture(autouse=True)
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run every test from an empty working directory."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(SETTINGS_ENV_VAR, raising=False)
    monkeypatch.delenv(DATA_DIR_ENV_VAR, raising=False)
    return tmp_path


@pytest.fixture
def utc_local_time(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Make the local system timezone UTC for the duration of a test."""
    monkeypatch.setenv("TZ", "UTC")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


@pytest.fixture
def orca_settings(workdir: Path) -> Path:
    path = workdir / "settings.ron"
    path.write_text("boat: Orca\n")
    return path
