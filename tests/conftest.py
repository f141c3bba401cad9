"""Shared pytest fixtures for tasker tests."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import datetime, timedelta
from pathlib import Path

import pytest
from click.testing import CliRunner

from tasker.infrastructure.store import Store


class SteppingClock:
    """Deterministic wall clock: each call is one second after the last."""

    def __init__(self, start: datetime) -> None:
        self._next = start
        self.calls: list[datetime] = []

    def __call__(self) -> datetime:
        now = self._next
        self._next = now + timedelta(seconds=1)
        self.calls.append(now)
        return now


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "tasker.db"


@pytest.fixture
def clock() -> SteppingClock:
    return SteppingClock(datetime(2025, 3, 14, 9, 26, 53))


@pytest.fixture
def store(db_path: Path) -> Iterator[Store]:
    """Freshly initialized store using the real wall clock."""
    s = Store.open(db_path)
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def clocked_store(db_path: Path, clock: SteppingClock) -> Iterator[Store]:
    """Store whose repository timestamps come from :func:`clock`."""
    s = Store.open(db_path, clock=clock)
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def _isolated_project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory so the CLI creates an isolated database.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command
    test classes.
    """
    for var in ("TASKER_CONFIG", "TASKER_DB_PATH", "TASKER_PROJECT_ROOT"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
