"""Shared test fixtures."""

from datetime import UTC, datetime

import pytest

from file_store import FileStore


class FakeClock:
    def __init__(self, start: float = 1_700_000_000.0):
        self._now = start

    def now(self) -> datetime:
        return datetime.fromtimestamp(self._now, tz=UTC)

    def advance(self, seconds: float) -> None:
        self._now += seconds

    @property
    def seconds(self) -> int:
        return int(self._now)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(tmp_path, clock):
    return FileStore(tmp_path, "cache", clock=clock)


@pytest.fixture
def entry_files(store):
    """Names of the regular files currently in the store directory."""

    def _list():
        return sorted(p.name for p in store.directory.iterdir() if p.is_file())

    return _list
