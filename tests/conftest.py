from datetime import datetime

import pytest

from workfetch.storage import StoragePaths


class FixedClock:
    def __init__(self, now: datetime, boot_time: datetime):
        self._now = now
        self._boot_time = boot_time

    def now(self) -> datetime:
        return self._now

    def boot_time(self) -> datetime:
        return self._boot_time


@pytest.fixture
def paths(tmp_path) -> StoragePaths:
    return StoragePaths(tmp_path / "last_session.json", tmp_path / "config.toml")


@pytest.fixture
def make_clock():
    return FixedClock
