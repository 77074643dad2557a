"""
Platform time inputs: the current wall-clock time and the system boot time.
"""

from datetime import datetime
from typing import Protocol

import psutil

from workfetch.errors import ClockError


class Clock(Protocol):
    def now(self) -> datetime: ...

    def boot_time(self) -> datetime: ...


class SystemClock:
    """Local, timezone-aware times from the running machine."""

    def now(self) -> datetime:
        return datetime.now().astimezone().replace(microsecond=0)

    def boot_time(self) -> datetime:
        try:
            seconds = int(psutil.boot_time())
        except (OSError, RuntimeError, psutil.Error) as e:
            raise ClockError(f"Could not determine the system boot time: {e}") from e
        return datetime.fromtimestamp(seconds).astimezone()
