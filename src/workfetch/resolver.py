"""
Session start resolution.

Decides, once per run, which timestamp counts as the start of today's work
session given the boot time and whatever record the previous run left behind.
"""

import logging
from datetime import date, datetime
from enum import Enum
from typing import NamedTuple, Optional

from workfetch.models import SameDayPolicy, SessionRecord

log = logging.getLogger(__name__)


class StartSource(str, Enum):
    SYSTEM = "system"
    RESTORED = "restored"


class Resolution(NamedTuple):
    effective_start: datetime
    record: SessionRecord
    write_required: bool
    source: StartSource


def _source_for(effective_start: datetime, boot_time: datetime) -> StartSource:
    if effective_start.date() == boot_time.date() and effective_start < boot_time:
        return StartSource.RESTORED
    return StartSource.SYSTEM


def resolve(
    today: date,
    boot_time: datetime,
    previous: Optional[SessionRecord],
    policy: SameDayPolicy = SameDayPolicy.EARLIEST_WINS,
) -> Resolution:
    """Return today's effective start and the record that should be on disk afterwards.

    Day comparison uses the calendar date, not a rolling 24 hours: a session
    started at 23:50 and observed again at 00:10 counts as a new day.
    """
    fresh = SessionRecord(date=today, start_time=boot_time)

    if previous is None:
        log.debug("No previous session record, starting at boot time %s", boot_time)
        return Resolution(boot_time, fresh, True, StartSource.SYSTEM)

    if previous.date != today:
        log.debug("Day rolled over (%s -> %s), starting at boot time %s", previous.date, today, boot_time)
        return Resolution(boot_time, fresh, True, StartSource.SYSTEM)

    if policy is SameDayPolicy.EARLIEST_WINS and boot_time < previous.start_time:
        log.debug("Boot time %s predates recorded start %s, keeping the earlier one", boot_time, previous.start_time)
        return Resolution(boot_time, fresh, True, StartSource.SYSTEM)

    log.debug("Reusing recorded start %s for %s", previous.start_time, today)
    return Resolution(previous.start_time, previous, False, _source_for(previous.start_time, boot_time))


class SessionStartResolver:
    """Binds a same-day policy to :func:`resolve`."""

    def __init__(self, policy: SameDayPolicy = SameDayPolicy.EARLIEST_WINS):
        self.policy = policy

    def resolve(self, today: date, boot_time: datetime, previous: Optional[SessionRecord]) -> Resolution:
        return resolve(today, boot_time, previous, self.policy)
