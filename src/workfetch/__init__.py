"""
workfetch: today's work-time status at a glance.

Works out when the work session began (surviving reboots within the same
day), the rounded start, the end of the day and the time still to go.
"""

import logging

from workfetch.errors import ClockError, ConfigError, StateError, StorageError, WorkFetchError
from workfetch.models import SameDayPolicy, ScheduleResult, SessionRecord, UserConfig
from workfetch.resolver import Resolution, SessionStartResolver, StartSource, resolve
from workfetch.schedule import ScheduleCalculator, compute, format_duration, round_to_granularity, split_minutes
from workfetch.workday import WorkDay, WorkDayStatus

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    "WorkDay",
    "WorkDayStatus",
    "SessionStartResolver",
    "Resolution",
    "StartSource",
    "resolve",
    "ScheduleCalculator",
    "compute",
    "round_to_granularity",
    "split_minutes",
    "format_duration",
    "SameDayPolicy",
    "ScheduleResult",
    "SessionRecord",
    "UserConfig",
    "WorkFetchError",
    "ConfigError",
    "StateError",
    "ClockError",
    "StorageError",
]
