"""
Schedule arithmetic: rounded start, end of day and remaining time.
"""

from datetime import datetime, timedelta

from workfetch.models import ScheduleResult
from workfetch.models.config import DEFAULT_ROUNDING_MINUTES


def round_to_granularity(ts: datetime, granularity_minutes: int = DEFAULT_ROUNDING_MINUTES) -> datetime:
    """Round to the nearest granularity boundary on the minute-of-hour, halves rounding up.

    Seconds are discarded before rounding, so 07:52:59 rounds like 07:52.
    """
    if granularity_minutes <= 0 or 60 % granularity_minutes != 0:
        raise ValueError(f"granularity must be a positive divisor of 60, got {granularity_minutes}")

    remainder = ts.minute % granularity_minutes
    base = ts.replace(second=0, microsecond=0)
    if remainder * 2 >= granularity_minutes:
        return base + timedelta(minutes=granularity_minutes - remainder)
    return base - timedelta(minutes=remainder)


def whole_minutes(delta: timedelta) -> int:
    """Whole minutes in ``delta``, truncated toward zero."""
    return int(delta.total_seconds() / 60)


def compute(
    effective_start: datetime,
    work_minutes: int,
    break_minutes: int,
    now: datetime,
    granularity_minutes: int = DEFAULT_ROUNDING_MINUTES,
) -> ScheduleResult:
    rounded_start = round_to_granularity(effective_start, granularity_minutes)
    target_total = work_minutes + break_minutes
    end_of_day = rounded_start + timedelta(minutes=target_total)
    return ScheduleResult(
        effective_start=effective_start,
        rounded_start=rounded_start,
        work_minutes=work_minutes,
        break_minutes=break_minutes,
        target_total_minutes=target_total,
        end_of_day=end_of_day,
        remaining_minutes=whole_minutes(end_of_day - now),
    )


class ScheduleCalculator:
    def __init__(self, granularity_minutes: int = DEFAULT_ROUNDING_MINUTES):
        self.granularity_minutes = granularity_minutes

    def compute(self, effective_start: datetime, work_minutes: int, break_minutes: int, now: datetime) -> ScheduleResult:
        return compute(effective_start, work_minutes, break_minutes, now, self.granularity_minutes)


def split_minutes(total: int) -> tuple[int, int]:
    """Split a minute count into (hours, minutes).

    The sign rides on the leading non-zero component: -75 gives (-1, 15), -15 gives (0, -15).
    """
    hours, minutes = divmod(abs(total), 60)
    if total >= 0:
        return hours, minutes
    if hours:
        return -hours, minutes
    return 0, -minutes


def format_duration(total: int) -> str:
    hours, minutes = split_minutes(total)
    if hours:
        return f"{hours}h {minutes:02d}m"
    return f"{minutes}m"

