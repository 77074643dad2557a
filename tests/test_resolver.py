from datetime import date, datetime, timedelta, timezone

import pytest

from workfetch.models import SameDayPolicy, SessionRecord
from workfetch.resolver import SessionStartResolver, StartSource, resolve

TODAY = date(2026, 10, 19)
CEST = timezone(timedelta(hours=2))


def at(hour: int, minute: int, second: int = 0, day: date = TODAY) -> datetime:
    return datetime(day.year, day.month, day.day, hour, minute, second, tzinfo=CEST)


def test_first_run_starts_at_boot_time():
    boot = at(7, 41, 12)
    result = resolve(TODAY, boot, None)

    assert result.effective_start == boot
    assert result.record == SessionRecord(date=TODAY, start_time=boot)
    assert result.write_required
    assert result.source is StartSource.SYSTEM


@pytest.mark.parametrize("days_back", [1, 2, 30, 400])
def test_day_rollover_resets_to_boot_time(days_back):
    stale_day = TODAY - timedelta(days=days_back)
    previous = SessionRecord(date=stale_day, start_time=at(7, 45, day=stale_day))
    boot = at(6, 55)

    result = resolve(TODAY, boot, previous)

    assert result.effective_start == boot
    assert result.record == SessionRecord(date=TODAY, start_time=boot)
    assert result.write_required


def test_record_from_the_future_is_also_a_rollover():
    later = TODAY + timedelta(days=1)
    previous = SessionRecord(date=later, start_time=at(9, 0, day=later))
    result = resolve(TODAY, at(8, 0), previous)
    assert result.effective_start == at(8, 0)
    assert result.record.date == TODAY


@pytest.mark.parametrize("boot", [at(8, 10), at(7, 45), at(13, 0, 1)])
def test_same_day_later_or_equal_boot_keeps_recorded_start(boot):
    previous = SessionRecord(date=TODAY, start_time=at(7, 45))

    result = resolve(TODAY, boot, previous)

    assert result.effective_start == at(7, 45)
    assert result.record is previous
    assert not result.write_required


def test_mid_day_reboot_is_reported_as_restored():
    previous = SessionRecord(date=TODAY, start_time=at(7, 45))
    result = resolve(TODAY, at(8, 10), previous)
    assert result.source is StartSource.RESTORED


def test_equal_boot_time_is_not_a_restore():
    previous = SessionRecord(date=TODAY, start_time=at(7, 45))
    result = resolve(TODAY, at(7, 45), previous)
    assert result.source is StartSource.SYSTEM
    assert not result.write_required


def test_earlier_boot_on_same_day_wins():
    previous = SessionRecord(date=TODAY, start_time=at(7, 45))
    boot = at(7, 30)

    result = resolve(TODAY, boot, previous)

    assert result.effective_start == boot
    assert result.record == SessionRecord(date=TODAY, start_time=boot)
    assert result.write_required


def test_keep_recorded_policy_ignores_earlier_boot():
    previous = SessionRecord(date=TODAY, start_time=at(7, 45))

    result = resolve(TODAY, at(7, 30), previous, policy=SameDayPolicy.KEEP_RECORDED)

    assert result.effective_start == at(7, 45)
    assert not result.write_required


def test_calendar_day_boundary_is_not_a_rolling_window():
    yesterday = TODAY - timedelta(days=1)
    previous = SessionRecord(date=yesterday, start_time=at(23, 50, day=yesterday))
    boot = at(23, 50, day=yesterday)

    result = resolve(TODAY, boot, previous)

    assert result.write_required
    assert result.record.date == TODAY
    assert result.effective_start == boot


def test_resolver_binds_policy():
    previous = SessionRecord(date=TODAY, start_time=at(7, 45))
    resolver = SessionStartResolver(SameDayPolicy.KEEP_RECORDED)
    effective_start, record, write_required, source = resolver.resolve(TODAY, at(7, 0), previous)
    assert effective_start == at(7, 45)
    assert record is previous
    assert not write_required
    assert source is StartSource.SYSTEM
