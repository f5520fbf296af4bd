from __future__ import annotations

from datetime import datetime, timedelta, timezone

from src.punch_clock.punch_clock.common.datetime_utils import format_duration, format_timestamp, to_utc


def test_format_duration_hours_and_minutes():
    assert format_duration(timedelta(hours=8)) == "08h00m"
    assert format_duration(timedelta(hours=2, minutes=5, seconds=59)) == "02h05m"
    assert format_duration(timedelta(0)) == "00h00m"


def test_format_duration_beyond_a_day():
    assert format_duration(timedelta(days=1, hours=3, minutes=7)) == "27h07m"


def test_to_utc_treats_naive_as_utc():
    assert to_utc(datetime(2024, 1, 1, 9, 0, 0, 500)) == datetime(2024, 1, 1, 9, tzinfo=timezone.utc)


def test_format_timestamp():
    ts = datetime(2024, 1, 1, 10, 0, 0, tzinfo=timezone(timedelta(hours=1)))
    assert format_timestamp(ts) == "2024-01-01 09:00:00 UTC"
