from __future__ import annotations

from datetime import date, datetime, timedelta, timezone


def now_utc() -> datetime:
    """Current UTC time, truncated to whole seconds.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return to_utc(datetime.now(timezone.utc))


def to_utc(value: datetime) -> datetime:
    """Normalize a datetime to aware UTC with second precision.

    Naive values are taken to already be in UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)
    return value.replace(microsecond=0)


def start_of_day(day: date) -> datetime:
    """Midnight UTC on the given date."""
    return datetime(day.year, day.month, day.day, tzinfo=timezone.utc)


def format_timestamp(value: datetime) -> str:
    return to_utc(value).strftime("%Y-%m-%d %H:%M:%S UTC")


def format_duration(duration: timedelta) -> str:
    """Render a duration as ``HHhMMm`` (e.g. ``08h05m``)."""
    total_minutes = int(duration.total_seconds()) // 60
    return f"{total_minutes // 60:02d}h{total_minutes % 60:02d}m"
