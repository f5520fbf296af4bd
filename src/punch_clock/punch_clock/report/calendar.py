from __future__ import annotations

from datetime import datetime, timedelta

from ..common.datetime_utils import start_of_day, to_utc


def week_cutoff(now: datetime) -> datetime:
    """Midnight UTC on the Monday at or before ``now``'s date."""
    today = to_utc(now).date()
    return start_of_day(today - timedelta(days=today.weekday()))


def month_cutoff(now: datetime) -> datetime:
    """Midnight UTC on the first day of ``now``'s month."""
    return start_of_day(to_utc(now).date().replace(day=1))
