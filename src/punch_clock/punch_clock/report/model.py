from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional


@dataclass(frozen=True)
class DailyDuration:
    """Punched-in time attributed to one UTC calendar date."""

    date: date
    duration: timedelta


@dataclass(frozen=True)
class PeriodSummary:
    """Read-model for ``card --week`` / ``card --mtd``: days in ascending order plus the total."""

    days: tuple[DailyDuration, ...]
    total: timedelta


@dataclass(frozen=True)
class SessionStatus:
    """The running session, or the last closed one when punched out."""

    is_open: bool
    started_at: datetime
    ended_at: Optional[datetime]
    duration: timedelta
