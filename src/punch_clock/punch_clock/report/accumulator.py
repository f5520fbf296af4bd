"""Backward fold that buckets punched-in time per calendar day.

Records arrive newest first. A punch-out only marks where the next
(earlier) interval ends; the matching punch-in closes it and adds the
elapsed time to the bucket of the punch-in's date.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Optional

from ..core.enums import Action
from ..journal.model import Record
from .model import DailyDuration, PeriodSummary


@dataclass
class SummaryAccumulator:
    # Seeded with "now" so an open session counts up to the query time.
    last_punch_out: datetime
    current_date: Optional[date] = None
    current_bucket: timedelta = timedelta(0)
    total: timedelta = timedelta(0)
    buckets: list[DailyDuration] = field(default_factory=list)

    def flush(self) -> None:
        if self.current_date is not None and self.current_bucket:
            self.buckets.append(DailyDuration(date=self.current_date, duration=self.current_bucket))
        self.current_bucket = timedelta(0)

    def result(self) -> PeriodSummary:
        self.flush()
        return PeriodSummary(days=tuple(reversed(self.buckets)), total=self.total)


def fold_record(acc: SummaryAccumulator, record: Record) -> SummaryAccumulator:
    record_date = record.timestamp.date()
    if record_date != acc.current_date:
        acc.flush()
        acc.current_date = record_date

    if record.action == Action.PUNCH_OUT:
        acc.last_punch_out = record.timestamp
    else:
        elapsed = acc.last_punch_out - record.timestamp
        acc.current_bucket += elapsed
        acc.total += elapsed
    return acc
