from __future__ import annotations

from contextlib import closing
from datetime import datetime
from functools import reduce
from itertools import takewhile
from typing import Callable, Optional

from ..common.datetime_utils import now_utc, to_utc
from ..core.enums import Action
from ..journal.repository import JournalRepository
from .accumulator import SummaryAccumulator, fold_record
from .calendar import month_cutoff, week_cutoff
from .model import PeriodSummary, SessionStatus


class ReportService:
    def __init__(self, journal: JournalRepository, *, clock: Optional[Callable[[], datetime]] = None):
        self._journal = journal
        self._clock = clock or now_utc

    def current_status(self, *, now: datetime | None = None) -> SessionStatus:
        now = to_utc(now or self._clock())

        last = self._journal.read_from_end(0)
        if last.action == Action.PUNCH_IN:
            return SessionStatus(
                is_open=True,
                started_at=last.timestamp,
                ended_at=None,
                duration=now - last.timestamp,
            )

        previous = self._journal.read_from_end(1)
        return SessionStatus(
            is_open=False,
            started_at=previous.timestamp,
            ended_at=last.timestamp,
            duration=last.timestamp - previous.timestamp,
        )

    def summary_since(self, cutoff: datetime, *, now: datetime | None = None) -> PeriodSummary:
        """Per-day punched-in time from ``cutoff`` up to ``now``.

        Walks the journal backward and stops at the first record older than
        ``cutoff``. A session still open at ``now`` counts up to ``now``.
        """
        now = to_utc(now or self._clock())
        cutoff = to_utc(cutoff)

        with closing(self._journal.iter_from_end()) as records:
            in_window = takewhile(lambda r: r.timestamp >= cutoff, records)
            acc = reduce(fold_record, in_window, SummaryAccumulator(last_punch_out=now))
        return acc.result()

    def week_summary(self, *, now: datetime | None = None) -> PeriodSummary:
        now = to_utc(now or self._clock())
        return self.summary_since(week_cutoff(now), now=now)

    def month_to_date_summary(self, *, now: datetime | None = None) -> PeriodSummary:
        now = to_utc(now or self._clock())
        return self.summary_since(month_cutoff(now), now=now)
