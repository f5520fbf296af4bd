from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional

from ..common.datetime_utils import now_utc, to_utc
from ..core.enums import Action
from ..core.exceptions import AlreadyPunchedInError, AlreadyPunchedOutError, ValidationError
from ..journal.model import Record
from ..journal.repository import JournalRepository

logger = logging.getLogger(__name__)


class PunchService:
    """Accepts punches and keeps the journal alternating in/out."""

    def __init__(self, journal: JournalRepository, *, clock: Optional[Callable[[], datetime]] = None):
        self._journal = journal
        self._clock = clock or now_utc

    def last_action(self) -> Action:
        if self._journal.size() == 0:
            return Action.UNSET
        return self._journal.read_from_end(0).action

    def require_last_action(self, expected: Action) -> None:
        last = self.last_action()

        # An empty log accepts any first punch.
        if last == Action.UNSET:
            return

        if last != expected:
            if expected == Action.PUNCH_OUT:
                raise AlreadyPunchedInError()
            raise AlreadyPunchedOutError()

    def punch(self, action: Action, *, now: datetime | None = None) -> Record:
        if action not in (Action.PUNCH_IN, Action.PUNCH_OUT):
            raise ValidationError(f"Cannot punch with action {action.value}")

        now = to_utc(now or self._clock())
        self.require_last_action(action.opposite)

        if action == Action.PUNCH_OUT and self._journal.size() == 0:
            logger.warning("first record in the log is a punch-out")

        record = Record(timestamp=now, action=action)
        self._journal.append(record)
        logger.info("%s at %s", action.value, now.isoformat())
        return record

    def punch_in(self, *, now: datetime | None = None) -> Record:
        return self.punch(Action.PUNCH_IN, now=now)

    def punch_out(self, *, now: datetime | None = None) -> Record:
        return self.punch(Action.PUNCH_OUT, now=now)
