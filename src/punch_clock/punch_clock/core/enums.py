from __future__ import annotations

from enum import Enum


class Action(str, Enum):
    """What a journal record marks: the start or the end of a session."""

    PUNCH_IN = "PUNCH_IN"
    PUNCH_OUT = "PUNCH_OUT"
    # No record available; never written to the log.
    UNSET = "UNSET"

    @property
    def opposite(self) -> "Action":
        if self is Action.PUNCH_IN:
            return Action.PUNCH_OUT
        if self is Action.PUNCH_OUT:
            return Action.PUNCH_IN
        return Action.UNSET
