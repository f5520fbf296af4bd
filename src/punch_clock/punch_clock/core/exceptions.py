from __future__ import annotations

from typing import Optional


class PunchError(Exception):
    """Base exception for journal and punch rule failures."""


class ValidationError(PunchError):
    """Raised when caller input is invalid."""


class JournalIOError(PunchError):
    """Raised when the log file cannot be opened, read, written or sought."""


class InsufficientDataError(PunchError):
    """Raised when the log holds fewer records than a read requires."""


class MalformedRecordError(PunchError):
    """Raised when bytes read from the log do not form a valid record."""

    def __init__(self, message: str, *, raw: bytes, offset: Optional[int] = None):
        self.raw = bytes(raw)
        self.offset = offset
        where = f" at byte {offset}" if offset is not None else ""
        super().__init__(f"{message}{where}: {self.raw!r}")


class MalformedTimestampError(MalformedRecordError):
    """Raised when the timestamp field cannot be parsed."""


class UnknownActionError(MalformedRecordError):
    """Raised when the action field is neither punch-in nor punch-out."""


class StateViolationError(PunchError):
    """Raised when a punch would break in/out alternation."""


class AlreadyPunchedInError(StateViolationError):
    def __init__(self, message: str = "Already punched in, punch out first!"):
        super().__init__(message)


class AlreadyPunchedOutError(StateViolationError):
    def __init__(self, message: str = "Already punched out, punch in first!"):
        super().__init__(message)
