from __future__ import annotations

from typing import Iterator, Protocol

from .model import Record


class JournalRepository(Protocol):
    def size(self) -> int:
        raise NotImplementedError

    def append(self, record: Record) -> None:
        raise NotImplementedError

    def read_from_end(self, offset_from_end: int) -> Record:
        """Record at reverse offset ``offset_from_end`` (0 = most recent)."""

        raise NotImplementedError

    def iter_from_end(self) -> Iterator[Record]:
        """Most recent record first, back to the start of the journal.

        Each call starts a fresh traversal.
        """

        raise NotImplementedError
