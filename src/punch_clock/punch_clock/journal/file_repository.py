from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO, Iterator

from ..common.validators import require_non_negative
from ..core.constants import RECORD_LENGTH
from ..core.exceptions import InsufficientDataError, JournalIOError
from .codec import decode, encode
from .file_base import file_length, journal_handle, read_exact
from .model import Record
from .repository import JournalRepository

logger = logging.getLogger(__name__)


class FileJournalRepository(JournalRepository):
    """Append-only journal stored as fixed-width records in a flat file.

    Note: Handles are short-lived, one per operation. Only one process is
    expected to use a given log file at a time; nothing here locks it.
    """

    def __init__(self, path: Path | str):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def size(self) -> int:
        try:
            return self._path.stat().st_size
        except OSError as e:
            raise JournalIOError(f"{self._path}: {e.strerror or e}") from e

    def append(self, record: Record) -> None:
        data = encode(record)
        with journal_handle(self._path, "ab") as fh:
            written = fh.write(data)
        if written != len(data):
            raise JournalIOError(f"Wrote {written} of {len(data)} bytes to {self._path}")
        logger.debug("appended %s to %s", data.rstrip(b"\n").decode("ascii"), self._path)

    def read_from_end(self, offset_from_end: int) -> Record:
        offset_from_end = require_non_negative(offset_from_end, "offset_from_end")
        with journal_handle(self._path, "rb") as fh:
            return self._read_at(fh, file_length(fh), offset_from_end)

    def iter_from_end(self) -> Iterator[Record]:
        with journal_handle(self._path, "rb") as fh:
            length = file_length(fh)
            for offset_from_end in range(length // RECORD_LENGTH):
                yield self._read_at(fh, length, offset_from_end)

    @staticmethod
    def _read_at(fh: BinaryIO, length: int, offset_from_end: int) -> Record:
        if length < RECORD_LENGTH:
            raise InsufficientDataError("No data in log - punch in first!")

        position = length - (offset_from_end + 1) * RECORD_LENGTH
        if position < 0:
            raise InsufficientDataError(
                f"Log holds {length // RECORD_LENGTH} record(s), "
                f"no record at offset {offset_from_end} from the end"
            )

        return decode(read_exact(fh, position, RECORD_LENGTH), offset=position)
