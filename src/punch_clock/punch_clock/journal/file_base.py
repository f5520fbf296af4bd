from __future__ import annotations

import os
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator

from ..core.exceptions import JournalIOError


@contextmanager
def journal_handle(path: Path, mode: str) -> Iterator[BinaryIO]:
    """Open the log file in binary ``mode`` for a single operation.

    Every ``OSError`` raised while the handle is open surfaces as
    ``JournalIOError``.
    """
    try:
        with open(path, mode) as fh:
            yield fh
    except OSError as e:
        raise JournalIOError(f"{path}: {e.strerror or e}") from e


def file_length(fh: BinaryIO) -> int:
    return os.fstat(fh.fileno()).st_size


def read_exact(fh: BinaryIO, position: int, length: int) -> bytes:
    """Seek to ``position`` and read exactly ``length`` bytes."""
    landed = fh.seek(position)
    if landed != position:
        raise JournalIOError(f"Could not seek to byte offset {position}")

    data = fh.read(length)
    if len(data) != length:
        raise JournalIOError(
            f"Short read at byte offset {position}: got {len(data)} of {length} bytes"
        )
    return data
