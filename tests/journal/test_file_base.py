from __future__ import annotations

import io

import pytest

from src.punch_clock.punch_clock.core.exceptions import JournalIOError
from src.punch_clock.punch_clock.journal.file_base import file_length, journal_handle, read_exact


class StuckSeekStream(io.BytesIO):
    def seek(self, pos, whence=0):
        return 0


def test_read_exact_returns_requested_bytes():
    fh = io.BytesIO(b"0123456789")

    assert read_exact(fh, 3, 4) == b"3456"


def test_short_read_is_an_error_not_padding():
    with pytest.raises(JournalIOError) as exc:
        read_exact(io.BytesIO(b"x" * 10), 0, 22)

    assert "got 10 of 22" in str(exc.value)


def test_seek_landing_elsewhere_is_an_error():
    with pytest.raises(JournalIOError):
        read_exact(StuckSeekStream(b"x" * 44), 22, 22)


def test_journal_handle_wraps_os_errors(tmp_path):
    with pytest.raises(JournalIOError):
        with journal_handle(tmp_path / "missing.log", "rb"):
            pass


def test_file_length(tmp_path):
    path = tmp_path / "punch.log"
    path.write_bytes(b"a" * 44)

    with journal_handle(path, "rb") as fh:
        assert file_length(fh) == 44
