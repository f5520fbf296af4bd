from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from src.punch_clock.punch_clock.core.constants import RECORD_LENGTH
from src.punch_clock.punch_clock.core.enums import Action
from src.punch_clock.punch_clock.core.exceptions import (
    MalformedRecordError,
    MalformedTimestampError,
    UnknownActionError,
)
from src.punch_clock.punch_clock.journal.codec import decode, encode
from src.punch_clock.punch_clock.journal.model import Record


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


def test_encode_exact_layout():
    assert encode(Record(utc(2024, 1, 1, 9, 0, 0), Action.PUNCH_IN)) == b"2024-01-01T09:00:00_I\n"
    assert encode(Record(utc(2024, 12, 31, 23, 59, 59), Action.PUNCH_OUT)) == b"2024-12-31T23:59:59_O\n"


def test_encode_is_always_fixed_width():
    for ts in (utc(1, 1, 1), utc(999, 3, 4, 5, 6, 7), utc(2024, 2, 29, 12), utc(9999, 12, 31, 23, 59, 59)):
        assert len(encode(Record(ts, Action.PUNCH_IN))) == RECORD_LENGTH


def test_encode_pads_small_years():
    assert encode(Record(utc(7, 8, 9, 1, 2, 3), Action.PUNCH_OUT)) == b"0007-08-09T01:02:03_O\n"


def test_encode_converts_to_utc_and_drops_microseconds():
    plus_two = timezone(timedelta(hours=2))
    ts = datetime(2024, 6, 1, 10, 30, 15, 999_999, tzinfo=plus_two)

    assert encode(Record(ts, Action.PUNCH_IN)) == b"2024-06-01T08:30:15_I\n"


def test_encode_rejects_unset_action():
    with pytest.raises(UnknownActionError):
        encode(Record(utc(2024, 1, 1), Action.UNSET))


def test_decode_inverts_encode():
    records = [
        Record(utc(2024, 1, 1, 9, 0, 0), Action.PUNCH_IN),
        Record(utc(2024, 1, 1, 17, 0, 0), Action.PUNCH_OUT),
        Record(utc(1970, 1, 1), Action.PUNCH_IN),
    ]
    for record in records:
        assert decode(encode(record)) == record


def test_decoded_timestamp_is_aware_utc():
    record = decode(b"2024-03-10T07:08:09_O\n")

    assert record.timestamp.tzinfo == timezone.utc
    assert record.action == Action.PUNCH_OUT


@pytest.mark.parametrize("tail", [b"_X\n", b"_i\n", b"-I\n", b"_I\r", b"_U\n"])
def test_decode_unknown_action(tail):
    with pytest.raises(UnknownActionError) as exc:
        decode(b"2024-01-01T09:00:00" + tail)

    assert exc.value.raw == b"2024-01-01T09:00:00" + tail
    assert isinstance(exc.value, MalformedRecordError)


@pytest.mark.parametrize(
    "data",
    [
        b"2024-13-01T09:00:00_I\n",
        b"2024-01-01 09:00:00_I\n",
        b"2024-1-01T09:00:00 _I\n",
        b"2024-01-01T9:00:00X_I\n",
        b"\xff\xfe24-01-01T09:00:00_I\n",
        b"2023-02-29T09:00:00_I\n",
    ],
)
def test_decode_malformed_timestamp(data):
    with pytest.raises(MalformedTimestampError):
        decode(data)


def test_decode_error_reports_offset_and_bytes():
    with pytest.raises(UnknownActionError) as exc:
        decode(b"2024-01-01T09:00:00_X\n", offset=44)

    assert exc.value.offset == 44
    assert "byte 44" in str(exc.value)
    assert "_X" in str(exc.value)


def test_decode_wrong_length():
    with pytest.raises(MalformedRecordError):
        decode(b"2024-01-01T09:00:00_I")
