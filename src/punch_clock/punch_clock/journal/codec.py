"""Fixed-width record codec.

Each record is exactly ``RECORD_LENGTH`` ASCII bytes::

    YYYY-MM-DDTHH:MM:SS _ I|O \\n

The codec checks the shape of a single record only. Ordering and in/out
alternation are the concern of the services reading the journal.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from ..common.datetime_utils import to_utc
from ..core.constants import RECORD_LENGTH, TIMESTAMP_FORMAT, TIMESTAMP_LENGTH
from ..core.enums import Action
from ..core.exceptions import MalformedRecordError, MalformedTimestampError, UnknownActionError
from .model import Record

_ACTION_SUFFIXES = {
    Action.PUNCH_IN: b"_I\n",
    Action.PUNCH_OUT: b"_O\n",
}
_SUFFIX_ACTIONS = {suffix: action for action, suffix in _ACTION_SUFFIXES.items()}


def _format_timestamp(value: datetime) -> bytes:
    ts = to_utc(value)
    # strftime("%Y") does not zero-pad years below 1000 on every platform.
    text = (
        f"{ts.year:04d}-{ts.month:02d}-{ts.day:02d}"
        f"T{ts.hour:02d}:{ts.minute:02d}:{ts.second:02d}"
    )
    return text.encode("ascii")


def encode(record: Record) -> bytes:
    suffix = _ACTION_SUFFIXES.get(record.action)
    if suffix is None:
        raise UnknownActionError(
            f"Cannot persist action {record.action.value}",
            raw=record.action.value.encode("ascii"),
        )
    data = _format_timestamp(record.timestamp) + suffix
    if len(data) != RECORD_LENGTH:
        raise ValueError(f"Encoded record is {len(data)} bytes, expected {RECORD_LENGTH}")
    return data


def _parse_timestamp(field: bytes, *, raw: bytes, offset: Optional[int]) -> datetime:
    try:
        text = field.decode("ascii")
        parsed = datetime.strptime(text, TIMESTAMP_FORMAT)
    except (UnicodeDecodeError, ValueError) as e:
        raise MalformedTimestampError(f"Invalid timestamp ({e})", raw=raw, offset=offset) from e

    # strptime tolerates unpadded fields; only the canonical spelling is a valid record.
    if _format_timestamp(parsed).decode("ascii") != text:
        raise MalformedTimestampError("Non-canonical timestamp", raw=raw, offset=offset)
    return parsed.replace(tzinfo=timezone.utc)


def decode(data: bytes, *, offset: Optional[int] = None) -> Record:
    """Decode one record; ``offset`` is the byte position, used in error messages."""
    raw = bytes(data)
    if len(raw) != RECORD_LENGTH:
        raise MalformedRecordError(
            f"Record is {len(raw)} bytes, expected {RECORD_LENGTH}", raw=raw, offset=offset
        )

    timestamp = _parse_timestamp(raw[:TIMESTAMP_LENGTH], raw=raw, offset=offset)

    action = _SUFFIX_ACTIONS.get(raw[TIMESTAMP_LENGTH:])
    if action is None:
        raise UnknownActionError("Could not determine action type", raw=raw, offset=offset)

    return Record(timestamp=timestamp, action=action)
