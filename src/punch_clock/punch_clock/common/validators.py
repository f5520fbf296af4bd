from __future__ import annotations

from ..core.exceptions import ValidationError


def require_non_negative(value: int, field_name: str) -> int:
    if value is None or int(value) < 0:
        raise ValidationError(f"{field_name} must be a non-negative integer, got {value!r}")
    return int(value)
