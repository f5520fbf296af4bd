from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.enums import Action


@dataclass(frozen=True)
class Record:
    """Domain entity: one journal entry, immutable once written."""

    timestamp: datetime
    action: Action
