from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from .journal.file_repository import FileJournalRepository
from .punch.service import PunchService
from .report.service import ReportService


@dataclass(frozen=True)
class Container:
    journal_repo: FileJournalRepository

    punch_service: PunchService
    report_service: ReportService


def build_container(*, log_path: Path | str, clock: Optional[Callable[[], datetime]] = None) -> Container:
    journal_repo = FileJournalRepository(log_path)

    punch_service = PunchService(journal_repo, clock=clock)
    report_service = ReportService(journal_repo, clock=clock)

    return Container(
        journal_repo=journal_repo,
        punch_service=punch_service,
        report_service=report_service,
    )
