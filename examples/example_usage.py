"""Example: using the service layer directly (no CLI).

Goal: the click commands are a thin layer; the journal rules live in the services.
"""

import importlib
from pathlib import Path

from config import get_settings_module

from src.punch_clock.punch_clock.container import build_container
from src.punch_clock.punch_clock.common.datetime_utils import format_duration
from src.punch_clock.punch_clock.journal.bootstrap import ensure_log_file


def main():
    settings = importlib.import_module(get_settings_module())
    log_path = ensure_log_file(Path(settings.LOG_PATH))
    container = build_container(log_path=log_path)

    print(container.punch_service.last_action())
    summary = container.report_service.week_summary()
    for day in summary.days:
        print(day.date, format_duration(day.duration))
    print("Total:", format_duration(summary.total))


if __name__ == "__main__":
    main()
