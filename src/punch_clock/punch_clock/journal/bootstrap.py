from __future__ import annotations

import logging
from pathlib import Path

from ..core.constants import DEFAULT_LOG_DIRNAME, DEFAULT_LOG_FILENAME
from ..core.exceptions import JournalIOError

logger = logging.getLogger(__name__)


def default_log_path() -> Path:
    return Path.home() / DEFAULT_LOG_DIRNAME / DEFAULT_LOG_FILENAME


def ensure_log_file(path: Path | str) -> Path:
    """Create the log directory and an empty log file if they are missing.

    Existing logs are left untouched.
    """
    path = Path(path).expanduser()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        if not path.exists():
            path.touch()
            logger.info("created punch log at %s", path)
    except OSError as e:
        raise JournalIOError(f"{path}: {e.strerror or e}") from e
    return path
