import os
from pathlib import Path

LOG_PATH = os.getenv("PUNCH_LOG_PATH", str(Path.home() / ".punch" / "punch.log"))

DEBUG = False

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
