import os
import tempfile
from pathlib import Path

# Never touch the real journal from a test run.
LOG_PATH = os.getenv("PUNCH_LOG_PATH", str(Path(tempfile.gettempdir()) / "punch-test" / "punch.log"))

DEBUG = False
TESTING = True

LOG_LEVEL = "DEBUG"
