"""Constants and defaults.

Note: Keep the on-disk layout here; codec and store must stay in sync.
"""

# Record: [timestamp(19) | "_"(1) | action(1) | "\n"(1)] = 22 bytes
TIMESTAMP_LENGTH = 19
RECORD_LENGTH = 22
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S"

DEFAULT_LOG_DIRNAME = ".punch"
DEFAULT_LOG_FILENAME = "punch.log"
