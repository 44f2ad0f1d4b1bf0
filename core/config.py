# core/config.py

"""Configuration settings for the Roster Manager."""

import logging
import os
from typing import Final

# Debug flag: 1 = debug mode (verbose logging), 0 = normal mode
DEBUG: Final[int] = int(os.environ.get("ROSTER_DEBUG", "0"))

# --- File Paths ---

DEFAULT_DATA_FILE: Final[str] = os.path.join(
    os.path.expanduser("~"), "Documents", "Rosters", "roster.json"
)
DATA_FILE: Final[str] = os.environ.get("ROSTER_DATA_FILE", DEFAULT_DATA_FILE)

LOG_DIR: Final[str] = "logs"
LOG_FILE: Final[str] = os.environ.get(
    "ROSTER_LOG_FILE", os.path.join(LOG_DIR, "roster.log")
)

# --- Logging Configuration ---

LOG_LEVEL = logging.DEBUG if DEBUG else logging.INFO
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(module)s.%(funcName)s:%(lineno)d | %(message)s"
