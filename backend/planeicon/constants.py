# backend/planeicon/constants.py

"""
Runtime configuration, read once from the environment at import time.

Configuration:
    PLANEICON_LOG_LEVEL: level for the package loggers (default: INFO)
    PLANEICON_STALE_SEC: drop feed entries not heard from for longer than
                         this many seconds (default: 60)
"""

from __future__ import annotations

import os
from typing import Final

LOG_LEVEL: Final[str] = os.getenv("PLANEICON_LOG_LEVEL", "INFO").upper()
STALE_AFTER_SEC: Final[float] = float(os.getenv("PLANEICON_STALE_SEC", "60"))

#: Logger names owned by this package (see logging_config.py)
LOGGER_NAMES: Final[tuple[str, ...]] = ("classifier", "feed")
