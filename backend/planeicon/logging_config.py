"""
logging_config.py
~~~~~~~~~~~~~~~~~
One stdout handler for the package loggers, same line format as the rest
of our services::

    INFO:     feed - [feed] 12 aircraft classified (3 stale, 0 malformed)

Library code never calls this; an application embedding *planeicon* opts
in once at startup.
"""

from __future__ import annotations

import logging
import sys

from .constants import LOG_LEVEL, LOGGER_NAMES

FORMAT = "%(levelname)s:     %(name)s - %(message)s"

_handler: logging.Handler | None = None


def configure_logging(level: str | int | None = None) -> logging.Handler:
    """
    Attach the shared stdout handler to every package logger.

    Calling it again only updates the level; the handler is never added
    twice.
    """
    global _handler

    if _handler is None:
        _handler = logging.StreamHandler(sys.stdout)
        _handler.setFormatter(logging.Formatter(FORMAT))

    resolved = LOG_LEVEL if level is None else level
    if isinstance(resolved, str):
        resolved = resolved.upper()

    for name in LOGGER_NAMES:
        log = logging.getLogger(name)
        if _handler not in log.handlers:
            log.addHandler(_handler)
        log.setLevel(resolved)

    return _handler


__all__ = ["FORMAT", "configure_logging"]
