"""
tests/conftest.py
~~~~~~~~~~~~~~~~~
Global pytest fixtures.

`reset_package_loggers` detaches whatever `configure_logging()` attached
during a test so handlers and levels never leak between tests.
"""

from __future__ import annotations

import logging

import pytest

from planeicon import logging_config
from planeicon.constants import LOGGER_NAMES


@pytest.fixture(autouse=True)
def reset_package_loggers(monkeypatch: pytest.MonkeyPatch):
    """Give every test a fresh handler slot and untouched package loggers."""
    monkeypatch.setattr(logging_config, "_handler", None, raising=True)
    saved = {
        name: (logging.getLogger(name).level, list(logging.getLogger(name).handlers))
        for name in LOGGER_NAMES
    }

    yield

    for name, (level, handlers) in saved.items():
        log = logging.getLogger(name)
        log.setLevel(level)
        log.handlers[:] = handlers


@pytest.fixture
def plane() -> dict:
    """A realistic dump1090 entry for an airliner with no special markers."""
    return {
        "hex": "4ca1fa",
        "flight": "RYR2AB  ",
        "category": "A3",
        "wtc": "M",
        "type": "B738",
        "desc": "BOEING 737-800",
        "lat": 54.12,
        "lon": -1.23,
        "seen": 0.4,
    }
