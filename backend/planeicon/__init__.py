"""
planeicon
~~~~~~~~~
Pick a display icon for an aircraft from the loose bag of fields an ADS-B
receiver feed reports about it (``wtc``, ``category``, ``type``, ``desc``).

>>> from planeicon import classify, IconId
>>> classify({"category": "A7"}) is IconId.ROTOR
True

Whole dump1090 ``aircraft.json`` documents go through
:func:`~planeicon.feed.classify_snapshot`; applications that want the
package's log lines on stdout call
:func:`~planeicon.logging_config.configure_logging` once at startup.
"""

from __future__ import annotations

from .classifier import classify, classify_descriptor
from .feed import classify_snapshot, icon_histogram
from .icons import ICONS, IconDescriptor, IconId, icon_for_id
from .logging_config import configure_logging
from .record import AircraftRecord, MappingRecord

__all__ = [
    "AircraftRecord",
    "ICONS",
    "IconDescriptor",
    "IconId",
    "MappingRecord",
    "classify",
    "classify_descriptor",
    "classify_snapshot",
    "configure_logging",
    "icon_for_id",
    "icon_histogram",
]
