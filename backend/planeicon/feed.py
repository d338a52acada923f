"""
feed.py
~~~~~~~
Classify every aircraft in one already-decoded dump1090 ``aircraft.json``
document::

    {"now": 1718000000.1, "messages": 123456,
     "aircraft": [{"hex": "4ca1fa", "flight": "RYR2AB  ", "category": "A3",
                   "lat": 54.1, "lon": -1.2, "seen": 0.4, ...}, ...]}

Fetching and decoding the document is the caller's job; nothing here does
I/O.

* Entries that are not objects are skipped and counted as *malformed*.
* Entries whose ``seen`` exceeds the staleness window are skipped and
  counted as *stale* (``PLANEICON_STALE_SEC``, default 60 s).
"""

from __future__ import annotations

import datetime as dt
import logging
from collections import Counter
from collections.abc import Iterable, Mapping
from typing import Any, Final, TypedDict

from dateutil import tz

from .classifier import classify
from .constants import STALE_AFTER_SEC
from .icons import ICONS, IconId, icon_for_id
from .record import MappingRecord

UTC: Final = tz.UTC
LOG = logging.getLogger("feed")


# ─────────────────────────────── typing ─────────────────────────────────
class ClassifiedAircraft(TypedDict):
    hex: str | None
    callsign: str | None
    icon: IconId
    icon_key: str
    lat: float | None
    lon: float | None
    seen: float | None


class FeedSnapshot(TypedDict):
    ts: dt.datetime | None
    aircraft: list[ClassifiedAircraft]
    stale: int
    malformed: int


# ─────────────────────────────── helpers ────────────────────────────────
def _snapshot_ts(doc: Mapping[str, Any]) -> dt.datetime | None:
    now = MappingRecord(doc).get_number("now")
    if now is None:
        return None
    try:
        return dt.datetime.fromtimestamp(now, UTC)
    except (OverflowError, OSError, ValueError) as exc:
        LOG.debug("[feed] unusable 'now' %r → %s", now, exc)
        return None


def _float_or_none(value: int | float | None) -> float | None:
    return float(value) if value is not None else None


def classify_aircraft(entry: Mapping[str, Any]) -> ClassifiedAircraft:
    """Classify one feed entry and keep the fields a map view needs."""
    record = MappingRecord(entry)
    icon = classify(record)
    flight = record.get_str("flight")

    return ClassifiedAircraft(
        hex=record.get_str("hex"),
        callsign=(flight.strip() or None) if flight is not None else None,
        icon=icon,
        icon_key=icon_for_id(icon).key,
        lat=_float_or_none(record.get_number("lat")),
        lon=_float_or_none(record.get_number("lon")),
        seen=_float_or_none(record.get_number("seen")),
    )


# ───────────────────────────── public helper ────────────────────────────
def classify_snapshot(
    doc: Mapping[str, Any] | None,
    max_seen_sec: float | None = STALE_AFTER_SEC,
) -> FeedSnapshot:
    """
    Classify a whole ``aircraft.json`` document.

    Args:
        doc:           Decoded JSON object (anything else → empty snapshot).
        max_seen_sec:  Staleness window in seconds; ``None`` keeps everything.

    Returns:
        :class:`FeedSnapshot` with entries in feed order.
    """
    snapshot = FeedSnapshot(ts=None, aircraft=[], stale=0, malformed=0)
    if not isinstance(doc, Mapping):
        LOG.debug("[feed] not a JSON object: %s", type(doc).__name__)
        return snapshot

    snapshot["ts"] = _snapshot_ts(doc)

    entries = doc.get("aircraft")
    if not isinstance(entries, list):
        LOG.debug("[feed] no aircraft list in snapshot")
        return snapshot

    for entry in entries:
        if not isinstance(entry, Mapping):
            snapshot["malformed"] += 1
            LOG.debug("[feed] skipping malformed entry %r", entry)
            continue

        plane = classify_aircraft(entry)
        seen = plane["seen"]
        if max_seen_sec is not None and seen is not None and seen > max_seen_sec:
            snapshot["stale"] += 1
            continue

        snapshot["aircraft"].append(plane)

    LOG.info(
        "[feed] %d aircraft classified (%d stale, %d malformed)",
        len(snapshot["aircraft"]),
        snapshot["stale"],
        snapshot["malformed"],
    )
    return snapshot


def icon_histogram(aircraft: Iterable[ClassifiedAircraft]) -> dict[str, int]:
    """Count aircraft per icon key; every icon is present, in ordinal order."""
    counts = Counter(plane["icon_key"] for plane in aircraft)
    return {desc.key: counts.get(desc.key, 0) for desc in ICONS}


__all__ = [
    "ClassifiedAircraft",
    "FeedSnapshot",
    "classify_aircraft",
    "classify_snapshot",
    "icon_histogram",
]
