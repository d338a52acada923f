"""
classifier.py
~~~~~~~~~~~~~
Turn one aircraft entry from the receiver feed into an :class:`IconId`.

Three independent readings are taken and then merged:

* ``wtc``       – wake turbulence category (number or letter) → weight class
* ``category``  – two-character ADS-B emitter category (``"A3"``, ``"B1"`` …)
* ``type`` / ``desc`` – free text, scanned for keywords

Merge order (later wins)
------------------------
1. The WTC reading is the baseline.
2. A non-MEDIUM category reading replaces it, except that a category LIGHT
   only fills in a MEDIUM baseline. A HEAVY baseline is never downgraded,
   while a category HEAVY always applies.
3. A keyword hit in ``type`` (or, failing that, ``desc``) replaces
   whatever came before.
4. The result is clamped to a valid id.

Everything here is pure: no state, no I/O, safe to call from any thread.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Final

from .icons import (
    DEFAULT_ICON,
    IconDescriptor,
    IconId,
    clamp_icon_id,
    icon_for_id,
    is_special,
)
from .record import as_record
from .text_match import contains_ignore_case

LOG = logging.getLogger("classifier")

# ─────────────────────────────── rule tables ────────────────────────────
WTC_NUMERIC: Final[dict[int, IconId]] = {
    1: IconId.LIGHT,
    2: IconId.MEDIUM,
    3: IconId.HEAVY,
}

WTC_LETTER: Final[dict[str, IconId]] = {
    "L": IconId.LIGHT,
    "M": IconId.MEDIUM,
    "H": IconId.HEAVY,
    "J": IconId.HEAVY,  # "super" (A380, An-225)
}

#: (upper-cased first char, second char) → icon; unlisted codes are MEDIUM
CATEGORY_CODES: Final[dict[tuple[str, str], IconId]] = {
    ("A", "1"): IconId.LIGHT,
    ("A", "2"): IconId.LIGHT,
    ("A", "3"): IconId.MEDIUM,
    ("A", "4"): IconId.HEAVY,
    ("A", "5"): IconId.HEAVY,
    ("A", "7"): IconId.ROTOR,
    ("B", "1"): IconId.GLIDER,
    ("B", "2"): IconId.LIGHTER_THAN_AIR,
    ("B", "4"): IconId.DRONE_UAV,
    ("B", "6"): IconId.LIGHT,
}

#: Checked in order, first hit wins
DESCRIPTOR_KEYWORDS: Final[tuple[tuple[tuple[str, ...], IconId], ...]] = (
    (("HELI", "ROTOR"), IconId.ROTOR),
    (("GLIDER", "SAILPLANE"), IconId.GLIDER),
    (("BALLOON", "AIRSHIP", "BLIMP"), IconId.LIGHTER_THAN_AIR),
    (("DRONE", "UAV", "UAS", "UNMANNED"), IconId.DRONE_UAV),
    (("ULTRA",), IconId.LIGHT),
    (("HEAVY", "SUPER"), IconId.HEAVY),
)

#: When a non-MEDIUM category reading replaces the current icon.
#: Each entry: (tag, predicate(category_icon, current_icon)); first match wins.
CategoryRule = tuple[str, Callable[[IconId, IconId], bool]]
CATEGORY_OVERRIDES: Final[tuple[CategoryRule, ...]] = (
    ("special", lambda cat, cur: is_special(cat)),
    ("heavy", lambda cat, cur: cat == IconId.HEAVY),
    ("fill-default", lambda cat, cur: cur == DEFAULT_ICON),
)


# ──────────────────────────── single readings ───────────────────────────
def icon_from_wtc(value: object) -> IconId:
    """Weight class from a numeric or lettered wake turbulence category."""
    if value is None or isinstance(value, bool):
        return DEFAULT_ICON
    if isinstance(value, int):
        if value <= 0:
            return DEFAULT_ICON
        return WTC_NUMERIC.get(value, DEFAULT_ICON)
    if isinstance(value, str) and value:
        return WTC_LETTER.get(value[0].upper(), DEFAULT_ICON)
    return DEFAULT_ICON


def icon_from_category(code: object) -> IconId:
    """Icon for an emitter category code such as ``"A7"``."""
    if not isinstance(code, str) or not code:
        return DEFAULT_ICON
    # only the first letter is case-folded; the digit must match as-is
    return CATEGORY_CODES.get((code[0].upper(), code[1:2]), DEFAULT_ICON)


def icon_from_descriptor(text: object) -> IconId:
    """
    Keyword scan of a type designator or description.

    MEDIUM here means *no keyword found*, not *this is a medium aircraft*.
    """
    if not isinstance(text, str) or not text:
        return DEFAULT_ICON
    for keywords, icon in DESCRIPTOR_KEYWORDS:
        if any(contains_ignore_case(text, kw) for kw in keywords):
            return icon
    return DEFAULT_ICON


# ───────────────────────────────── merge ────────────────────────────────
def category_override(category_icon: IconId, current: IconId) -> str | None:
    """Tag of the rule letting ``category_icon`` replace ``current``, if any."""
    if category_icon == DEFAULT_ICON:
        return None
    for tag, applies in CATEGORY_OVERRIDES:
        if applies(category_icon, current):
            return tag
    return None


def merge_icons(
    wtc_icon: IconId, category_icon: IconId, descriptor_icon: IconId
) -> IconId:
    """Combine the three readings (see module docstring for the order)."""
    icon = wtc_icon

    if category_override(category_icon, icon) is not None:
        icon = category_icon

    if descriptor_icon != DEFAULT_ICON:
        icon = descriptor_icon

    return clamp_icon_id(icon)


# ───────────────────────────── public helpers ───────────────────────────
def _wtc_field(record) -> int | float | str | None:
    number = record.get_number("wtc")
    if number is not None:
        return number
    return record.get_str("wtc")


def classify(plane: object) -> IconId:
    """
    Return the icon for one aircraft.

    ``plane`` may be any :class:`~planeicon.record.AircraftRecord`, a plain
    mapping straight from the decoded feed, or ``None``.
    """
    record = as_record(plane)

    wtc_icon = icon_from_wtc(_wtc_field(record))
    category_icon = icon_from_category(record.get_str("category"))

    descriptor_icon = icon_from_descriptor(record.get_str("type"))
    if descriptor_icon == DEFAULT_ICON:
        descriptor_icon = icon_from_descriptor(record.get_str("desc"))

    icon = merge_icons(wtc_icon, category_icon, descriptor_icon)
    if LOG.isEnabledFor(logging.DEBUG):
        LOG.debug(
            "[icon] wtc=%s category=%s text=%s → %s",
            wtc_icon.name,
            category_icon.name,
            descriptor_icon.name,
            icon.name,
        )
    return icon


def classify_descriptor(plane: object) -> IconDescriptor:
    """Shortcut for ``icon_for_id(classify(plane))``."""
    return icon_for_id(classify(plane))


__all__ = [
    "CATEGORY_CODES",
    "CATEGORY_OVERRIDES",
    "DESCRIPTOR_KEYWORDS",
    "category_override",
    "classify",
    "classify_descriptor",
    "icon_from_category",
    "icon_from_descriptor",
    "icon_from_wtc",
    "merge_icons",
]
