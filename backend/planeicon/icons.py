"""
icons.py
~~~~~~~~
Single source of truth for every icon the map can draw.

Key points
----------
* ``IconId`` ordinals double as indices into :data:`ICONS`, so the two
  must stay in lock-step (``tests/test_icons.py`` checks it).
* ``MEDIUM`` is the catch-all: any unknown, missing or out-of-range value
  ends up there.
* Rotorcraft, gliders, balloons/airships and drones are *special* icons.
  They beat the coarse weight classes when signals are merged.
"""

from __future__ import annotations

import enum
from typing import Final, NamedTuple


class IconId(enum.IntEnum):
    LIGHT = 0
    MEDIUM = 1
    HEAVY = 2
    ROTOR = 3
    GLIDER = 4
    LIGHTER_THAN_AIR = 5
    DRONE_UAV = 6


ICON_COUNT: Final[int] = len(IconId)
DEFAULT_ICON: Final = IconId.MEDIUM

SPECIAL_ICONS: Final[frozenset[IconId]] = frozenset(
    {IconId.ROTOR, IconId.GLIDER, IconId.LIGHTER_THAN_AIR, IconId.DRONE_UAV}
)
WEIGHT_CLASS_ICONS: Final[frozenset[IconId]] = frozenset(
    {IconId.LIGHT, IconId.MEDIUM, IconId.HEAVY}
)


class IconDescriptor(NamedTuple):
    """Presentation metadata for one icon."""

    key: str
    label: str
    glyph: str  # one-character marker for text displays


# ───────────── indexed by IconId ordinal
ICONS: Final[tuple[IconDescriptor, ...]] = (
    IconDescriptor("light", "Light aircraft", "l"),
    IconDescriptor("medium", "Medium aircraft", "m"),
    IconDescriptor("heavy", "Heavy aircraft", "H"),
    IconDescriptor("rotor", "Rotorcraft", "R"),
    IconDescriptor("glider", "Glider", "G"),
    IconDescriptor("lighter_than_air", "Balloon / airship", "B"),
    IconDescriptor("drone_uav", "Drone / UAV", "D"),
)


def is_special(icon: int) -> bool:
    return icon in SPECIAL_ICONS


def clamp_icon_id(value: object) -> IconId:
    """Return ``value`` as an :class:`IconId`, or ``MEDIUM`` when it is not one."""
    if isinstance(value, bool) or not isinstance(value, int):
        return DEFAULT_ICON
    if 0 <= value < ICON_COUNT:
        return IconId(value)
    return DEFAULT_ICON


def icon_for_id(icon: object) -> IconDescriptor:
    """
    Look up the descriptor for ``icon``.

    Out-of-range ids resolve to the MEDIUM entry instead of raising.
    """
    return ICONS[clamp_icon_id(icon)]


__all__ = [
    "DEFAULT_ICON",
    "ICONS",
    "ICON_COUNT",
    "SPECIAL_ICONS",
    "WEIGHT_CLASS_ICONS",
    "IconDescriptor",
    "IconId",
    "clamp_icon_id",
    "icon_for_id",
    "is_special",
]
