"""
record.py
~~~~~~~~~
Narrow read-only view of one aircraft entry.

The classifier only ever asks two questions of a record: *give me this
field as text* and *give me this field as a number*. Anything that answers
them satisfies :class:`AircraftRecord`; :class:`MappingRecord` answers them
for the plain dicts ``json.loads`` hands back.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class AircraftRecord(Protocol):
    def get_str(self, key: str) -> str | None: ...

    def get_number(self, key: str) -> int | float | None: ...


class MappingRecord:
    """
    :class:`AircraftRecord` over a parsed mapping.

    Missing keys, ``None`` and values of the wrong type all read as absent.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        self._data: Mapping[str, Any] = data if data is not None else {}

    def get_str(self, key: str) -> str | None:
        value = self._data.get(key)
        return value if isinstance(value, str) else None

    def get_number(self, key: str) -> int | float | None:
        value = self._data.get(key)
        # bool is an int subclass; JSON true/false is not a number here
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        if isinstance(value, float) and math.isfinite(value):
            return value
        return None

    def __repr__(self) -> str:
        return f"MappingRecord({dict(self._data)!r})"


def as_record(obj: object) -> AircraftRecord:
    """Coerce ``obj`` to an :class:`AircraftRecord` (unknown shapes → empty)."""
    if isinstance(obj, AircraftRecord):
        return obj
    if isinstance(obj, Mapping):
        return MappingRecord(obj)
    return MappingRecord()


__all__ = ["AircraftRecord", "MappingRecord", "as_record"]
