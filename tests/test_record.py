"""
tests/test_record.py
~~~~~~~~~~~~~~~~~~~~
`MappingRecord` must turn every odd value a JSON feed can carry into
either a typed value or *absent* – never an exception.
"""

from __future__ import annotations

import pytest

from planeicon.record import AircraftRecord, MappingRecord, as_record


def test_get_str() -> None:
    rec = MappingRecord({"category": "A3", "wtc": 2, "type": None})
    assert rec.get_str("category") == "A3"
    assert rec.get_str("wtc") is None  # wrong type
    assert rec.get_str("type") is None  # explicit null
    assert rec.get_str("desc") is None  # missing


@pytest.mark.parametrize(
    "value, expected",
    [
        (3, 3),
        (0, 0),
        (-2, -2),
        (2.5, 2.5),
        (True, None),
        (False, None),
        ("3", None),
        (float("nan"), None),
        (float("inf"), None),
        (None, None),
        ([1], None),
    ],
)
def test_get_number(value, expected) -> None:
    assert MappingRecord({"wtc": value}).get_number("wtc") == expected


def test_as_record_wraps_mappings_and_passes_records_through() -> None:
    rec = MappingRecord({"wtc": 1})
    assert as_record(rec) is rec
    assert isinstance(as_record({"wtc": 1}), MappingRecord)
    assert as_record({"wtc": 1}).get_number("wtc") == 1


@pytest.mark.parametrize("junk", [None, 42, "A7", ["wtc", 3]])
def test_as_record_treats_junk_as_empty(junk) -> None:
    rec = as_record(junk)
    assert rec.get_str("category") is None
    assert rec.get_number("wtc") is None


def test_custom_accessor_satisfies_protocol() -> None:
    """Any object with get_str/get_number is a record; no dict required."""

    class _Row:
        def get_str(self, key: str) -> str | None:
            return {"category": "B1"}.get(key)

        def get_number(self, key: str) -> int | float | None:
            return None

    row = _Row()
    assert isinstance(row, AircraftRecord)
    assert as_record(row) is row
