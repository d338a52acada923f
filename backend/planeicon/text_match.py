"""ASCII case-insensitive substring search for free-text feed fields."""

from __future__ import annotations

import string
from typing import Final

# ASCII only: "é" and "É" stay distinct, and nothing changes length.
_ASCII_UPPER: Final = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def contains_ignore_case(haystack: object, needle: object) -> bool:
    """
    True when ``needle`` occurs anywhere in ``haystack``, ignoring ASCII case.

    An empty needle, or anything that is not a string, never matches.
    """
    if not isinstance(haystack, str) or not isinstance(needle, str) or not needle:
        return False
    return needle.translate(_ASCII_UPPER) in haystack.translate(_ASCII_UPPER)


__all__ = ["contains_ignore_case"]
