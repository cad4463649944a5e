"""Phone address normalization.

The rule mirrors the handset's default-region behaviour: keep only digits
and ``+``, then attach the default calling code when the number is a bare
local subscriber number.

Examples
--------
>>> normalize_address("98765 43210")
'+919876543210'
>>> normalize_address("91-98765-43210")
'+919876543210'
>>> normalize_address("+1 (555) 010-9999")
'+15550109999'
"""

from __future__ import annotations

import re

DEFAULT_CALLING_CODE = "91"
LOCAL_NUMBER_LENGTH = 10

_STRIP_PATTERN = re.compile(r"[^0-9+]")
_NON_DIGIT_PATTERN = re.compile(r"[^0-9]")


def strip_address(destination: str) -> str:
    """Remove every character that is not an ASCII digit or ``+``."""
    return _STRIP_PATTERN.sub("", destination)


def normalize_address(
    destination: str, default_calling_code: str = DEFAULT_CALLING_CODE
) -> str:
    """Return the dialable form of *destination*.

    Numbers already starting with ``+`` are only stripped.  A number that
    starts with the calling code gets a ``+``; a bare ten digit number gets
    ``+<calling code>``.  Any other shape is returned stripped but otherwise
    unchanged.
    """
    cleaned = strip_address(destination)
    if cleaned.startswith("+"):
        return cleaned
    if default_calling_code and cleaned.startswith(default_calling_code):
        return "+" + cleaned
    if len(cleaned) == LOCAL_NUMBER_LENGTH:
        return f"+{default_calling_code}{cleaned}"
    return cleaned


def is_valid_phone_number(destination: str) -> bool:
    """Return ``True`` if *destination* holds between 10 and 15 digits."""
    digits = _NON_DIGIT_PATTERN.sub("", destination)
    return 10 <= len(digits) <= 15
