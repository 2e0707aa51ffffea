"""Reading a signed 32-bit integer out of a line of user input."""

from __future__ import annotations

import re

from core.exceptions import InvalidInputError

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
# Digits in the widest int32 magnitude; longer runs are out of range without converting
INT32_DIGITS = len(str(INT32_MAX))
# Characters the C locale treats as whitespace
ASCII_WHITESPACE = " \t\n\v\f\r"

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]+)")
_WHOLE_INT = re.compile(r"([+-]?)([0-9]+)")


def _clamp(value: int) -> int:
    return max(INT32_MIN, min(INT32_MAX, value))


def _to_int(sign: str, digits: str) -> int:
    # int() refuses very long digit strings, so decide on length first
    digits = digits.lstrip("0") or "0"
    if len(digits) > INT32_DIGITS:
        return INT32_MIN - 1 if sign == "-" else INT32_MAX + 1
    return int(sign + digits)


def extract_int(text: str | None) -> int:
    """Read an int the way formatted stream extraction does.

    Leading whitespace and an optional sign are accepted, digits are read up
    to the first non-digit, and anything after that is left unread. When no
    digits are found the result is 0; out-of-range values clamp to the int32
    bounds. Only ASCII whitespace and digits count.

    >>> extract_int("  42abc")
    42
    >>> extract_int("abc")
    0
    """
    if not text:
        return 0
    match = _LEADING_INT.match(text)
    if not match:
        return 0
    return _clamp(_to_int(match.group(1), match.group(2)))


def parse_strict(text: str | None) -> int:
    """Parse the whole (stripped) text as an int32 or raise ``InvalidInputError``."""
    stripped = (text or "").strip(ASCII_WHITESPACE)
    shown = stripped if len(stripped) <= 40 else stripped[:40] + "..."
    match = _WHOLE_INT.fullmatch(stripped)
    if not match:
        raise InvalidInputError(f"not an integer: {shown!r}")
    value = _to_int(match.group(1), match.group(2))
    if value != _clamp(value):
        raise InvalidInputError(f"integer out of range [{INT32_MIN}, {INT32_MAX}]: {shown}")
    return value
