"""Conversions between decimal text and 32-bit integers."""

from __future__ import annotations

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_SPACES = " \t\n\v\f\r"


def _wrap32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value > INT_MAX else value


def _sign(text: str) -> int:
    signs = text[: len(text) - len(text.lstrip("+-"))]
    minus = signs.count("-")
    plus = signs.count("+")
    if minus > 1 or plus > 1 or (minus == 1 and plus == 1):
        return 0
    return -1 if minus == 1 else 1


def atoi(text: str) -> int:
    """Parse a leading decimal integer the lenient C way.

    Leading whitespace is skipped. A run of sign characters is allowed but
    more than one ``-``, more than one ``+`` or one of each gives 0. Parsing
    stops at the first non-digit. The result wraps to a signed 32-bit value.
    """
    text = text.lstrip(_SPACES)
    sign = _sign(text)
    text = text.lstrip("+-")
    digits = ""
    for ch in text:
        if not ("0" <= ch <= "9"):
            break
        digits += ch
    if not digits:
        return 0
    return _wrap32(int(digits) * sign)


def itoa(n: int) -> str:
    """Render a signed 32-bit integer in decimal."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)