"""Character classification and case conversion on the ASCII range.

Every function accepts either a one-character string or an integer code.
Predicates return ``bool``. Conversions return a value of the same kind
they were given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {c!r}")
    return c


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: CharLike) -> bool:
    """True for the ASCII digits ``0`` to ``9``."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(c) <= 126


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII lower-case letter; anything else is returned as is."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return _same_kind(c, code - 32)
    return c


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII upper-case letter; anything else is returned as is."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _same_kind(c, code + 32)
    return c