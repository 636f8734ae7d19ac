"""Writing characters, strings and integers to text streams."""

from __future__ import annotations

from typing import TextIO, Union

from .numbers import itoa

CharLike = Union[str, int]


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {c!r}")
    return chr(c)


def putchar_fd(c: CharLike, stream: TextIO) -> None:
    """Write one character to ``stream``."""
    stream.write(_char(c))


def putstr_fd(s: str, stream: TextIO) -> None:
    """Write ``s`` to ``stream``."""
    stream.write(s)


def putendl_fd(s: str, stream: TextIO) -> None:
    """Write ``s`` followed by a newline to ``stream``."""
    putstr_fd(s, stream)
    putchar_fd("\n", stream)


def putnbr_fd(n: int, stream: TextIO) -> None:
    """Write the 32-bit signed integer ``n`` in decimal to ``stream``."""
    putstr_fd(itoa(n), stream)