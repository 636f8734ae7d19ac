"""String helpers with the semantics of the classic C string routines.

Positions are returned as indices rather than pointers: a search that would
yield a pointer into the string yields the index of the match, and ``None``
where nothing is found. Sized copies return the resulting text together with
the length the copy tried to create, so that truncation can be detected.
"""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Tuple, Union

CharLike = Union[str, int]


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {c!r}")
    return chr(c)


def _check_size(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strlen(s: str) -> int:
    """Number of characters in ``s``."""
    return len(s)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``, or None.

    Searching for the NUL character finds the terminator at ``len(s)``.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``, or None.

    Searching for the NUL character finds the terminator at ``len(s)``.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the codes of the first differing characters,
    the end of a string counting as code 0, or 0 when they agree.
    """
    _check_size("n", n)
    for a, b in zip(s1[:n] + "\0", s2[:n] + "\0"):
        if a != b:
            return ord(a) - ord(b)
        if a == "\0":
            break
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0.
    """
    _check_size("length", length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text (at most ``size - 1`` characters) and ``len(src)``;
    a length at or above ``size`` means the copy was truncated.
    """
    _check_size("size", size)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length it tried to create, which is
    ``min(len(dst), size) + len(src)``. When ``dst`` already fills the
    buffer it is returned unchanged.
    """
    _check_size("size", size)
    used = min(len(dst), size)
    total = used + len(src)
    if used >= size:
        return dst, total
    room = size - 1 - used
    return dst + src[:room], total


def strdup(s: str) -> str:
    """A copy of ``s``."""
    return "".join(s)


def strcat(dest: str, src: str) -> str:
    """``dest`` followed by ``src``."""
    return dest + src


def substr(s: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``s`` from ``start``.

    A start beyond the end gives an empty string.
    """
    _check_size("start", start)
    _check_size("length", length)
    if start > len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """A new string holding ``s1`` then ``s2``."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """``s`` without leading and trailing characters found in ``charset``."""
    return s.strip(charset)


def split(s: str, sep: CharLike) -> List[str]:
    """Words of ``s`` delimited by the character ``sep``; empty words are dropped."""
    ch = _char(sep)
    return [word for word in s.split(ch) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """A new string made of ``func(index, char)`` for each character of ``s``."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(chars: MutableSequence[str], func: Callable[[int, str], str]) -> None:
    """Replace each character in place with ``func(index, char)``."""
    for index, ch in enumerate(list(chars)):
        chars[index] = func(index, ch)