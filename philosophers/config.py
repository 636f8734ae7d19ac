"""Command-line settings for the dining philosophers simulation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

INT_MAX = 2**31 - 1

_FIELDS = ("number_of_philosophers", "time_to_die", "time_to_eat", "time_to_sleep")


class ArgumentError(ValueError):
    """Raised when the command-line arguments are missing or invalid."""


@dataclass(frozen=True)
class Settings:
    """Parameters of one simulation run; times are in milliseconds.

    ``must_eat`` is -1 when no meal count was given.
    """

    n_philo: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    must_eat: int = -1


def parse_number(text: str) -> int:
    """Value of the leading run of decimal digits in ``text``; 0 if there is none."""
    result = 0
    for ch in text:
        if not "0" <= ch <= "9":
            break
        result = result * 10 + (ord(ch) - ord("0"))
    return result


def check_digit_args(args: Sequence[str]) -> None:
    """Raise :class:`ArgumentError` unless every argument holds only digits."""
    for arg in args:
        if any(not "0" <= ch <= "9" for ch in arg):
            raise ArgumentError(f"not an unsigned number: {arg!r}")


def _positive(name: str, text: str) -> int:
    value = parse_number(text)
    if value <= 0 or value > INT_MAX:
        raise ArgumentError(f"{name} must be between 1 and {INT_MAX}, got {text!r}")
    return value


def parse_args(args: Sequence[str]) -> Settings:
    """Build :class:`Settings` from four or five numeric arguments.

    The arguments are, in order: number of philosophers, time to die, time
    to eat, time to sleep and, optionally, how many times each must eat.
    """
    if not 4 <= len(args) <= 5:
        raise ArgumentError(f"expected 4 or 5 arguments, got {len(args)}")
    check_digit_args(args)
    values = [_positive(name, text) for name, text in zip(_FIELDS, args)]
    must_eat = _positive("must_eat", args[4]) if len(args) == 5 else -1
    return Settings(*values, must_eat=must_eat)