"""Command-line entry point of the dining philosophers simulation."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .config import ArgumentError, parse_args
from .simulation import run_simulation


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the simulation from command-line arguments; returns the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not 4 <= len(args) <= 5:
        sys.stdout.write("Error : Args")
        sys.stdout.flush()
        return 1
    try:
        settings = parse_args(args)
        run_simulation(settings, sys.stdout)
    except (ArgumentError, RuntimeError):
        sys.stdout.write("Error : 404")
        sys.stdout.flush()
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())