"""Timestamped, serialised status messages of the philosophers."""

from __future__ import annotations

import sys
import threading
import time
from enum import Enum
from typing import Optional, TextIO


def now_ms() -> int:
    """Current wall-clock time in whole milliseconds."""
    return int(time.time() * 1000)


class Event(Enum):
    """What a philosopher reports, with the text printed for it."""

    TAKEN_FORK = "has taken a fork"
    EATING = "is eating"
    SLEEPING = "is sleeping"
    THINKING = "is thinking"
    DIED = "died"


class Reporter:
    """Writes one line per event, never interleaving lines from threads."""

    def __init__(self, stream: Optional[TextIO] = None, start_time: Optional[int] = None) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.start_time = now_ms() if start_time is None else start_time
        self._lock = threading.Lock()

    def elapsed(self) -> int:
        """Milliseconds since ``start_time``."""
        return now_ms() - self.start_time

    def log(self, philo_id: int, event: Event) -> None:
        """Write ``"<elapsed> <id> <message>"`` as one line."""
        with self._lock:
            self.stream.write(f"{self.elapsed()} {philo_id} {event.value}\n")
            flush = getattr(self.stream, "flush", None)
            if flush is not None:
                flush()