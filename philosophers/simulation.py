"""Threads, forks and the monitor of the dining philosophers simulation."""

from __future__ import annotations

import threading
import time
from contextlib import contextmanager
from typing import Iterator, List, Optional, TextIO

from .config import Settings
from .reporter import Event, Reporter, now_ms

_MONITOR_POLL = 0.0005
_START_POLL = 0.00005
_SLEEP_POLL_SHORT = 0.0001
_SLEEP_POLL_LONG = 0.0005


class Philosopher:
    """One diner: thinks, takes two forks, eats and sleeps until told to stop."""

    def __init__(
        self,
        philo_id: int,
        left_fork: threading.Lock,
        right_fork: threading.Lock,
        table: "Table",
    ) -> None:
        self.id = philo_id
        self.left_fork = left_fork
        self.right_fork = right_fork
        self.table = table
        must_eat = table.settings.must_eat
        self.meals_target = must_eat if must_eat else -1
        self.time_last_meal = -1
        self._meal_lock = threading.Lock()
        self._starved = False
        self._starve_lock = threading.Lock()

    def run(self) -> None:
        """Main routine of the philosopher's thread."""
        if self.table.settings.n_philo == 1:
            self.run_alone()
            return
        self.wait_start()
        with self._meal_lock:
            self.time_last_meal = now_ms()
        while True:
            self.announce(Event.THINKING)
            if self.should_stop():
                break
            self.eat()
            if self.should_stop():
                break
            self.sleep()
            if self.should_stop():
                break
        self.table.mark_completed()

    def run_alone(self) -> None:
        """A lone philosopher takes its only fork and waits to starve."""
        with self._meal_lock:
            self.time_last_meal = now_ms()
        with self.left_fork:
            self.announce(Event.TAKEN_FORK)
            time.sleep(self.table.settings.time_to_die / 1000)

    def wait_start(self) -> None:
        """Stagger the start in three groups, half an eating time apart."""
        delay = (self.id % 3) * (self.table.settings.time_to_eat // 2)
        while now_ms() - self.table.start_time < delay:
            time.sleep(_START_POLL)

    def eat(self) -> None:
        """Take both forks, eat for ``time_to_eat`` and count the meal."""
        with self.forks():
            self.announce(Event.EATING)
            with self._meal_lock:
                self.time_last_meal = now_ms()
            time.sleep(self.table.settings.time_to_eat / 1000)
        self.meals_target -= 1

    def sleep(self) -> None:
        """Sleep for ``time_to_sleep``, waking early if someone starved."""
        self.announce(Event.SLEEPING)
        duration = self.table.settings.time_to_sleep
        start = now_ms()
        while True:
            with self._starve_lock:
                if self._starved:
                    break
            passed = now_ms() - start
            if passed >= duration:
                break
            time.sleep(_SLEEP_POLL_SHORT if duration - passed < 10 else _SLEEP_POLL_LONG)

    def should_stop(self) -> bool:
        """True once the meals are done or the table has a starved diner."""
        if self.meals_target == 0:
            return True
        with self._starve_lock:
            return self._starved

    @contextmanager
    def forks(self) -> Iterator[None]:
        """Hold both forks, taken in an order that avoids a deadlock."""
        if self.id % 2 == 0 and self.table.settings.n_philo % 2 == 0:
            first, second = self.right_fork, self.left_fork
        else:
            first, second = self.left_fork, self.right_fork
        with first:
            with second:
                self.announce(Event.TAKEN_FORK)
                self.announce(Event.TAKEN_FORK)
                yield

    def announce(self, event: Event) -> None:
        """Report ``event`` unless the simulation has ended; deaths always print."""
        with self._starve_lock:
            if event is Event.DIED or not self._starved:
                self.table.reporter.log(self.id, event)

    def is_active(self) -> bool:
        """True once the philosopher has started its routine."""
        with self._meal_lock:
            return self.time_last_meal > 0

    def since_last_meal(self) -> int:
        """Milliseconds since the last meal started."""
        with self._meal_lock:
            return now_ms() - self.time_last_meal

    def mark_starved(self) -> None:
        """Tell the philosopher that the simulation is over."""
        with self._starve_lock:
            self._starved = True


class Table:
    """The shared state: forks, philosophers, their threads and the reporter."""

    def __init__(self, settings: Settings, stream: Optional[TextIO] = None) -> None:
        self.settings = settings
        self.reporter = Reporter(stream)
        count = settings.n_philo
        self.forks: List[threading.Lock] = [threading.Lock() for _ in range(count)]
        self.philosophers: List[Philosopher] = [
            Philosopher(i + 1, self.forks[i], self.forks[(i + 1) % count], self)
            for i in range(count)
        ]
        self.threads: List[threading.Thread] = []
        self._completed = False
        self._completed_lock = threading.Lock()

    @property
    def start_time(self) -> int:
        """Wall-clock millisecond at which the simulation started."""
        return self.reporter.start_time

    def start(self) -> None:
        """Record the start time and launch one thread per philosopher."""
        self.reporter.start_time = now_ms()
        self.threads = [
            threading.Thread(target=philo.run, name=f"philosopher-{philo.id}", daemon=True)
            for philo in self.philosophers
        ]
        for thread in self.threads:
            thread.start()

    def monitor(self) -> Optional[int]:
        """Watch for starvation until a routine completes.

        Returns the index of the philosopher that starved, or None.
        """
        while not self.should_stop():
            for index, philo in enumerate(self.philosophers):
                if philo.is_active() and philo.since_last_meal() > self.settings.time_to_die:
                    self.starvation_protocol(index)
                    return index
            time.sleep(_MONITOR_POLL)
        return None

    def should_stop(self) -> bool:
        """True once some philosopher has finished its routine."""
        with self._completed_lock:
            return self._completed

    def mark_completed(self) -> None:
        """Record that a philosopher has finished its routine."""
        with self._completed_lock:
            self._completed = True

    def starvation_protocol(self, index: int) -> None:
        """Report the death of philosopher ``index`` and stop everyone."""
        self.reporter.log(self.philosophers[index].id, Event.DIED)
        for philo in self.philosophers:
            philo.mark_starved()

    def shutdown(self) -> None:
        """Wait for every philosopher thread to finish."""
        for thread in self.threads:
            thread.join()
        self.threads = []

    def run(self) -> Optional[int]:
        """Run the whole simulation; returns the starved index or None."""
        self.start()
        try:
            return self.monitor()
        finally:
            self.shutdown()


def run_simulation(settings: Settings, stream: Optional[TextIO] = None) -> Optional[int]:
    """Run one simulation with ``settings``, writing its log to ``stream``."""
    return Table(settings, stream).run()