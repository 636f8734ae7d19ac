import io
import threading
import time
from unittest import mock

import pytest

from philosophers.reporter import Event, Reporter, now_ms


def test_now_ms_tracks_wall_clock():
    before = int(time.time() * 1000)
    value = now_ms()
    after = int(time.time() * 1000)
    assert before <= value <= after


def test_now_ms_uses_milliseconds():
    with mock.patch("time.time", return_value=100.0):
        assert now_ms() == 100000


@pytest.mark.parametrize(
    "event, text",
    [
        (Event.TAKEN_FORK, "has taken a fork"),
        (Event.EATING, "is eating"),
        (Event.SLEEPING, "is sleeping"),
        (Event.THINKING, "is thinking"),
        (Event.DIED, "died"),
    ],
)
def test_event_messages(event, text):
    stream = io.StringIO()
    with mock.patch("time.time", return_value=100.0):
        reporter = Reporter(stream, start_time=100000)
        reporter.log(7, event)
    assert stream.getvalue() == f"0 7 {text}\n"


def test_log_line_format():
    stream = io.StringIO()
    with mock.patch("time.time", return_value=100.0):
        reporter = Reporter(stream, start_time=100000)
        reporter.log(3, Event.EATING)
        reporter.log(1, Event.DIED)
    assert stream.getvalue() == "0 3 is eating\n0 1 died\n"


def test_elapsed_is_non_negative_and_grows():
    reporter = Reporter(io.StringIO())
    first = reporter.elapsed()
    time.sleep(0.01)
    second = reporter.elapsed()
    assert 0 <= first <= second


def test_elapsed_counts_from_given_start():
    start = now_ms() - 500
    reporter = Reporter(io.StringIO(), start_time=start)
    assert reporter.elapsed() >= 500


def test_start_time_can_be_reset():
    stream = io.StringIO()
    reporter = Reporter(stream, start_time=0)
    reporter.start_time = now_ms()
    reporter.log(2, Event.SLEEPING)
    stamp, ident, *words = stream.getvalue().split()
    assert int(stamp) < 1000
    assert ident == "2"
    assert " ".join(words) == "is sleeping"


def test_concurrent_logging_keeps_lines_whole():
    stream = io.StringIO()
    reporter = Reporter(stream)
    per_thread = 50

    def worker(philo_id):
        for _ in range(per_thread):
            reporter.log(philo_id, Event.TAKEN_FORK)

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(1, 6)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    lines = stream.getvalue().splitlines()
    assert len(lines) == 5 * per_thread
    for line in lines:
        stamp, ident, message = line.split(" ", 2)
        assert stamp.isdigit()
        assert 1 <= int(ident) <= 5
        assert message == Event.TAKEN_FORK.value