import time

import pytest

from philo.args import Settings
from philo.timing import is_critical_time, now_ms, precise_sleep, sleep_interval


def test_now_ms_tracks_wall_clock():
    before = int(time.time() * 1000)
    value = now_ms()
    after = int(time.time() * 1000)
    assert before - 1 <= value <= after + 1


def test_now_ms_non_decreasing():
    first = now_ms()
    second = now_ms()
    assert second >= first


@pytest.mark.parametrize(
    "count, expected",
    [(1, 50), (50, 50), (51, 100), (100, 100), (101, 500), (200, 500)],
)
def test_sleep_interval(count, expected):
    assert sleep_interval(count) == expected


def test_precise_sleep_waits_full_time():
    start = now_ms()
    assert precise_sleep(30, 5) is True
    assert now_ms() - start >= 30


def test_precise_sleep_zero_returns_immediately():
    start = now_ms()
    assert precise_sleep(0, 5) is True
    assert now_ms() - start < 20


def test_precise_sleep_stops_early():
    start = now_ms()
    assert precise_sleep(5000, 5, lambda: True) is False
    assert now_ms() - start < 1000


def test_precise_sleep_checks_stop_repeatedly():
    calls = []

    def stop():
        calls.append(1)
        return len(calls) >= 3

    assert precise_sleep(5000, 5, stop) is False
    assert len(calls) == 3


@pytest.mark.parametrize(
    "settings, expected",
    [
        (Settings(4, 400, 200, 200), True),
        (Settings(4, 410, 200, 200), False),
        (Settings(5, 1200, 200, 200), True),
        (Settings(5, 1203, 200, 200), False),
        (Settings(5, 800, 200, 200), True),
    ],
)
def test_is_critical_time(settings, expected):
    assert is_critical_time(settings) is expected