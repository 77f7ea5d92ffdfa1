"""Millisecond clock, fine-grained sleeping and timing heuristics."""

from __future__ import annotations

import time
from collections.abc import Callable

from philo.args import Settings


def now_ms() -> int:
    """Return the wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


def sleep_interval(philo_count: int) -> int:
    """Return the polling step in microseconds used while sleeping."""
    if philo_count > 100:
        return 500
    if philo_count > 50:
        return 100
    return 50


def precise_sleep(
    ms: int,
    philo_count: int,
    should_stop: Callable[[], bool] | None = None,
) -> bool:
    """Sleep for ``ms`` milliseconds in short steps.

    Returns True when the full time elapsed, False when ``should_stop``
    reported True first.
    """
    start = now_ms()
    step = sleep_interval(philo_count) / 1_000_000
    while now_ms() - start < ms:
        if should_stop is not None and should_stop():
            return False
        time.sleep(step)
    return True


def is_critical_time(settings: Settings) -> bool:
    """Return True when the time margin is tight enough to poll without pause."""
    busy = settings.time_to_eat + settings.time_to_sleep
    if settings.philo_count % 2 == 0:
        return settings.time_to_die <= busy
    return settings.time_to_die // 3 <= busy