"""The dining philosophers simulation: philosophers, forks, monitor and output."""

from __future__ import annotations

import sys
import threading
import time
from collections.abc import Callable
from typing import TextIO

from philo.args import Settings
from philo.seating import assign_forks
from philo.timing import is_critical_time, now_ms, precise_sleep

TAKEN_FORK = "has taken a fork"
EATING = "is eating"
SLEEPING = "is sleeping"
THINKING = "is thinking"
DIED = "died"
LONE_DEATH = "is dead"

_RING_SIZE = 3
_MONITOR_PAUSE = 0.0001


class Philosopher:
    """One seat at the table, with the indices of the two forks it uses."""

    def __init__(self, ident: int, left: int, right: int) -> None:
        self.id = ident
        self.left = left
        self.right = right
        self.meals = 0
        self._last_meal_time = now_ms()
        self._lock = threading.Lock()

    def record_meal(self) -> None:
        """Count a meal and restart the starvation clock."""
        with self._lock:
            self.meals += 1
            self._last_meal_time = now_ms()

    def last_meal(self) -> int:
        """Return the time in milliseconds at which the last meal began."""
        with self._lock:
            return self._last_meal_time

    def has_eaten_enough(self, required: int) -> bool:
        """Return True once at least ``required`` meals have been eaten."""
        with self._lock:
            return self.meals >= required

    def _reset_clock(self, when: int) -> None:
        with self._lock:
            self._last_meal_time = when


class Simulation:
    """A table of philosophers sharing forks, watched by a monitor."""

    def __init__(self, settings: Settings, out: TextIO | None = None) -> None:
        self.settings = settings
        self._out = out if out is not None else sys.stdout
        self.forks = [threading.Lock() for _ in range(settings.philo_count)]
        self.philosophers = [
            Philosopher(ident, left, right)
            for ident, (left, right) in enumerate(
                assign_forks(settings.philo_count)
            )
        ]
        self.start = now_ms()
        self._dead = False
        self._dead_lock = threading.Lock()
        self._print_lock = threading.Lock()
        self._turn_lock = threading.Lock()
        self._turn = 0

    def is_dead(self) -> bool:
        """Return True once the simulation has been stopped."""
        with self._dead_lock:
            return self._dead

    def stop(self) -> None:
        """Mark the simulation as over; philosophers finish their step and leave."""
        with self._dead_lock:
            self._dead = True

    def print_state(self, philosopher: Philosopher, state: str) -> None:
        """Write a timestamped state line; only a death is printed after stopping."""
        if state.startswith(DIED):
            with self._print_lock:
                self._write(philosopher, state)
            return
        if self.is_dead():
            return
        with self._print_lock:
            if not self.is_dead():
                self._write(philosopher, state)

    def _write(self, philosopher: Philosopher, state: str) -> None:
        elapsed = now_ms() - self.start
        print(f"{elapsed} {philosopher.id + 1} {state}", file=self._out, flush=True)

    def all_ate(self) -> bool:
        """Return True when a meal target is set and every philosopher reached it."""
        required = self.settings.meals_required
        if required is None:
            return False
        return all(p.has_eaten_enough(required) for p in self.philosophers)

    def monitor(self) -> Philosopher | None:
        """Watch the table until someone starves or everyone has eaten enough.

        Returns the philosopher who died, or None when the meal target ended it.
        """
        critical = is_critical_time(self.settings)
        while not self.is_dead():
            for philosopher in self.philosophers:
                if now_ms() - philosopher.last_meal() >= self.settings.time_to_die:
                    self.stop()
                    self.print_state(philosopher, DIED)
                    return philosopher
            if self.all_ate():
                self.stop()
                return None
            if not critical:
                time.sleep(_MONITOR_PAUSE)
        return None

    def run(self) -> Philosopher | None:
        """Start every philosopher, monitor them and wait for all to finish.

        Returns the philosopher who died, or None if the meal target was met.
        """
        self.start = now_ms()
        in_ring = self.settings.philo_count % 2 != 0
        threads: list[threading.Thread] = []
        try:
            for philosopher in self.philosophers:
                philosopher._reset_clock(now_ms())
                eat = (
                    self._eat_in_turn
                    if in_ring and philosopher.id < _RING_SIZE
                    else self._eat
                )
                thread = threading.Thread(
                    target=self._dine, args=(philosopher, eat), daemon=True
                )
                thread.start()
                threads.append(thread)
        except RuntimeError:
            self.stop()
            for thread in threads:
                thread.join()
            raise
        casualty = self.monitor()
        for thread in threads:
            thread.join()
        return casualty

    def _dine(
        self, philosopher: Philosopher, eat: Callable[[Philosopher], bool]
    ) -> None:
        while not self.is_dead():
            if not eat(philosopher):
                break
            if not self._sleep_think(philosopher):
                break

    def _take(self, philosopher: Philosopher, first: int, second: int) -> None:
        self.forks[first].acquire()
        self.print_state(philosopher, TAKEN_FORK)
        self.forks[second].acquire()
        self.print_state(philosopher, TAKEN_FORK)

    def _release(self, *forks: int) -> None:
        for fork in forks:
            self.forks[fork].release()

    def _dine_meal(self, philosopher: Philosopher) -> None:
        self.print_state(philosopher, EATING)
        philosopher.record_meal()
        precise_sleep(self.settings.time_to_eat, self.settings.philo_count)

    def _eat(self, philosopher: Philosopher) -> bool:
        if self.is_dead():
            return False
        if philosopher.id % 2 == 0:
            first, second = philosopher.right, philosopher.left
        else:
            first, second = philosopher.left, philosopher.right
        self._take(philosopher, first, second)
        if self.is_dead():
            self._release(first, second)
            return False
        self._dine_meal(philosopher)
        self._release(first, second)
        return True

    def _wait_for_turn(self, philosopher: Philosopher) -> bool:
        while True:
            self._turn_lock.acquire()
            if self._turn == philosopher.id:
                return True
            self._turn_lock.release()
            if self.is_dead():
                return False
            time.sleep(0)

    def _eat_in_turn(self, philosopher: Philosopher) -> bool:
        if self.is_dead():
            return False
        if not self._wait_for_turn(philosopher):
            return False
        first, second = sorted((philosopher.left, philosopher.right))
        self._take(philosopher, first, second)
        if self.is_dead():
            self._release(philosopher.left, philosopher.right)
            self._turn_lock.release()
            return False
        self._dine_meal(philosopher)
        self._release(philosopher.left, philosopher.right)
        if not self.is_dead():
            self._turn = (self._turn + 1) % _RING_SIZE
        self._turn_lock.release()
        return True

    def _sleep_think(self, philosopher: Philosopher) -> bool:
        if self.is_dead():
            return False
        self.print_state(philosopher, SLEEPING)
        precise_sleep(self.settings.time_to_sleep, self.settings.philo_count)
        if self.is_dead():
            return False
        self.print_state(philosopher, THINKING)
        return True


def run_lone_philosopher(settings: Settings, out: TextIO | None = None) -> None:
    """Play out a table with a single fork: the philosopher starves."""
    stream = out if out is not None else sys.stdout
    start = now_ms()
    print(f"{now_ms() - start} 1 {TAKEN_FORK}", file=stream, flush=True)
    precise_sleep(settings.time_to_die, settings.philo_count)
    print(f"{now_ms() - start} 1 {LONE_DEATH}", file=stream, flush=True)