"""Millisecond timer and simple random integers."""

from __future__ import annotations

import random
import time
from typing import Callable

_RANDOM_INT_MAX = 429496


def _ticks() -> int:
    return int(time.monotonic() * 1000)


class Timer:
    """Counts milliseconds from start(); stopping or pausing resets the reading to zero."""

    def __init__(self, clock: Callable[[], int] | None = None) -> None:
        self._clock = clock or _ticks
        self._running = False
        self._started_at = 0
        self._stopped_at = 0

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        """Start counting from now."""
        self._running = True
        self._started_at = self._clock()

    def stop(self) -> None:
        """Stop counting."""
        self._running = False
        self._stopped_at = self._clock()
        self._started_at = self._stopped_at

    def pause(self) -> None:
        """Pause counting; behaves like stop()."""
        self.stop()

    def read(self) -> int:
        """Milliseconds elapsed since start() while running, otherwise the stopped span."""
        if self._running:
            return self._clock() - self._started_at
        return self._stopped_at - self._started_at


_rng = random.SystemRandom()


def random_int_range(first: int, last: int) -> int:
    """Uniform random integer in [first, last]; first > last raises ValueError."""
    if first > last:
        raise ValueError(f"empty range: {first} > {last}")
    return _rng.randint(first, last)


def random_int() -> int:
    """Uniform random integer in [0, 429496]."""
    return _rng.randint(0, _RANDOM_INT_MAX)