"""Time spans measured in seconds and a simple stopwatch."""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum


class ETime(Enum):
    """Units of time."""

    SECONDS = 0
    MILLISECONDS = 1
    MICROSECONDS = 2
    NANOSECONDS = 3


@dataclass(frozen=True, order=True)
class Time:
    """A span of time; the base unit is seconds."""

    seconds: float = 0.0

    def sec(self) -> float:
        return float(self.seconds)

    def milli(self) -> float:
        return self.seconds * 1e3

    def micro(self) -> float:
        return self.seconds * 1e6

    def nano(self) -> float:
        return self.seconds * 1e9

    def __float__(self) -> float:
        return float(self.seconds)


class Timer:
    """Measures time elapsed since creation or the last reset."""

    def __init__(self) -> None:
        self._start = time.perf_counter()

    def reset(self) -> None:
        self._start = time.perf_counter()

    def elapsed(self) -> Time:
        return Time(time.perf_counter() - self._start)