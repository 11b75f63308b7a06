"""Clock abstraction for root-identifier generation.

Generation reads time through a :class:`Clock` so tests can pin or step
it deterministically instead of depending on wall-clock time.
"""

from __future__ import annotations

import time
from typing import Protocol


class Clock(Protocol):
    """Source of milliseconds since the Unix epoch."""

    def now_ms(self) -> int: ...


class SystemClock:
    """Wall-clock time with millisecond resolution."""

    def now_ms(self) -> int:
        return time.time_ns() // 1_000_000


class FixedClock:
    """A clock that only moves when told to.

    Examples:
        >>> clock = FixedClock(1_700_000_000_000)
        >>> clock.now_ms()
        1700000000000
        >>> clock.advance(5)
        >>> clock.now_ms()
        1700000000005
    """

    def __init__(self, ms: int = 0) -> None:
        self._ms = ms

    def now_ms(self) -> int:
        return self._ms

    def advance(self, ms: int = 1) -> None:
        self._ms += ms

    def set(self, ms: int) -> None:
        self._ms = ms
