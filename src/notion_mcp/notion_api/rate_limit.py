"""Client-side request pacing.

:class:`MinIntervalLimiter` enforces a minimum delay between the starts of
consecutive requests.  Notion allows an average of three requests per
second per integration; pacing requests ~334 ms apart keeps a single
client under that limit without relying on ``429`` retries.
"""

from __future__ import annotations

import asyncio
import time
from collections.abc import Callable


class MinIntervalLimiter:
    """Async-safe limiter spacing acquisitions at least *interval* apart.

    Parameters
    ----------
    interval:
        Minimum number of seconds between two successful acquisitions.
        ``0`` disables pacing.
    clock:
        Monotonic clock, injectable for tests.
    """

    __slots__ = ("_clock", "_last", "_lock", "interval")

    def __init__(
        self,
        interval: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if interval < 0:
            raise ValueError(f"interval must be >= 0, got {interval}")

        self.interval: float = interval
        self._clock = clock
        self._last: float | None = None
        self._lock = asyncio.Lock()

    async def acquire(self) -> float:
        """Wait until the next request may start.

        Returns the number of seconds the caller had to wait (``0.0`` if
        the interval had already elapsed).
        """
        async with self._lock:
            wait = 0.0
            if self._last is not None:
                elapsed = self._clock() - self._last
                if elapsed < self.interval:
                    wait = self.interval - elapsed
                    # Hold the lock while sleeping so waiters queue in order.
                    await asyncio.sleep(wait)
            self._last = self._clock()
            return wait
