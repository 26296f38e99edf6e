"""
Infrastructure adapter: scheduled-interval rate limiter → IRateLimiter.

Each acquire() reserves the next free slot under a lock and then sleeps outside
the lock until that slot arrives, so concurrent callers are spaced at least
*min_interval* seconds apart regardless of how many worker threads exist.
"""

import threading
import time
from typing import Callable, Optional

from src.domain.ports.rate_limiter_port import IRateLimiter

# Alpha Vantage free tier: 5 requests per minute.
DEFAULT_MIN_INTERVAL = 12.0


class IntervalRateLimiter(IRateLimiter):
    def __init__(
        self,
        min_interval: float = DEFAULT_MIN_INTERVAL,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if min_interval < 0:
            raise ValueError("min_interval must be >= 0")
        self._min_interval = min_interval
        self._clock = clock
        self._sleep = sleep
        self._lock = threading.Lock()
        self._next_slot: Optional[float] = None

    def acquire(self) -> None:
        if self._min_interval == 0:
            return
        with self._lock:
            now = self._clock()
            slot = now if self._next_slot is None else max(now, self._next_slot)
            self._next_slot = slot + self._min_interval
        delay = slot - now
        if delay > 0:
            self._sleep(delay)
