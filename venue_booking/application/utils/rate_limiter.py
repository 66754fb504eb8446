from __future__ import annotations

import math
import time
from typing import Callable

from venue_booking.application.ports.rate_limiter import RateLimiterPort


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class RateLimiter(RateLimiterPort):
    """
    Sliding-window attempt counter kept in process memory.

    Advisory throttling only: state resets on restart and is not shared
    between instances, so it is no substitute for server-side limits.
    """

    def __init__(
        self,
        max_requests: int,
        window_ms: int,
        clock: Callable[[], float] = _monotonic_ms,
    ) -> None:
        if max_requests < 1:
            raise ValueError("max_requests must be at least 1")
        if window_ms <= 0:
            raise ValueError("window_ms must be positive")
        self._max_requests = max_requests
        self._window_ms = window_ms
        self._clock = clock
        self._attempts: dict[str, list[float]] = {}

    @property
    def max_requests(self) -> int:
        return self._max_requests

    @property
    def window_ms(self) -> int:
        return self._window_ms

    def is_allowed(self, key: str) -> bool:
        now = self._clock()
        attempts = self._prune(key, now)
        if len(attempts) >= self._max_requests:
            return False
        attempts.append(now)
        self._attempts[key] = attempts
        return True

    def get_remaining_time(self, key: str) -> int:
        now = self._clock()
        attempts = self._prune(key, now)
        if len(attempts) < self._max_requests:
            return 0
        oldest = attempts[0]
        return max(0, math.ceil(oldest + self._window_ms - now))

    def reset(self, key: str) -> None:
        self._attempts.pop(key, None)

    def _prune(self, key: str, now: float) -> list[float]:
        attempts = [ts for ts in self._attempts.get(key, []) if now - ts < self._window_ms]
        if attempts:
            self._attempts[key] = attempts
        else:
            self._attempts.pop(key, None)
        return attempts
