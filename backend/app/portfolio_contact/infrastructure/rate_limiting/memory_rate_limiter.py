"""In-memory fixed-window rate limiter.

Each client key gets its own counter and its own lock, so concurrent
requests from different clients never contend. Counters live in process
memory; a multi-process deployment needs a shared backend behind the
same RateLimiter interface.
"""

import asyncio
import time
from dataclasses import dataclass
from typing import Callable

from app.portfolio_contact.application.interfaces.rate_limiter import RateLimiter
from app.portfolio_contact.domain.value_objects.rate_limit import (
    RateLimitDecision,
    RateLimitRule,
)


@dataclass
class _Window:
    count: int
    reset_at: float


class InMemoryRateLimiter(RateLimiter):
    """Fixed-window counter per key.

    A key's window starts with its first request and lasts
    ``rule.window_seconds``. Every hit increments the count, rejected ones
    included; a hit is rejected once the count exceeds ``rule.max_requests``.
    """

    def __init__(
        self,
        rule: RateLimitRule,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the limiter.

        Args:
            rule: Window length, maximum and rejection message.
            clock: Monotonic time source in seconds.
        """
        self._rule = rule
        self._clock = clock
        self._windows: dict[str, _Window] = {}
        self._locks: dict[str, asyncio.Lock] = {}
        self._next_prune_at = clock() + rule.window_seconds

    @property
    def rule(self) -> RateLimitRule:
        return self._rule

    async def hit(self, key: str) -> RateLimitDecision:
        lock = self._locks.setdefault(key, asyncio.Lock())
        async with lock:
            now = self._clock()
            window = self._windows.get(key)
            if window is None or now >= window.reset_at:
                window = _Window(count=0, reset_at=now + self._rule.window_seconds)
                self._windows[key] = window

            window.count += 1
            decision = RateLimitDecision(
                allowed=window.count <= self._rule.max_requests,
                limit=self._rule.max_requests,
                remaining=max(0, self._rule.max_requests - window.count),
                reset_after_seconds=window.reset_at - now,
                message=self._rule.message,
            )

        self._prune(now)
        return decision

    async def reset(self, key: str) -> None:
        self._windows.pop(key, None)

    def _prune(self, now: float) -> None:
        """Drop expired windows at most once per window length."""
        if now < self._next_prune_at:
            return
        self._next_prune_at = now + self._rule.window_seconds

        expired = [k for k, w in self._windows.items() if now >= w.reset_at]
        for key in expired:
            lock = self._locks.get(key)
            if lock is not None and lock.locked():
                continue
            del self._windows[key]
            self._locks.pop(key, None)
