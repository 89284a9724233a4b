"""Rate limiter port for per-client admission control."""

from abc import ABC, abstractmethod

from app.portfolio_contact.domain.value_objects.rate_limit import (
    RateLimitDecision,
    RateLimitRule,
)


class RateLimiter(ABC):
    """Counts requests per client key against one RateLimitRule.

    Every hit is counted, including rejected ones, so clients retrying
    while throttled stay throttled until their window expires.
    """

    @property
    @abstractmethod
    def rule(self) -> RateLimitRule:
        """Return the rule this limiter enforces."""
        ...

    @abstractmethod
    async def hit(self, key: str) -> RateLimitDecision:
        """Count one request for ``key`` and decide whether to admit it."""
        ...

    @abstractmethod
    async def reset(self, key: str) -> None:
        """Forget the counter for ``key``."""
        ...
