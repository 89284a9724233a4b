# Rate limiter adapters

from .memory_rate_limiter import InMemoryRateLimiter

__all__ = [
    "InMemoryRateLimiter",
]
