"""Value objects describing rate-limit windows and admission decisions."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class RateLimitRule:
    """Configuration of one fixed time window per client key.

    Attributes:
        name: Short label used in logs (e.g., "global", "contact").
        window_seconds: Length of the window.
        max_requests: Requests admitted per key within one window.
        message: Client-facing text returned when a request is rejected.
    """

    name: str
    window_seconds: float
    max_requests: int
    message: str

    def __post_init__(self) -> None:
        if self.window_seconds <= 0:
            raise ValueError("window_seconds must be positive")
        if self.max_requests < 1:
            raise ValueError("max_requests must be at least 1")


@dataclass(frozen=True)
class RateLimitDecision:
    """Outcome of counting one request against a RateLimitRule.

    Attributes:
        allowed: Whether the request is admitted.
        limit: The rule's maximum requests per window.
        remaining: Requests still admitted in the current window.
        reset_after_seconds: Time until the key's current window expires.
        message: The rule's rejection message.
    """

    allowed: bool
    limit: int
    remaining: int
    reset_after_seconds: float
    message: str

    @property
    def retry_after_seconds(self) -> int:
        """Whole seconds a rejected client should wait (at least 1)."""
        return max(1, math.ceil(self.reset_after_seconds))
