# Value objects - immutable, validated domain primitives

from .email_address import EmailAddress, is_valid_email
from .rate_limit import RateLimitDecision, RateLimitRule

__all__ = [
    "EmailAddress",
    "is_valid_email",
    "RateLimitDecision",
    "RateLimitRule",
]
