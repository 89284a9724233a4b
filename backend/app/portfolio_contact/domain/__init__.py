# Domain layer - pure business rules, no framework dependencies

from app.portfolio_contact.domain.entities import (
    NotificationKind,
    NotificationMessage,
    StoredContact,
    Submission,
    SubmissionStage,
)
from app.portfolio_contact.domain.services import (
    NotificationComposer,
    SubmissionRejected,
    SubmissionValidator,
    ValidationRule,
)
from app.portfolio_contact.domain.value_objects import (
    EmailAddress,
    RateLimitDecision,
    RateLimitRule,
)

__all__ = [
    # Entities
    "Submission",
    "StoredContact",
    "SubmissionStage",
    "NotificationKind",
    "NotificationMessage",
    # Services
    "SubmissionValidator",
    "SubmissionRejected",
    "ValidationRule",
    "NotificationComposer",
    # Value objects
    "EmailAddress",
    "RateLimitRule",
    "RateLimitDecision",
]
