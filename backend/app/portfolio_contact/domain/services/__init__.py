# Domain services - stateless business logic

from .notification_composer import NotificationComposer
from .submission_validator import SubmissionRejected, SubmissionValidator, ValidationRule

__all__ = [
    "NotificationComposer",
    "SubmissionRejected",
    "SubmissionValidator",
    "ValidationRule",
]
