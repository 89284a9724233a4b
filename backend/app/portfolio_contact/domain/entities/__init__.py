# Domain entities - core business objects

from .notification import NotificationKind, NotificationMessage
from .submission import StoredContact, Submission
from .submission_stage import SubmissionStage

__all__ = [
    "NotificationKind",
    "NotificationMessage",
    "StoredContact",
    "Submission",
    "SubmissionStage",
]
