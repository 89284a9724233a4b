"""Submission and StoredContact entities for contact-form messages."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from app.portfolio_contact.domain.value_objects.email_address import EmailAddress


@dataclass(frozen=True)
class Submission:
    """A contact-form message that passed validation.

    Only constructed by SubmissionValidator, so every instance is safe to
    persist and to notify about.

    Attributes:
        name: Sender's name as submitted.
        email: Sender's validated email address.
        message: Free-text message body.
        source_address: Client network address captured from the request.
    """

    name: str
    email: EmailAddress
    message: str
    source_address: str


@dataclass(frozen=True)
class StoredContact:
    """A persisted record of a Submission.

    Records are append-only: created once by the contact store and never
    mutated or deleted by the application.

    Attributes:
        id: Database identifier (None until the store assigns one).
        name: Sender's name, copied verbatim.
        email: Sender's email, copied verbatim.
        message: Message body, copied verbatim.
        source_address: Client network address.
        timestamp: When the record was stored (UTC).
    """

    id: Optional[int]
    name: str
    email: str
    message: str
    source_address: Optional[str]
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def from_submission(cls, submission: Submission) -> "StoredContact":
        """Build an unsaved record stamped with the current time."""
        return cls(
            id=None,
            name=submission.name,
            email=submission.email.value,
            message=submission.message,
            source_address=submission.source_address,
        )
