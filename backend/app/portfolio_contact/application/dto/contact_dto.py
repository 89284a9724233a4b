"""Data Transfer Objects for contact-related API requests and responses.

These DTOs represent the external JSON contract. Field presence and email
shape are deliberately not enforced here: SubmissionValidator owns those
rules so that violations map to the contact form's own 400 messages.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.portfolio_contact.domain.entities.submission import StoredContact


class ContactRequest(BaseModel):
    """Raw contact-form payload as posted by the portfolio site."""

    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = Field(default=None, description="Sender's name")
    email: Optional[str] = Field(default=None, description="Sender's email address")
    message: Optional[str] = Field(default=None, description="Message body")

    @classmethod
    def from_body(cls, body: bytes) -> "ContactRequest":
        """Parse a raw JSON request body; an empty body is an empty form.

        Raises:
            pydantic.ValidationError: If the body is not a JSON object whose
                known fields are strings or null.
        """
        if not body.strip():
            return cls()
        return cls.model_validate_json(body)


class ContactAcceptedDTO(BaseModel):
    """Response for a successfully processed submission."""

    message: str = Field(default="Message sent successfully")
    timestamp: datetime = Field(description="When processing completed (UTC)")


class StoredContactDTO(BaseModel):
    """A stored contact message as returned by the admin listing."""

    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = Field(default=None, description="Record identifier")
    name: str
    email: str
    message: str
    timestamp: datetime = Field(description="When the record was stored (UTC)")
    ip: Optional[str] = Field(default=None, description="Submitting client address")

    @classmethod
    def from_entity(cls, contact: StoredContact) -> "StoredContactDTO":
        return cls(
            id=contact.id,
            name=contact.name,
            email=contact.email,
            message=contact.message,
            timestamp=contact.timestamp,
            ip=contact.source_address,
        )


class StatsDTO(BaseModel):
    """Portfolio statistics, serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_visits: int = Field(default=0, description="Site visits (not tracked)")
    total_messages: int = Field(default=0, description="Stored contact messages")
    last_updated: datetime = Field(description="When the stats were computed (UTC)")
