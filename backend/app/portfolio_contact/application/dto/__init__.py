"""Data Transfer Objects for the application layer."""

from app.portfolio_contact.application.dto.contact_dto import (
    ContactAcceptedDTO,
    ContactRequest,
    StatsDTO,
    StoredContactDTO,
)

__all__ = [
    "ContactRequest",
    "ContactAcceptedDTO",
    "StoredContactDTO",
    "StatsDTO",
]
