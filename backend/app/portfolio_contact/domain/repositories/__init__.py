"""Domain repository interfaces for the portfolio contact backend.

Concrete implementations live in the infrastructure layer
(backend/app/portfolio_contact/infrastructure/repositories/).
"""

from app.portfolio_contact.domain.repositories.contact_repository import ContactRepository

__all__ = [
    "ContactRepository",
]
