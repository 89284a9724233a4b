"""Infrastructure repository implementations.

Concrete implementations of domain repository interfaces using
SQLAlchemy async sessions.
"""

from app.portfolio_contact.infrastructure.repositories.sql_contact_repository import (
    SqlContactRepository,
)

__all__ = [
    "SqlContactRepository",
]
