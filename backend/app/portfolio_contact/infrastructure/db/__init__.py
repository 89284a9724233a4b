"""Database infrastructure components.

This module exports SQLAlchemy models, engine/session construction
utilities, and the Base class for ORM model definitions.
"""

from app.portfolio_contact.infrastructure.db.models import Base, ContactMessageModel
from app.portfolio_contact.infrastructure.db.session import (
    create_engine_for_url,
    create_schema,
    create_session_factory,
    to_async_database_url,
)

__all__ = [
    # Base class
    "Base",
    # Models
    "ContactMessageModel",
    # Engine/session utilities
    "create_engine_for_url",
    "create_session_factory",
    "create_schema",
    "to_async_database_url",
]
