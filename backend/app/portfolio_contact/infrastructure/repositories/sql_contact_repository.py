"""SQLAlchemy implementation of ContactRepository.

Provides async database operations for StoredContact entities using
SQLAlchemy 2.0 async patterns.
"""

from datetime import timezone
from typing import List

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.portfolio_contact.domain.entities.submission import StoredContact
from app.portfolio_contact.domain.repositories.contact_repository import ContactRepository
from app.portfolio_contact.infrastructure.db.models import ContactMessageModel


class SqlContactRepository(ContactRepository):
    """SQLAlchemy-based implementation of the ContactRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with a database session.

        Args:
            session: An async SQLAlchemy session.
        """
        self._session = session

    async def add(self, contact: StoredContact) -> StoredContact:
        """Append a new contact record and return it with its ID."""
        model = self._to_model(contact)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def count(self) -> int:
        """Return the total number of stored records."""
        stmt = select(func.count()).select_from(ContactMessageModel)
        result = await self._session.execute(stmt)
        return int(result.scalar_one())

    async def list_recent(self, limit: int) -> List[StoredContact]:
        """Retrieve up to ``limit`` records, newest first."""
        stmt = (
            select(ContactMessageModel)
            .order_by(ContactMessageModel.timestamp.desc(), ContactMessageModel.id.desc())
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        models = result.scalars().all()
        return [self._to_entity(m) for m in models]

    def _to_entity(self, model: ContactMessageModel) -> StoredContact:
        """Convert a ContactMessageModel to a StoredContact domain entity."""
        timestamp = model.timestamp
        # SQLite drops tzinfo; stored values are always UTC
        if timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=timezone.utc)

        return StoredContact(
            id=model.id,
            name=model.name,
            email=model.email,
            message=model.message,
            source_address=model.ip,
            timestamp=timestamp,
        )

    def _to_model(self, entity: StoredContact) -> ContactMessageModel:
        """Convert a StoredContact domain entity to a ContactMessageModel."""
        return ContactMessageModel(
            id=entity.id,
            name=entity.name,
            email=entity.email,
            message=entity.message,
            timestamp=entity.timestamp,
            ip=entity.source_address,
        )
