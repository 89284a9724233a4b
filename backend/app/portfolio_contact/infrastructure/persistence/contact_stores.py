"""ContactStore variants: disabled (nothing configured) and SQL-backed."""

import asyncio
import logging
from typing import Awaitable, List, Optional, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from app.portfolio_contact.application.exceptions import (
    PersistenceError,
    StoreUnavailableError,
)
from app.portfolio_contact.application.interfaces.contact_store import ContactStore
from app.portfolio_contact.domain.entities.submission import StoredContact, Submission
from app.portfolio_contact.infrastructure.db.session import (
    create_engine_for_url,
    create_schema,
    create_session_factory,
)
from app.portfolio_contact.infrastructure.repositories.sql_contact_repository import (
    SqlContactRepository,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DisabledContactStore(ContactStore):
    """Store used when no database is configured. Writes are no-ops."""

    @property
    def available(self) -> bool:
        return False

    async def initialize(self) -> None:
        logger.info("No database configured; contact messages will not be stored")

    async def store(self, submission: Submission) -> Optional[StoredContact]:
        return None

    async def count(self) -> int:
        return 0

    async def list_recent(self, limit: int) -> List[StoredContact]:
        raise StoreUnavailableError()

    async def close(self) -> None:
        return None


class SqlContactStore(ContactStore):
    """Store backed by an async SQLAlchemy engine.

    The store becomes available only after ``initialize`` reached the
    database. A store that could not connect at startup behaves like a
    disabled one; failures after that raise PersistenceError.
    """

    def __init__(
        self,
        database_url: Optional[str] = None,
        timeout_seconds: float = 10.0,
        echo: bool = False,
        engine: Optional[AsyncEngine] = None,
    ) -> None:
        """Initialize the store.

        Args:
            database_url: Database URL (sync or async driver form).
            timeout_seconds: Bound on each database operation.
            echo: Log SQL statements.
            engine: Pre-built engine, used instead of ``database_url``.
        """
        if engine is None:
            if not database_url:
                raise ValueError("database_url or engine is required")
            engine = create_engine_for_url(database_url, echo=echo)

        self._engine = engine
        self._session_factory = create_session_factory(engine)
        self._timeout_seconds = timeout_seconds
        self._available = False

    @property
    def available(self) -> bool:
        return self._available

    async def initialize(self) -> None:
        """Connect and create the schema; log and stay unavailable on failure."""
        try:
            await asyncio.wait_for(create_schema(self._engine), self._timeout_seconds)
        except Exception as e:
            self._available = False
            logger.error(f"Database connection error: {e}")
            return

        self._available = True
        logger.info("Connected to database")

    async def store(self, submission: Submission) -> Optional[StoredContact]:
        if not self._available:
            logger.warning("Database not available; contact message was not stored")
            return None

        contact = StoredContact.from_submission(submission)
        saved = await self._run(self._add(contact), "store contact message")
        logger.info(f"Stored contact message {saved.id}")
        return saved

    async def count(self) -> int:
        if not self._available:
            return 0
        return await self._run(self._count(), "count contact messages")

    async def list_recent(self, limit: int) -> List[StoredContact]:
        if not self._available:
            raise StoreUnavailableError()
        return await self._run(self._list_recent(limit), "list contact messages")

    async def close(self) -> None:
        await self._engine.dispose()
        self._available = False

    async def _run(self, operation: Awaitable[T], description: str) -> T:
        """Await a database operation under the timeout, mapping failures."""
        try:
            return await asyncio.wait_for(operation, self._timeout_seconds)
        except asyncio.TimeoutError as e:
            raise PersistenceError(
                f"Timed out after {self._timeout_seconds}s trying to {description}"
            ) from e
        except (SQLAlchemyError, OSError) as e:
            raise PersistenceError(f"Failed to {description}: {e}") from e

    async def _add(self, contact: StoredContact) -> StoredContact:
        async with self._session_factory() as session:
            saved = await SqlContactRepository(session).add(contact)
            await session.commit()
            return saved

    async def _count(self) -> int:
        async with self._session_factory() as session:
            return await SqlContactRepository(session).count()

    async def _list_recent(self, limit: int) -> List[StoredContact]:
        async with self._session_factory() as session:
            return await SqlContactRepository(session).list_recent(limit)
