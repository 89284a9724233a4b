"""Contact store port: optional, append-only persistence of submissions."""

from abc import ABC, abstractmethod
from typing import List, Optional

from app.portfolio_contact.domain.entities.submission import StoredContact, Submission


class ContactStore(ABC):
    """Persistence adapter used by the submission pipeline and read endpoints.

    Two variants exist: a disabled store (nothing configured) and a
    configured store backed by a database. When ``available`` is False,
    ``store`` is a no-op returning None, ``count`` is 0 and ``list_recent``
    raises StoreUnavailableError.
    """

    @property
    @abstractmethod
    def available(self) -> bool:
        """Whether records are actually being written and can be read."""
        ...

    @abstractmethod
    async def initialize(self) -> None:
        """Connect and prepare the schema. Called once at startup."""
        ...

    @abstractmethod
    async def store(self, submission: Submission) -> Optional[StoredContact]:
        """Append a record for a validated submission.

        Returns:
            The stored record, or None when the store is unavailable.

        Raises:
            PersistenceError: If an available store fails to write.
        """
        ...

    @abstractmethod
    async def count(self) -> int:
        """Return the number of stored records (0 when unavailable).

        Raises:
            PersistenceError: If an available store fails to read.
        """
        ...

    @abstractmethod
    async def list_recent(self, limit: int) -> List[StoredContact]:
        """Return up to ``limit`` records, newest first.

        Raises:
            StoreUnavailableError: If the store is unavailable.
            PersistenceError: If an available store fails to read.
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Release connections. Called once at shutdown."""
        ...
