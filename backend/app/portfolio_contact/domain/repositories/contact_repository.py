"""Abstract repository interface for StoredContact records."""

from abc import ABC, abstractmethod
from typing import List

from ..entities.submission import StoredContact


class ContactRepository(ABC):
    """Abstract repository for append-only contact message persistence.

    The application only appends records and reads them back; there are
    no update or delete operations.
    """

    @abstractmethod
    async def add(self, contact: StoredContact) -> StoredContact:
        """Append a new contact record.

        Args:
            contact: The unsaved record (id is None).

        Returns:
            The saved record with its ID populated.
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Return the total number of stored records."""
        pass

    @abstractmethod
    async def list_recent(self, limit: int) -> List[StoredContact]:
        """Retrieve the most recent records.

        Args:
            limit: Maximum number of records to return.

        Returns:
            Records ordered newest first, at most ``limit`` long.
        """
        pass
