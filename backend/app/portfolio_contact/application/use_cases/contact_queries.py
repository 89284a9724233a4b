"""Read-side use cases over stored contact messages."""

from datetime import datetime, timezone

from app.portfolio_contact.application.dto.contact_dto import StatsDTO, StoredContactDTO
from app.portfolio_contact.application.exceptions import StoreUnavailableError
from app.portfolio_contact.application.interfaces.contact_store import ContactStore


class GetStatsUseCase:
    """Application service computing the public portfolio statistics."""

    def __init__(self, contact_store: ContactStore) -> None:
        self._contact_store = contact_store

    async def execute(self) -> StatsDTO:
        """Execute the stats computation.

        Visits are not tracked, so ``total_visits`` is always 0. The message
        count is 0 when no store is available.
        """
        total_messages = 0
        if self._contact_store.available:
            total_messages = await self._contact_store.count()

        return StatsDTO(
            total_visits=0,
            total_messages=total_messages,
            last_updated=datetime.now(timezone.utc),
        )


class ListRecentMessagesUseCase:
    """Application service listing the newest stored messages for the admin."""

    def __init__(self, contact_store: ContactStore, limit: int = 50) -> None:
        """Initialize the use case.

        Args:
            contact_store: Persistence adapter to read from.
            limit: Maximum number of messages returned.
        """
        self._contact_store = contact_store
        self._limit = limit

    async def execute(self) -> list[StoredContactDTO]:
        """Execute the listing.

        Returns:
            Stored messages, newest first.

        Raises:
            StoreUnavailableError: If no store is configured or reachable.
        """
        if not self._contact_store.available:
            raise StoreUnavailableError()

        contacts = await self._contact_store.list_recent(self._limit)
        return [StoredContactDTO.from_entity(c) for c in contacts]
