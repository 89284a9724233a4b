"""Mail transport port for delivering NotificationMessages."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager

from app.portfolio_contact.domain.entities.notification import NotificationMessage


class MailSession(ABC):
    """An open connection to the mail provider."""

    @abstractmethod
    async def send(self, message: NotificationMessage) -> None:
        """Deliver one message.

        Raises:
            DispatchError: If the provider rejected the message or the
                connection failed.
        """
        ...


class MailTransport(ABC):
    """Abstract base class for mail provider adapters (SMTP, HTTP APIs)."""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Return a human-readable provider name for logs."""
        ...

    @abstractmethod
    def open(self) -> AbstractAsyncContextManager[MailSession]:
        """Open a session usable for several sends.

        Raises:
            DispatchError: If the connection cannot be established.
        """
        ...

    @abstractmethod
    async def verify(self) -> None:
        """Check connectivity and credentials.

        Raises:
            DispatchError: If the provider cannot be reached or rejects
                the credentials.
        """
        ...
