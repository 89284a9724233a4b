"""Notifier port: sends the emails for an accepted submission."""

from abc import ABC, abstractmethod
from datetime import datetime

from app.portfolio_contact.domain.entities.submission import Submission


class Notifier(ABC):
    """Notification dispatcher for accepted submissions.

    The disabled variant treats every call as a successful no-op.
    """

    @property
    @abstractmethod
    def enabled(self) -> bool:
        """Whether a mail transport is configured."""
        ...

    @abstractmethod
    async def verify(self) -> bool:
        """Check the transport configuration once at startup.

        Returns:
            True if the transport accepted the configuration (or is disabled).
        """
        ...

    @abstractmethod
    async def notify(self, submission: Submission, received_at: datetime) -> None:
        """Send the operator notice, then the sender acknowledgment.

        Both messages go through one transport session. If the operator
        notice fails the acknowledgment is not attempted.

        Raises:
            DispatchError: If either send fails or times out.
        """
        ...
