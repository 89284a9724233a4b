"""Notifier variants: disabled (no mail credentials) and email-backed."""

import asyncio
import logging
from datetime import datetime

from app.portfolio_contact.application.exceptions import DispatchError
from app.portfolio_contact.application.interfaces.mail_transport import (
    MailSession,
    MailTransport,
)
from app.portfolio_contact.application.interfaces.notifier import Notifier
from app.portfolio_contact.domain.entities.notification import NotificationMessage
from app.portfolio_contact.domain.entities.submission import Submission
from app.portfolio_contact.domain.services.notification_composer import (
    NotificationComposer,
)

logger = logging.getLogger(__name__)


class DisabledNotifier(Notifier):
    """Notifier used when no mail credentials are configured."""

    @property
    def enabled(self) -> bool:
        return False

    async def verify(self) -> bool:
        return True

    async def notify(self, submission: Submission, received_at: datetime) -> None:
        logger.debug("Email not configured; skipping notifications")


class EmailNotifier(Notifier):
    """Sends the operator notice and the sender acknowledgment by email.

    Sends are strictly ordered and share one transport session. Each send
    is bounded by ``timeout_seconds``.
    """

    def __init__(
        self,
        transport: MailTransport,
        composer: NotificationComposer,
        timeout_seconds: float = 15.0,
    ) -> None:
        self._transport = transport
        self._composer = composer
        self._timeout_seconds = timeout_seconds

    @property
    def enabled(self) -> bool:
        return True

    async def verify(self) -> bool:
        try:
            await self._transport.verify()
        except DispatchError as e:
            logger.error(f"Email configuration error: {e.message}")
            return False

        logger.info(
            f"Email server is ready to take our messages ({self._transport.provider_name})"
        )
        return True

    async def notify(self, submission: Submission, received_at: datetime) -> None:
        messages = [
            self._composer.operator_notice(submission, received_at),
            self._composer.sender_acknowledgment(submission),
        ]

        async with self._transport.open() as session:
            for message in messages:
                await self._send(session, message)

        logger.info(f"Notifications sent for message from {submission.email}")

    async def _send(self, session: MailSession, message: NotificationMessage) -> None:
        try:
            await asyncio.wait_for(session.send(message), self._timeout_seconds)
        except asyncio.TimeoutError as e:
            raise DispatchError(
                f"Timed out after {self._timeout_seconds}s sending "
                f"{message.kind.value} to {message.recipient}",
                recipient=message.recipient,
            ) from e
        logger.debug(f"Sent {message.kind.value} to {message.recipient}")
