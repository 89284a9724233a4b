"""SMTP mail transport.

Uses the aiosmtplib client so every step of the SMTP dialogue is awaited
on the event loop and can be cancelled by a timeout. Well-known providers
are resolved by name (e.g. EMAIL_SERVICE=gmail).
"""

import logging
import ssl
from contextlib import asynccontextmanager
from dataclasses import dataclass
from email.message import EmailMessage
from typing import AsyncIterator, Optional

import aiosmtplib

from app.portfolio_contact.application.exceptions import DispatchError
from app.portfolio_contact.application.interfaces.mail_transport import (
    MailSession,
    MailTransport,
)
from app.portfolio_contact.domain.entities.notification import NotificationMessage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SmtpServer:
    """Address of an SMTP submission server.

    Attributes:
        host: Server hostname.
        port: Server port.
        use_ssl: Implicit TLS (port 465 style); otherwise STARTTLS when offered.
    """

    host: str
    port: int
    use_ssl: bool


WELL_KNOWN_SERVICES: dict[str, SmtpServer] = {
    "gmail": SmtpServer("smtp.gmail.com", 465, True),
    "outlook": SmtpServer("smtp-mail.outlook.com", 587, False),
    "hotmail": SmtpServer("smtp-mail.outlook.com", 587, False),
    "office365": SmtpServer("smtp.office365.com", 587, False),
    "yahoo": SmtpServer("smtp.mail.yahoo.com", 465, True),
    "icloud": SmtpServer("smtp.mail.me.com", 587, False),
    "zoho": SmtpServer("smtp.zoho.com", 465, True),
    "fastmail": SmtpServer("smtp.fastmail.com", 465, True),
    "sendgrid": SmtpServer("smtp.sendgrid.net", 587, False),
    "mailgun": SmtpServer("smtp.mailgun.org", 465, True),
}


def resolve_smtp_server(
    service: str,
    host: Optional[str] = None,
    port: Optional[int] = None,
    use_ssl: Optional[bool] = None,
) -> SmtpServer:
    """Resolve the SMTP server from a provider name and explicit overrides.

    An explicit ``host`` wins over the provider table.

    Raises:
        ValueError: If the provider is unknown and no host is given.
    """
    if host:
        resolved_port = port or 587
        return SmtpServer(
            host=host,
            port=resolved_port,
            use_ssl=use_ssl if use_ssl is not None else resolved_port == 465,
        )

    known = WELL_KNOWN_SERVICES.get(service.lower())
    if known is None:
        raise ValueError(
            f"Unknown email service '{service}'. Use one of "
            f"{sorted(WELL_KNOWN_SERVICES)}, 'postmark', or set SMTP_HOST."
        )
    return SmtpServer(
        host=known.host,
        port=port or known.port,
        use_ssl=known.use_ssl if use_ssl is None else use_ssl,
    )


def build_email_message(message: NotificationMessage) -> EmailMessage:
    """Convert a NotificationMessage to a multipart/alternative email."""
    email_message = EmailMessage()
    email_message["From"] = message.sender
    email_message["To"] = message.recipient
    email_message["Subject"] = message.subject
    email_message.set_content(message.text_body)
    email_message.add_alternative(message.html_body, subtype="html")
    return email_message


class _SmtpSession(MailSession):
    """One authenticated SMTP connection."""

    def __init__(self, client: aiosmtplib.SMTP) -> None:
        self._client = client

    async def send(self, message: NotificationMessage) -> None:
        email_message = build_email_message(message)
        try:
            await self._client.send_message(email_message)
        except (aiosmtplib.SMTPException, OSError) as e:
            raise DispatchError(
                f"SMTP delivery to {message.recipient} failed: {e}",
                recipient=message.recipient,
            ) from e


class SmtpMailTransport(MailTransport):
    """Mail transport speaking SMTP to a provider with username/password auth."""

    def __init__(
        self,
        server: SmtpServer,
        username: str,
        password: str,
        timeout_seconds: float = 15.0,
    ) -> None:
        self._server = server
        self._username = username
        self._password = password
        self._timeout_seconds = timeout_seconds

    @property
    def provider_name(self) -> str:
        return f"smtp://{self._server.host}:{self._server.port}"

    @asynccontextmanager
    async def open(self) -> AsyncIterator[MailSession]:
        client = aiosmtplib.SMTP(
            hostname=self._server.host,
            port=self._server.port,
            timeout=self._timeout_seconds,
            use_tls=self._server.use_ssl,
            # Implicit TLS never upgrades; plain connections upgrade when offered
            start_tls=False if self._server.use_ssl else None,
            tls_context=ssl.create_default_context(),
        )

        try:
            await client.connect()
            await client.login(self._username, self._password)
        except (aiosmtplib.SMTPException, OSError) as e:
            client.close()
            raise DispatchError(
                f"Could not connect to {self.provider_name}: {e}"
            ) from e
        except BaseException:
            client.close()
            raise

        try:
            yield _SmtpSession(client)
        except BaseException:
            # A failed or cancelled send leaves the dialogue mid-command
            client.close()
            raise

        await self._disconnect(client)

    async def verify(self) -> None:
        async with self.open():
            pass

    async def _disconnect(self, client: aiosmtplib.SMTP) -> None:
        try:
            await client.quit()
        except (aiosmtplib.SMTPException, OSError) as e:
            logger.debug(f"SMTP quit failed, closing socket: {e}")
            client.close()
