"""Postmark HTTP API mail transport."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import httpx

from app.portfolio_contact.application.exceptions import DispatchError
from app.portfolio_contact.application.interfaces.mail_transport import (
    MailSession,
    MailTransport,
)
from app.portfolio_contact.domain.entities.notification import NotificationMessage

logger = logging.getLogger(__name__)

POSTMARK_API_URL = "https://api.postmarkapp.com"


class _PostmarkSession(MailSession):
    """Sends messages over one pooled HTTP client."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def send(self, message: NotificationMessage) -> None:
        try:
            response = await self._client.post(
                "/email",
                json={
                    "From": message.sender,
                    "To": message.recipient,
                    "Subject": message.subject,
                    "HtmlBody": message.html_body,
                    "TextBody": message.text_body,
                    "MessageStream": "outbound",  # Default transactional stream
                },
            )
        except httpx.HTTPError as e:
            raise DispatchError(
                f"Postmark request for {message.recipient} failed: {e}",
                recipient=message.recipient,
            ) from e

        if response.status_code != 200:
            raise DispatchError(
                f"Postmark error: {response.status_code} - {response.text}",
                recipient=message.recipient,
            )


class PostmarkMailTransport(MailTransport):
    """Mail transport using the Postmark REST API and a server token."""

    def __init__(
        self,
        server_token: str,
        timeout_seconds: float = 15.0,
        base_url: str = POSTMARK_API_URL,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize the transport.

        Args:
            server_token: Postmark server API token.
            timeout_seconds: HTTP timeout per request.
            base_url: API base URL.
            transport: Optional httpx transport (used by tests).
        """
        self._server_token = server_token
        self._timeout_seconds = timeout_seconds
        self._base_url = base_url
        self._transport = transport

    @property
    def provider_name(self) -> str:
        return "postmark"

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._base_url,
            headers={
                "Accept": "application/json",
                "Content-Type": "application/json",
                "X-Postmark-Server-Token": self._server_token,
            },
            timeout=self._timeout_seconds,
            transport=self._transport,
        )

    @asynccontextmanager
    async def open(self) -> AsyncIterator[MailSession]:
        async with self._client() as client:
            yield _PostmarkSession(client)

    async def verify(self) -> None:
        try:
            async with self._client() as client:
                response = await client.get("/server")
        except httpx.HTTPError as e:
            raise DispatchError(f"Could not reach Postmark: {e}") from e

        if response.status_code != 200:
            raise DispatchError(
                f"Postmark rejected the server token: {response.status_code} - {response.text}"
            )
