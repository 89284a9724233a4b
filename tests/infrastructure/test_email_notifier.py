"""Tests for the notifiers and the Postmark mail transport."""

import asyncio
import json
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncIterator, Optional

import httpx
import pytest

from app.portfolio_contact.application.exceptions import DispatchError
from app.portfolio_contact.application.interfaces.mail_transport import (
    MailSession,
    MailTransport,
)
from app.portfolio_contact.domain.entities.notification import (
    NotificationKind,
    NotificationMessage,
)
from app.portfolio_contact.domain.entities.submission import Submission
from app.portfolio_contact.domain.services.notification_composer import (
    NotificationComposer,
)
from app.portfolio_contact.domain.value_objects.email_address import EmailAddress
from app.portfolio_contact.infrastructure.mail.email_notifier import (
    DisabledNotifier,
    EmailNotifier,
)
from app.portfolio_contact.infrastructure.mail.postmark_transport import (
    PostmarkMailTransport,
)
from app.portfolio_contact.infrastructure.mail.smtp_transport import (
    build_email_message,
)

RECEIVED_AT = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


class FakeSession(MailSession):
    def __init__(self, transport: "FakeTransport") -> None:
        self._transport = transport

    async def send(self, message: NotificationMessage) -> None:
        if self._transport.delay:
            await asyncio.sleep(self._transport.delay)
        if message.kind in self._transport.fail_kinds:
            raise DispatchError("rejected", recipient=message.recipient)
        self._transport.sent.append(message)


class FakeTransport(MailTransport):
    """Records sent messages; can fail or stall on demand."""

    def __init__(
        self,
        fail_kinds: Optional[set] = None,
        delay: float = 0.0,
        verify_error: Optional[DispatchError] = None,
    ) -> None:
        self.fail_kinds = fail_kinds or set()
        self.delay = delay
        self.verify_error = verify_error
        self.sent: list[NotificationMessage] = []
        self.sessions_opened = 0

    @property
    def provider_name(self) -> str:
        return "fake"

    @asynccontextmanager
    async def open(self) -> AsyncIterator[MailSession]:
        self.sessions_opened += 1
        yield FakeSession(self)

    async def verify(self) -> None:
        if self.verify_error is not None:
            raise self.verify_error


@pytest.fixture
def composer() -> NotificationComposer:
    return NotificationComposer(
        sender="me@portfolio.dev",
        operator_address="inbox@portfolio.dev",
        signature_name="Jordan",
    )


@pytest.fixture
def submission() -> Submission:
    return Submission(
        name="Ann",
        email=EmailAddress("ann@x.com"),
        message="Hi",
        source_address="203.0.113.7",
    )


class TestEmailNotifier:
    @pytest.mark.asyncio
    async def test_sends_operator_notice_then_acknowledgment(
        self, composer: NotificationComposer, submission: Submission
    ) -> None:
        transport = FakeTransport()
        notifier = EmailNotifier(transport, composer)

        await notifier.notify(submission, RECEIVED_AT)

        assert [m.kind for m in transport.sent] == [
            NotificationKind.OPERATOR_NOTICE,
            NotificationKind.SENDER_ACKNOWLEDGMENT,
        ]
        assert [m.recipient for m in transport.sent] == [
            "inbox@portfolio.dev",
            "ann@x.com",
        ]
        assert transport.sessions_opened == 1

    @pytest.mark.asyncio
    async def test_failed_operator_notice_skips_acknowledgment(
        self, composer: NotificationComposer, submission: Submission
    ) -> None:
        transport = FakeTransport(fail_kinds={NotificationKind.OPERATOR_NOTICE})
        notifier = EmailNotifier(transport, composer)

        with pytest.raises(DispatchError) as exc_info:
            await notifier.notify(submission, RECEIVED_AT)

        assert exc_info.value.recipient == "inbox@portfolio.dev"
        assert transport.sent == []

    @pytest.mark.asyncio
    async def test_failed_acknowledgment_is_reported(
        self, composer: NotificationComposer, submission: Submission
    ) -> None:
        transport = FakeTransport(fail_kinds={NotificationKind.SENDER_ACKNOWLEDGMENT})
        notifier = EmailNotifier(transport, composer)

        with pytest.raises(DispatchError):
            await notifier.notify(submission, RECEIVED_AT)

        assert [m.kind for m in transport.sent] == [NotificationKind.OPERATOR_NOTICE]

    @pytest.mark.asyncio
    async def test_stalled_send_times_out(
        self, composer: NotificationComposer, submission: Submission
    ) -> None:
        transport = FakeTransport(delay=1.0)
        notifier = EmailNotifier(transport, composer, timeout_seconds=0.01)

        with pytest.raises(DispatchError) as exc_info:
            await notifier.notify(submission, RECEIVED_AT)

        assert "Timed out" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_verify_reports_transport_state(
        self, composer: NotificationComposer
    ) -> None:
        healthy = EmailNotifier(FakeTransport(), composer)
        broken = EmailNotifier(
            FakeTransport(verify_error=DispatchError("bad credentials")), composer
        )

        assert healthy.enabled
        assert await healthy.verify() is True
        assert await broken.verify() is False


class TestDisabledNotifier:
    @pytest.mark.asyncio
    async def test_notify_is_a_noop(self, submission: Submission) -> None:
        notifier = DisabledNotifier()

        await notifier.notify(submission, RECEIVED_AT)

        assert not notifier.enabled
        assert await notifier.verify() is True


class TestPostmarkMailTransport:
    @pytest.mark.asyncio
    async def test_posts_message_with_server_token(
        self, composer: NotificationComposer, submission: Submission
    ) -> None:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={"ErrorCode": 0, "Message": "OK"})

        transport = PostmarkMailTransport(
            server_token="server-token", transport=httpx.MockTransport(handler)
        )
        notifier = EmailNotifier(transport, composer)

        await notifier.notify(submission, RECEIVED_AT)

        assert len(requests) == 2
        assert requests[0].url.path == "/email"
        assert requests[0].headers["X-Postmark-Server-Token"] == "server-token"
        body = json.loads(requests[0].content)
        assert body["To"] == "inbox@portfolio.dev"
        assert body["From"] == "me@portfolio.dev"
        assert body["MessageStream"] == "outbound"
        assert json.loads(requests[1].content)["To"] == "ann@x.com"

    @pytest.mark.asyncio
    async def test_non_200_raises_dispatch_error(
        self, composer: NotificationComposer, submission: Submission
    ) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(422, json={"ErrorCode": 300, "Message": "Invalid"})

        transport = PostmarkMailTransport(
            server_token="server-token", transport=httpx.MockTransport(handler)
        )
        message = composer.sender_acknowledgment(submission)

        with pytest.raises(DispatchError) as exc_info:
            async with transport.open() as session:
                await session.send(message)

        assert "422" in exc_info.value.message
        assert exc_info.value.recipient == "ann@x.com"

    @pytest.mark.asyncio
    async def test_verify_checks_server_endpoint(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/server":
                return httpx.Response(401, json={"ErrorCode": 10})
            return httpx.Response(404)

        transport = PostmarkMailTransport(
            server_token="wrong", transport=httpx.MockTransport(handler)
        )

        with pytest.raises(DispatchError):
            await transport.verify()


class TestSmtpMessage:
    def test_builds_text_and_html_alternatives(
        self, composer: NotificationComposer, submission: Submission
    ) -> None:
        message = composer.operator_notice(submission, RECEIVED_AT)

        email_message = build_email_message(message)

        assert email_message["To"] == "inbox@portfolio.dev"
        assert email_message["Subject"] == "Portfolio Contact Form: Message from Ann"
        assert email_message.is_multipart()
        content_types = [part.get_content_type() for part in email_message.iter_parts()]
        assert content_types == ["text/plain", "text/html"]
