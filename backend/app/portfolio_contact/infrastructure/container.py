"""Construction of the process-wide service objects.

One ServiceContainer is built per application and lives as long as it:
startup connects the store and verifies the mail transport, shutdown
releases database connections. Tests build containers from fakes.
"""

import logging
from dataclasses import dataclass

from app.core.config import Settings
from app.portfolio_contact.application.interfaces.contact_store import ContactStore
from app.portfolio_contact.application.interfaces.mail_transport import MailTransport
from app.portfolio_contact.application.interfaces.notifier import Notifier
from app.portfolio_contact.application.interfaces.rate_limiter import RateLimiter
from app.portfolio_contact.domain.services.notification_composer import (
    NotificationComposer,
)
from app.portfolio_contact.domain.value_objects.rate_limit import RateLimitRule
from app.portfolio_contact.infrastructure.mail.email_notifier import (
    DisabledNotifier,
    EmailNotifier,
)
from app.portfolio_contact.infrastructure.mail.postmark_transport import (
    PostmarkMailTransport,
)
from app.portfolio_contact.infrastructure.mail.smtp_transport import (
    SmtpMailTransport,
    resolve_smtp_server,
)
from app.portfolio_contact.infrastructure.persistence.contact_stores import (
    DisabledContactStore,
    SqlContactStore,
)
from app.portfolio_contact.infrastructure.rate_limiting.memory_rate_limiter import (
    InMemoryRateLimiter,
)

logger = logging.getLogger(__name__)

GLOBAL_LIMIT_MESSAGE = "Too many requests from this IP, please try again later."
CONTACT_LIMIT_MESSAGE = "Too many contact form submissions, please try again later."


@dataclass
class ServiceContainer:
    """Shared services injected into request handlers.

    Attributes:
        contact_store: Persistence adapter (disabled or SQL-backed).
        notifier: Notification dispatcher (disabled or email-backed).
        global_limiter: Window applied to every request.
        contact_limiter: Window applied to contact submissions only.
    """

    contact_store: ContactStore
    notifier: Notifier
    global_limiter: RateLimiter
    contact_limiter: RateLimiter

    async def startup(self) -> None:
        await self.contact_store.initialize()
        if self.notifier.enabled:
            await self.notifier.verify()

    async def shutdown(self) -> None:
        await self.contact_store.close()


def build_rate_limiters(settings: Settings) -> tuple[RateLimiter, RateLimiter]:
    """Build the global and contact-submission limiters."""
    global_limiter = InMemoryRateLimiter(
        RateLimitRule(
            name="global",
            window_seconds=settings.global_rate_limit_window_seconds,
            max_requests=settings.global_rate_limit_max,
            message=GLOBAL_LIMIT_MESSAGE,
        )
    )
    contact_limiter = InMemoryRateLimiter(
        RateLimitRule(
            name="contact",
            window_seconds=settings.contact_rate_limit_window_seconds,
            max_requests=settings.contact_rate_limit_max,
            message=CONTACT_LIMIT_MESSAGE,
        )
    )
    return global_limiter, contact_limiter


def build_contact_store(settings: Settings) -> ContactStore:
    if not settings.database_url:
        return DisabledContactStore()
    return SqlContactStore(
        database_url=settings.database_url,
        timeout_seconds=settings.db_timeout_seconds,
        echo=settings.debug,
    )


def build_mail_transport(settings: Settings) -> MailTransport:
    """Build the transport named by ``email_service``.

    Raises:
        ValueError: If credentials are missing or the provider is unknown.
    """
    if not settings.email_user or not settings.email_pass:
        raise ValueError("EMAIL_USER and EMAIL_PASS are required for a mail transport")

    if settings.email_service.lower() == "postmark":
        return PostmarkMailTransport(
            server_token=settings.email_pass,
            timeout_seconds=settings.mail_timeout_seconds,
        )

    server = resolve_smtp_server(
        settings.email_service,
        host=settings.smtp_host,
        port=settings.smtp_port,
        use_ssl=settings.smtp_use_ssl,
    )
    return SmtpMailTransport(
        server=server,
        username=settings.email_user,
        password=settings.email_pass,
        timeout_seconds=settings.mail_timeout_seconds,
    )


def build_notifier(settings: Settings) -> Notifier:
    if not settings.email_configured:
        return DisabledNotifier()

    composer = NotificationComposer(
        sender=settings.email_user,  # type: ignore[arg-type]
        operator_address=settings.notification_address,  # type: ignore[arg-type]
        signature_name=settings.signature_name,
    )
    return EmailNotifier(
        transport=build_mail_transport(settings),
        composer=composer,
        timeout_seconds=settings.mail_timeout_seconds,
    )


def build_services(settings: Settings) -> ServiceContainer:
    """Build every service from settings."""
    global_limiter, contact_limiter = build_rate_limiters(settings)
    return ServiceContainer(
        contact_store=build_contact_store(settings),
        notifier=build_notifier(settings),
        global_limiter=global_limiter,
        contact_limiter=contact_limiter,
    )
