"""Mail infrastructure: transports and notifiers."""

from app.portfolio_contact.infrastructure.mail.email_notifier import (
    DisabledNotifier,
    EmailNotifier,
)
from app.portfolio_contact.infrastructure.mail.postmark_transport import (
    PostmarkMailTransport,
)
from app.portfolio_contact.infrastructure.mail.smtp_transport import (
    SmtpMailTransport,
    SmtpServer,
    resolve_smtp_server,
)

__all__ = [
    "DisabledNotifier",
    "EmailNotifier",
    "PostmarkMailTransport",
    "SmtpMailTransport",
    "SmtpServer",
    "resolve_smtp_server",
]
