# Ports for external integrations (ContactStore, Notifier, MailTransport, RateLimiter)

from .contact_store import ContactStore
from .mail_transport import MailSession, MailTransport
from .notifier import Notifier
from .rate_limiter import RateLimiter

__all__ = [
    "ContactStore",
    "MailSession",
    "MailTransport",
    "Notifier",
    "RateLimiter",
]
