"""Application-layer exceptions for use case error handling.

These exceptions represent the outcomes a request can end with other than
success. Client-facing ones (validation, throttling, auth) carry the exact
message returned to the caller; PersistenceError and DispatchError describe
operational faults and are never shown to clients directly.
"""

from typing import Optional

from app.portfolio_contact.domain.entities.submission_stage import SubmissionStage


class ApplicationError(Exception):
    """Base class for all application-layer exceptions."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class ValidationFailedError(ApplicationError):
    """Base class for contact-form input defects."""


class MissingFieldError(ValidationFailedError):
    """Raised when name, email or message is missing or empty."""

    def __init__(self, field: str) -> None:
        super().__init__(message="All fields are required", code="MISSING_FIELD")
        self.field = field


class InvalidEmailFormatError(ValidationFailedError):
    """Raised when the email does not have the local@domain.tld shape."""

    def __init__(self, email: str) -> None:
        super().__init__(message="Invalid email format", code="INVALID_EMAIL_FORMAT")
        self.email = email


class InvalidRequestBodyError(ValidationFailedError):
    """Raised when the request body is not a JSON object of string fields."""

    def __init__(self) -> None:
        super().__init__(message="Invalid request body", code="INVALID_REQUEST_BODY")


class RateLimitedError(ApplicationError):
    """Raised when a client exceeded a rate-limit window."""

    def __init__(self, message: str, retry_after_seconds: int) -> None:
        super().__init__(message=message, code="RATE_LIMITED")
        self.retry_after_seconds = retry_after_seconds


class UnauthorizedError(ApplicationError):
    """Raised when an admin request carries no bearer token."""

    def __init__(self) -> None:
        super().__init__(message="Unauthorized", code="UNAUTHORIZED")


class InvalidTokenError(ApplicationError):
    """Raised when an admin bearer token does not match the configured secret."""

    def __init__(self) -> None:
        super().__init__(message="Invalid token", code="INVALID_TOKEN")


class StoreUnavailableError(ApplicationError):
    """Raised on the read path when no contact store is configured or reachable."""

    def __init__(self) -> None:
        super().__init__(message="Database not available", code="STORE_UNAVAILABLE")


class PersistenceError(ApplicationError):
    """Raised when a configured contact store fails to write or read."""

    def __init__(self, message: str) -> None:
        super().__init__(message=message, code="PERSISTENCE_ERROR")


class DispatchError(ApplicationError):
    """Raised when a notification email could not be sent."""

    def __init__(self, message: str, recipient: Optional[str] = None) -> None:
        super().__init__(message=message, code="DISPATCH_ERROR")
        self.recipient = recipient


class InternalError(ApplicationError):
    """Opaque server-side failure reported to the client as a 500."""

    def __init__(self, message: str = "Internal server error") -> None:
        super().__init__(message=message, code="INTERNAL_ERROR")


class SubmissionFailedError(InternalError):
    """Raised when a validated submission could not be stored or notified.

    The client only sees the generic message; ``stage`` and ``__cause__``
    tell operators where it failed.
    """

    def __init__(self, stage: SubmissionStage) -> None:
        super().__init__(message="Internal server error. Please try again later.")
        self.stage = stage
