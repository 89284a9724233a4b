"""Application layer - use cases and orchestration.

This layer contains:
- DTOs: Data Transfer Objects for API input/output
- Interfaces: Ports implemented by the infrastructure layer
- Use Cases: Application services that orchestrate domain logic
- Exceptions: Application-level error types
"""

from app.portfolio_contact.application.dto import (
    ContactAcceptedDTO,
    ContactRequest,
    StatsDTO,
    StoredContactDTO,
)
from app.portfolio_contact.application.exceptions import (
    ApplicationError,
    DispatchError,
    InternalError,
    InvalidEmailFormatError,
    InvalidRequestBodyError,
    InvalidTokenError,
    MissingFieldError,
    PersistenceError,
    RateLimitedError,
    StoreUnavailableError,
    SubmissionFailedError,
    UnauthorizedError,
    ValidationFailedError,
)
from app.portfolio_contact.application.use_cases import (
    GetStatsUseCase,
    ListRecentMessagesUseCase,
    SubmitContactUseCase,
)

__all__ = [
    # DTOs
    "ContactRequest",
    "ContactAcceptedDTO",
    "StoredContactDTO",
    "StatsDTO",
    # Use Cases
    "SubmitContactUseCase",
    "GetStatsUseCase",
    "ListRecentMessagesUseCase",
    # Exceptions
    "ApplicationError",
    "ValidationFailedError",
    "MissingFieldError",
    "InvalidEmailFormatError",
    "InvalidRequestBodyError",
    "RateLimitedError",
    "UnauthorizedError",
    "InvalidTokenError",
    "StoreUnavailableError",
    "PersistenceError",
    "DispatchError",
    "InternalError",
    "SubmissionFailedError",
]
