"""Application use cases for orchestrating domain logic."""

from app.portfolio_contact.application.use_cases.contact_queries import (
    GetStatsUseCase,
    ListRecentMessagesUseCase,
)
from app.portfolio_contact.application.use_cases.submit_contact import (
    SubmitContactUseCase,
)

__all__ = [
    "SubmitContactUseCase",
    "GetStatsUseCase",
    "ListRecentMessagesUseCase",
]
