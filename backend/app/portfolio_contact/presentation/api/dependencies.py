"""FastAPI dependencies shared by the API routers.

Services and settings are attached to ``app.state`` by ``create_app``;
these dependencies hand them to request handlers.
"""

import hmac

from fastapi import Depends, Request

from app.core.config import Settings
from app.portfolio_contact.application.exceptions import (
    InvalidTokenError,
    UnauthorizedError,
)
from app.portfolio_contact.application.use_cases.contact_queries import (
    GetStatsUseCase,
    ListRecentMessagesUseCase,
)
from app.portfolio_contact.application.use_cases.submit_contact import (
    SubmitContactUseCase,
)
from app.portfolio_contact.infrastructure.container import ServiceContainer


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_services(request: Request) -> ServiceContainer:
    return request.app.state.services


def client_address(request: Request) -> str:
    """Return the client's network address.

    With ``trust_proxy`` enabled the first X-Forwarded-For entry is used.
    """
    settings: Settings = request.app.state.settings
    if settings.trust_proxy:
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


def get_client_address(request: Request) -> str:
    return client_address(request)


def get_submit_contact_use_case(
    services: ServiceContainer = Depends(get_services),
) -> SubmitContactUseCase:
    return SubmitContactUseCase(
        rate_limiter=services.contact_limiter,
        contact_store=services.contact_store,
        notifier=services.notifier,
    )


def get_stats_use_case(
    services: ServiceContainer = Depends(get_services),
) -> GetStatsUseCase:
    return GetStatsUseCase(contact_store=services.contact_store)


def get_list_messages_use_case(
    services: ServiceContainer = Depends(get_services),
    settings: Settings = Depends(get_app_settings),
) -> ListRecentMessagesUseCase:
    return ListRecentMessagesUseCase(
        contact_store=services.contact_store,
        limit=settings.admin_list_limit,
    )


def require_admin_token(
    request: Request,
    settings: Settings = Depends(get_app_settings),
) -> None:
    """Check the admin bearer token.

    Raises:
        UnauthorizedError: If the Authorization header is missing or not Bearer.
        InvalidTokenError: If the token does not match ADMIN_TOKEN, or no
            ADMIN_TOKEN is configured.
    """
    auth_header = request.headers.get("authorization")
    if not auth_header or not auth_header.startswith("Bearer "):
        raise UnauthorizedError()

    token = auth_header[len("Bearer "):].strip()
    expected = settings.admin_token
    if not token or not expected or not hmac.compare_digest(
        token.encode("utf-8"), expected.encode("utf-8")
    ):
        raise InvalidTokenError()
