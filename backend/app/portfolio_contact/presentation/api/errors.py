"""Exception handlers mapping errors to JSON responses.

Every error body has the shape ``{"error": <message>}``. Operational
failures are reported as opaque 500s; internal detail is only echoed
outside production.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import Settings
from app.portfolio_contact.application.exceptions import (
    ApplicationError,
    InternalError,
    InvalidTokenError,
    RateLimitedError,
    StoreUnavailableError,
    UnauthorizedError,
    ValidationFailedError,
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: tuple[tuple[type[ApplicationError], int], ...] = (
    (ValidationFailedError, status.HTTP_400_BAD_REQUEST),
    (RateLimitedError, status.HTTP_429_TOO_MANY_REQUESTS),
    (UnauthorizedError, status.HTTP_401_UNAUTHORIZED),
    (InvalidTokenError, status.HTTP_401_UNAUTHORIZED),
    (StoreUnavailableError, status.HTTP_503_SERVICE_UNAVAILABLE),
    (InternalError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def status_for(exc: ApplicationError) -> int:
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def rate_limited_response(message: str, retry_after_seconds: int) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        content={"error": message},
        headers={"Retry-After": str(retry_after_seconds)},
    )


def unhandled_error_response(exc: Exception, settings: Settings) -> JSONResponse:
    """Build the opaque 500 for an exception nothing else handled."""
    logger.exception(f"Unhandled error: {exc}")
    content = {"error": "Something went wrong!"}
    if not settings.is_production:
        content["details"] = str(exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content
    )


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """Install the application's exception handlers on ``app``."""

    @app.exception_handler(ApplicationError)
    async def application_error_handler(
        request: Request, exc: ApplicationError
    ) -> JSONResponse:
        if isinstance(exc, RateLimitedError):
            return rate_limited_response(exc.message, exc.retry_after_seconds)

        status_code = status_for(exc)
        if status_code == status.HTTP_500_INTERNAL_SERVER_ERROR and not isinstance(
            exc, InternalError
        ):
            # Persistence/dispatch errors that escaped their use case
            logger.error(f"Unhandled application error: {exc.code}: {exc.message}")
            return JSONResponse(
                status_code=status_code, content={"error": "Internal server error"}
            )

        return JSONResponse(status_code=status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.info(f"Invalid request body for {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid request body"},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        # Unknown paths and unsupported methods are both "not found"
        if exc.status_code in (
            status.HTTP_404_NOT_FOUND,
            status.HTTP_405_METHOD_NOT_ALLOWED,
        ):
            path = request.url.path
            if request.url.query:
                path = f"{path}?{request.url.query}"
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content={"error": "Route not found", "path": path},
            )

        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        # Errors raised by middleware outside catch_unhandled_errors land here
        return unhandled_error_response(exc, settings)
