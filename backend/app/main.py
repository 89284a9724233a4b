"""FastAPI application factory and main entry point."""

import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import Settings, get_settings
from app.core.logging import get_logger, setup_logging
from app.portfolio_contact.infrastructure.container import (
    ServiceContainer,
    build_services,
)
from app.portfolio_contact.presentation.api import admin, contact, health, stats
from app.portfolio_contact.presentation.api.errors import register_exception_handlers
from app.portfolio_contact.presentation.api.middleware import (
    catch_unhandled_errors,
    global_rate_limit,
)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager for startup/shutdown events."""
    settings: Settings = app.state.settings
    services: ServiceContainer = app.state.services

    # Startup
    setup_logging(level="DEBUG" if settings.debug else settings.log_level)
    logger.info("Portfolio contact backend starting up...")
    logger.info(f"Environment: {settings.app_env}")
    logger.info(f"Email configured: {'Yes' if settings.email_configured else 'No'}")
    logger.info(
        f"Database configured: {'Yes' if settings.database_configured else 'No'}"
    )

    await services.startup()

    yield

    # Shutdown
    logger.info("Portfolio contact backend shutting down...")
    await services.shutdown()


def create_app(
    settings: Optional[Settings] = None,
    services: Optional[ServiceContainer] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to use; loaded from the environment if omitted.
        services: Prebuilt services; built from settings if omitted.
    """
    settings = settings or get_settings()
    services = services or build_services(settings)

    app = FastAPI(
        title="Portfolio Contact Backend",
        description="Contact form submissions, notifications and admin listing",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/api/docs" if settings.is_development else None,
        redoc_url="/api/redoc" if settings.is_development else None,
        openapi_url="/api/openapi.json" if settings.is_development else None,
    )
    app.state.settings = settings
    app.state.services = services
    app.state.started_at = time.monotonic()

    register_exception_handlers(app, settings)

    # Innermost first; CORS wraps both so throttled and failed responses keep CORS headers
    app.middleware("http")(catch_unhandled_errors)
    app.middleware("http")(global_rate_limit)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # API routes
    app.include_router(health.router, prefix="/api", tags=["Health"])
    app.include_router(contact.router, prefix="/api", tags=["Contact"])
    app.include_router(stats.router, prefix="/api", tags=["Stats"])
    app.include_router(admin.router, prefix="/api", tags=["Admin"])

    return app


# Application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=_settings.port,
        reload=_settings.is_development,
    )
