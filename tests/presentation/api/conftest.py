"""Shared fixtures for API tests.

Apps are built through ``create_app`` with explicit settings and a
ServiceContainer of disabled/fake services, so tests never read the
environment's database or mail credentials.
"""

from typing import Callable, Optional

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app
from app.portfolio_contact.application.interfaces.contact_store import ContactStore
from app.portfolio_contact.application.interfaces.notifier import Notifier
from app.portfolio_contact.infrastructure.container import (
    ServiceContainer,
    build_rate_limiters,
)
from app.portfolio_contact.infrastructure.mail.email_notifier import DisabledNotifier
from app.portfolio_contact.infrastructure.persistence.contact_stores import (
    DisabledContactStore,
)

ADMIN_TOKEN = "test-admin-token"

ClientFactory = Callable[..., TestClient]


def make_settings(**overrides) -> Settings:
    values = {"admin_token": ADMIN_TOKEN}
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def make_client() -> ClientFactory:
    """Build a TestClient around an app with the given services."""

    def _make(
        contact_store: Optional[ContactStore] = None,
        notifier: Optional[Notifier] = None,
        raise_server_exceptions: bool = True,
        **setting_overrides,
    ) -> TestClient:
        settings = make_settings(**setting_overrides)
        global_limiter, contact_limiter = build_rate_limiters(settings)
        services = ServiceContainer(
            contact_store=contact_store or DisabledContactStore(),
            notifier=notifier or DisabledNotifier(),
            global_limiter=global_limiter,
            contact_limiter=contact_limiter,
        )
        app = create_app(settings=settings, services=services)
        return TestClient(app, raise_server_exceptions=raise_server_exceptions)

    return _make


@pytest.fixture
def client(make_client: ClientFactory) -> TestClient:
    """Client for an app with storage and email both disabled."""
    return make_client()
