"""Tests for /api/health, /api/stats, the not-found handler and app wiring."""

from unittest.mock import AsyncMock

from fastapi.testclient import TestClient

from app.portfolio_contact.application.exceptions import PersistenceError
from app.portfolio_contact.application.interfaces.contact_store import ContactStore


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/api/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "OK"
        assert "timestamp" in data
        assert data["uptime"] >= 0


class TestStats:
    def test_counts_stored_messages(self, make_client) -> None:
        store = AsyncMock(spec=ContactStore)
        store.available = True
        store.count.return_value = 12
        client = make_client(contact_store=store)

        response = client.get("/api/stats")

        assert response.status_code == 200
        data = response.json()
        assert data["totalVisits"] == 0
        assert data["totalMessages"] == 12
        assert "lastUpdated" in data

    def test_zero_without_store(self, client: TestClient) -> None:
        response = client.get("/api/stats")

        assert response.status_code == 200
        assert response.json()["totalMessages"] == 0

    def test_read_failure(self, make_client) -> None:
        store = AsyncMock(spec=ContactStore)
        store.available = True
        store.count.side_effect = PersistenceError("timeout")
        client = make_client(contact_store=store)

        response = client.get("/api/stats")

        assert response.status_code == 500
        assert response.json() == {"error": "Could not fetch stats"}


class TestNotFound:
    def test_unknown_path(self, client: TestClient) -> None:
        response = client.get("/api/nope?x=1")

        assert response.status_code == 404
        assert response.json() == {"error": "Route not found", "path": "/api/nope?x=1"}

    def test_unsupported_method_is_not_found(self, client: TestClient) -> None:
        response = client.get("/api/contact")

        assert response.status_code == 404
        assert response.json() == {"error": "Route not found", "path": "/api/contact"}


class TestAppWiring:
    def test_cors_allows_configured_frontend(self, make_client) -> None:
        client = make_client(frontend_url="https://portfolio.dev")

        response = client.options(
            "/api/contact",
            headers={
                "Origin": "https://portfolio.dev",
                "Access-Control-Request-Method": "POST",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "https://portfolio.dev"
        assert response.headers["access-control-allow-credentials"] == "true"

    def test_cors_ignores_other_origins(self, make_client) -> None:
        client = make_client(frontend_url="https://portfolio.dev")

        response = client.get("/api/health", headers={"Origin": "https://evil.test"})

        assert "access-control-allow-origin" not in response.headers

    def test_docs_only_in_development(self, make_client) -> None:
        dev = make_client(app_env="development")
        prod = make_client(app_env="production")

        assert dev.get("/api/docs").status_code == 200
        assert prod.get("/api/docs").status_code == 404

    def test_lifespan_runs_service_startup(self, make_client) -> None:
        store = AsyncMock(spec=ContactStore)
        store.available = False
        client = make_client(contact_store=store)

        with client:
            client.get("/api/health")

        store.initialize.assert_awaited_once()
        store.close.assert_awaited_once()
