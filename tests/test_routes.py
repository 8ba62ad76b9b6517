"""Tests for the HTTP routes."""

import httpx
import pytest
from fastapi.testclient import TestClient

from founders_api.core.config import SupabaseConfig, settings
from founders_api.core.errors import (
    StoreAuthError,
    StoreConnectionError,
    StoreSchemaError,
)
from founders_api.main import create_app
from founders_api.storage.tenants import TenantStore


class TestSpotsEndpoint:
    """GET /api/founding-member/spots"""

    URL = "/api/founding-member/spots"

    @pytest.mark.parametrize(
        "count, expected",
        [(37, 63), (0, 100), (100, 0), (99, 1), (150, 0)],
    )
    def test_remaining_spots(self, client, fake_store, count, expected):
        fake_store.founding = count
        response = client.get(self.URL)
        assert response.status_code == 200
        assert response.json() == {"spotsRemaining": expected}

    def test_null_count_means_no_spots_taken(self, client, fake_store):
        fake_store.founding = None
        response = client.get(self.URL)
        assert response.status_code == 200
        assert response.json() == {"spotsRemaining": 100}

    def test_auth_error_returns_fallback(self, client, fake_store):
        fake_store.founding = StoreAuthError("Store returned status 401", status_code=401)
        response = client.get(self.URL)
        assert response.status_code == 200
        assert response.json() == {"spotsRemaining": 100, "error": "Count failed"}

    def test_network_error_returns_fallback(self, client, fake_store):
        fake_store.founding = StoreConnectionError("Timeout")
        response = client.get(self.URL)
        assert response.status_code == 200
        assert response.json() == {"spotsRemaining": 100, "error": "Count failed"}

    def test_unexpected_exception_returns_fallback(self, client, fake_store):
        fake_store.founding = RuntimeError("boom")
        response = client.get(self.URL)
        assert response.status_code == 200
        assert response.json() == {"spotsRemaining": 100, "error": "Count failed"}

    def test_repeated_calls_are_identical(self, client, fake_store):
        fake_store.founding = 42
        first = client.get(self.URL)
        second = client.get(self.URL)
        assert first.json() == second.json() == {"spotsRemaining": 58}
        assert fake_store.calls == ["founding", "founding"]

    def test_response_is_not_cached(self, client):
        response = client.get(self.URL)
        assert response.headers["cache-control"] == "no-store"

    def test_only_one_query_per_request(self, client, fake_store):
        client.get(self.URL)
        assert fake_store.calls == ["founding"]

    def test_failure_ignores_custom_limit(self, fake_store):
        fake_store.founding = StoreAuthError("denied", status_code=401)
        client = TestClient(create_app(store=fake_store, limit=10))
        response = client.get(self.URL)
        assert response.status_code == 200
        assert response.json() == {"spotsRemaining": 100, "error": "Count failed"}

    def test_credential_rejected_by_store(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(401))
        store = TenantStore(
            "https://example.supabase.co",
            "revoked-key",
            client=httpx.AsyncClient(transport=transport)
        )
        client = TestClient(create_app(store=store))
        response = client.get(self.URL)
        assert response.status_code == 200
        assert response.json() == {"spotsRemaining": 100, "error": "Count failed"}


class TestAvailabilityEndpoint:
    """GET /api/founding-member/availability"""

    URL = "/api/founding-member/availability"

    def test_availability(self, client, fake_store):
        fake_store.founding = 37
        response = client.get(self.URL)
        assert response.status_code == 200
        assert response.json() == {
            "isAvailable": True,
            "remainingSpots": 63,
            "currentFoundingMembers": 37,
            "limit": 100,
        }

    def test_sold_out(self, client, fake_store):
        fake_store.founding = 120
        body = client.get(self.URL).json()
        assert body["isAvailable"] is False
        assert body["remainingSpots"] == 0
        assert body["currentFoundingMembers"] == 120

    def test_missing_column_falls_back_to_non_demo_count(self, client, fake_store):
        fake_store.founding = StoreSchemaError("Store returned status 400", status_code=400)
        fake_store.non_demo = 12
        body = client.get(self.URL).json()
        assert body["currentFoundingMembers"] == 12
        assert body["remainingSpots"] == 88
        assert fake_store.calls == ["founding", "non_demo"]

    def test_error_returns_500(self, client, fake_store):
        fake_store.founding = StoreConnectionError("Timeout")
        response = client.get(self.URL)
        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "Failed to check founding member availability"
        assert "timestamp" in body


class TestHealthAndRoot:
    """GET /health and GET /"""

    def test_healthy(self, client):
        body = client.get("/health").json()
        assert body["status"] == "healthy"
        assert body["store_connected"] is True

    def test_degraded(self, client, fake_store):
        fake_store.healthy = False
        body = client.get("/health").json()
        assert body["status"] == "degraded"
        assert body["store_connected"] is False

    def test_root_lists_endpoints(self, client):
        body = client.get("/").json()
        assert body["endpoints"]["spots_remaining"] == "GET /api/founding-member/spots"


class TestLifespan:
    """App startup and shutdown."""

    def test_store_closed_on_shutdown(self, fake_store):
        app = create_app(store=fake_store)
        with TestClient(app) as client:
            assert client.get("/api/founding-member/spots").status_code == 200
            assert fake_store.closed is False
        assert fake_store.closed is True

    def test_custom_limit(self, fake_store):
        fake_store.founding = 3
        client = TestClient(create_app(store=fake_store, limit=10))
        assert client.get("/api/founding-member/spots").json() == {"spotsRemaining": 7}

    def test_negative_limit_rejected(self, fake_store):
        with pytest.raises(ValueError):
            create_app(store=fake_store, limit=-1)

    def test_default_store_built_on_startup(self, monkeypatch):
        monkeypatch.setattr(settings, "supabase", SupabaseConfig(url="", service_role_key=""))
        app = create_app()
        assert app.state.service is None

        with TestClient(app) as client:
            assert isinstance(app.state.service.store, TenantStore)
            response = client.get("/api/founding-member/spots")
            assert response.json() == {"spotsRemaining": 100, "error": "Count failed"}
        assert app.state.service.store._client.is_closed is True

    def test_module_app_has_no_store_until_startup(self):
        from founders_api.main import app

        assert app.state.service is None
