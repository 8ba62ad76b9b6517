"""Shared fixtures for the founding member spots API tests."""

import pytest
from fastapi.testclient import TestClient

from founders_api.main import create_app


class FakeTenantStore:
    """In-memory stand-in for TenantStore.

    `founding` and `non_demo` are either a count (int or None) or an
    exception instance to raise.
    """

    def __init__(self, founding=0, non_demo=0, healthy=True):
        self.founding = founding
        self.non_demo = non_demo
        self.healthy = healthy
        self.calls = []
        self.closed = False

    async def count_founding_members(self):
        self.calls.append("founding")
        if isinstance(self.founding, Exception):
            raise self.founding
        return self.founding

    async def count_non_demo_tenants(self):
        self.calls.append("non_demo")
        if isinstance(self.non_demo, Exception):
            raise self.non_demo
        return self.non_demo

    async def health_check(self):
        return self.healthy

    async def aclose(self):
        self.closed = True


@pytest.fixture
def fake_store():
    return FakeTenantStore()


@pytest.fixture
def client(fake_store):
    """TestClient over an app wired to the fake store."""
    app = create_app(store=fake_store, limit=100)
    return TestClient(app)
