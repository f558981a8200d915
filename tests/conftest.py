"""Pytest configuration and fixtures for clinic-portal.

Env is set before clinic_portal.main is imported: settings are cached on
first use and the app is built at import time. HTTP tests run against
clinic_portal.main:app without a database; readers and the caller are
injected through app.dependency_overrides.
"""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
# Hermetic: no test talks to a real database.
os.environ["DATABASE_URL"] = ""
os.environ["SEARCH_RATE_LIMIT"] = "1000/minute"
os.environ["TELEMETRY_ENABLED"] = "false"

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from clinic_portal.application.dtos.caller import AuthorizationContext  # noqa: E402
from clinic_portal.core.config import get_settings  # noqa: E402

get_settings.cache_clear()

from clinic_portal.main import app  # noqa: E402


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def overrides():
    """app.dependency_overrides, cleared after the test."""
    yield app.dependency_overrides
    app.dependency_overrides.clear()


@pytest.fixture
def caller() -> AuthorizationContext:
    """Plain employee: no admin rights, no training flag, all role groups visible."""
    return AuthorizationContext(employee_id=1)


@pytest.fixture
def admin_caller() -> AuthorizationContext:
    return AuthorizationContext(employee_id=99, is_admin=True)
