"""
Fixtures for integration tests.

Provides:
- Test client for the FastAPI app with a fresh credit line registry
- Settings overrides for admin authentication
- Helpers for admin headers
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from creditra.main import app
from creditra.core.config import Settings, get_settings
from creditra.core.dependencies import get_credit_line_repository
from creditra.infrastructure.repositories import InMemoryCreditLineRepository
from creditra.presentation.middleware import ADMIN_KEY_HEADER

ADMIN_KEY = "test-secret"


# =============================================================================
# Registry Fixtures
# =============================================================================

@pytest.fixture
def repository() -> InMemoryCreditLineRepository:
    """A fresh, empty registry per test."""
    return InMemoryCreditLineRepository()


@pytest.fixture
def admin_headers() -> dict:
    return {ADMIN_KEY_HEADER: ADMIN_KEY}


# =============================================================================
# App Client Fixtures
# =============================================================================

def _override(repository: InMemoryCreditLineRepository, admin_api_key: str | None) -> None:
    app.dependency_overrides[get_credit_line_repository] = lambda: repository
    app.dependency_overrides[get_settings] = lambda: Settings(admin_api_key=admin_api_key)


@pytest_asyncio.fixture
async def client(
    repository: InMemoryCreditLineRepository,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client with mocked dependencies.

    This client:
    - Uses an isolated in-memory registry
    - Has admin authentication configured with ADMIN_KEY
    """
    _override(repository, ADMIN_KEY)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client_without_admin_key(
    repository: InMemoryCreditLineRepository,
) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client where no admin key is configured."""
    _override(repository, None)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
