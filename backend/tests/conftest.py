"""
Pytest configuration and fixtures.

This file is automatically discovered by pytest and provides
shared fixtures for all test modules.

API tests run against the real FastAPI app with the Supabase-backed stores
replaced by in-memory fakes through ``app.dependency_overrides``.

References:
-----------
- Pytest Fixtures: https://docs.pytest.org/en/stable/fixture.html
- FastAPI Testing: https://fastapi.tiangolo.com/advanced/testing-dependencies/
"""

import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, AsyncGenerator, Dict, List, Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from streamvault.api.routes.advertisements import get_advertisement_service
from streamvault.core.exceptions import StoreError
from streamvault.db.deps import get_content_store
from streamvault.main import app
from streamvault.services.advertisements import AdvertisementRequestService


# ================================
# Fakes
# ================================

class FrozenClock:
    """A clock that only moves when told to."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


class InMemoryAdvertisementStore:
    """Stands in for AdvertisementRequestStore; rows live in a list."""

    def __init__(self, clock: FrozenClock):
        self.clock = clock
        self.rows: List[Dict[str, Any]] = []
        self.fail_with: Optional[Exception] = None

    def _check(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with

    async def list_all(self) -> List[Dict[str, Any]]:
        self._check()
        return sorted(self.rows, key=lambda row: row["created_at"], reverse=True)

    async def insert(self, row: Dict[str, Any]) -> Dict[str, Any]:
        self._check()
        now = self.clock()
        stored = {
            "id": str(uuid.uuid4()),
            **row,
            "created_at": now,
            "updated_at": now,
        }
        self.rows.append(stored)
        return stored

    async def delete(self, request_id: str) -> None:
        self._check()
        self.rows = [row for row in self.rows if row["id"] != request_id]

    async def exists_since(self, user_ip: str, since: datetime) -> bool:
        self._check()
        return any(
            row["user_ip"] == user_ip and row["created_at"] >= since
            for row in self.rows
        )


class InMemoryContentStore:
    """Stands in for ContentStore."""

    def __init__(self):
        self.episodes: Dict[str, Dict[str, Any]] = {}
        self.fail_with: Optional[Exception] = None

    async def get_episode(self, episode_id: Any) -> Optional[Dict[str, Any]]:
        if self.fail_with is not None:
            raise self.fail_with
        return self.episodes.get(str(episode_id))


# ================================
# Store Fixtures
# ================================

@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock(datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def ad_store(clock: FrozenClock) -> InMemoryAdvertisementStore:
    return InMemoryAdvertisementStore(clock)


@pytest.fixture
def content_store() -> InMemoryContentStore:
    return InMemoryContentStore()


@pytest.fixture
def ad_service(ad_store: InMemoryAdvertisementStore, clock: FrozenClock) -> AdvertisementRequestService:
    return AdvertisementRequestService(ad_store, clock=clock)


@pytest.fixture
def store_error() -> StoreError:
    return StoreError("Supabase returned 503 for advertisement_requests")


# ================================
# FastAPI Client Fixtures
# ================================

@pytest_asyncio.fixture
async def client(
    ad_service: AdvertisementRequestService,
    content_store: InMemoryContentStore,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create an async HTTP client for testing FastAPI endpoints.

    Usage:
        async def test_something(client: AsyncClient):
            response = await client.get("/api/advertisement-requests")
            assert response.status_code == 200
    """
    app.dependency_overrides[get_advertisement_service] = lambda: ad_service
    app.dependency_overrides[get_content_store] = lambda: content_store

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    # Clean up
    app.dependency_overrides.clear()


# ================================
# Content Fixtures
# ================================

@pytest.fixture
def make_movie():
    """Factory for raw movie records as the catalog returns them."""

    def _make(
        id: int = 1,
        title: str = "Movie",
        created_at: Optional[str] = "2024-01-01T00:00:00Z",
        feature_in: Optional[List[str]] = None,
        **movie_fields,
    ) -> Dict[str, Any]:
        return {
            "id": id,
            "title": title,
            "description": f"{title} envelope description",
            "created_at": created_at,
            "content_type": "Movie",
            "movie": {"feature_in": feature_in, **movie_fields},
        }

    return _make


@pytest.fixture
def make_web_series():
    """Factory for raw single-season web-series records."""

    def _make(
        id: int = 100,
        title: str = "Series",
        created_at: Optional[str] = "2024-01-01T00:00:00Z",
        feature_in: Optional[List[str]] = None,
        episodes: Optional[List[Dict[str, Any]]] = None,
        **season_fields,
    ) -> Dict[str, Any]:
        return {
            "id": id,
            "title": title,
            "description": f"{title} envelope description",
            "created_at": created_at,
            "content_type": "Web Series",
            "web_series": {
                "seasons": [
                    {"feature_in": feature_in, "episodes": episodes or [], **season_fields}
                ]
            },
        }

    return _make


# ================================
# Pytest Hooks
# ================================

def pytest_addoption(parser):
    """Add custom pytest options."""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run integration tests that require network access and a real Supabase project"
    )


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test (requires network and Supabase credentials)"
    )


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless --run-integration is given."""
    if config.getoption("--run-integration"):
        return
    skip_integration = pytest.mark.skip(reason="need --run-integration option to run")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)
