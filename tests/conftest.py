from contextlib import asynccontextmanager
from unittest.mock import AsyncMock

import pytest
from asgi_lifespan import LifespanManager
from httpx import ASGITransport, AsyncClient

from src.fleet_readiness.database.dependencies import verify_database
from src.fleet_readiness.main import app
from tests.mocks.config_mocks import mock_get_settings  # noqa: F401
from tests.mocks.fleet_mocks import FakeFleetRepository, make_truck

# -----------------------------------------------------------------------------
# FASTAPI CLIENT FOR API TESTING
# -----------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def reset_openapi_schema():
    app.openapi_schema = None
    yield
    app.openapi_schema = None


@pytest.fixture(scope="function")
async def async_client():
    """
    Provide an async client for FastAPI test with lifespan events.
    """

    @asynccontextmanager
    async def test_lifespan(_):
        yield

    app.router.lifespan_context = test_lifespan
    async with LifespanManager(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client


@pytest.fixture
def db_session():
    """A session that is never touched: repositories are faked or mocked."""
    session = AsyncMock()
    app.dependency_overrides[verify_database] = lambda: session
    yield session
    app.dependency_overrides.pop(verify_database, None)


# -----------------------------------------------------------------------------
# FLEET DATA
# -----------------------------------------------------------------------------


@pytest.fixture
def fleet_repo():
    return FakeFleetRepository()


@pytest.fixture
def three_truck_fleet(fleet_repo):
    for truck_id, unit in (("truck_a", "101"), ("truck_b", "102"), ("truck_c", "103")):
        fleet_repo.add_truck("company_123", make_truck(truck_id, unit))
    return fleet_repo
