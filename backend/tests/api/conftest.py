"""API test fixtures: FastAPI app over the per-test in-memory database.

Invariants:
    - get_db overridden so routes share the test engine
    - db_manager patched: the readiness probe uses it directly
    - Lifespan does not run under ASGITransport; routes bootstrap the
      default group lazily
"""

import pytest
from httpx import ASGITransport, AsyncClient

from workhours.infrastructure.database import get_db, DatabaseSessionManager
import workhours.infrastructure.database as db_module
from workhours.main import app


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def group_id(client):
    """Id of a freshly created "Eng" group."""
    res = await client.post("/api/v1/groups", json={"name": "Eng"})
    assert res.status_code == 201
    return res.json()["id"]
