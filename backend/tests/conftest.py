"""Root conftest: environment defaults plus DB, store and clock fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - "Local" time is UTC in tests so day boundaries are deterministic
    - FakeClock pins "now" for lifecycle transitions
"""

import os

import pytest

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOCAL_TIMEZONE", "UTC")
os.environ.setdefault("LOG_FORMAT", "text")

from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)

from workhours.db.base import Base  # noqa: E402
import workhours.models  # noqa: E402,F401
from workhours.services.round_store import RoundStore  # noqa: E402

from tests.fake_clock import FakeClock  # noqa: E402


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def store(test_db):
    return RoundStore(test_db)


@pytest.fixture
async def group_a(store):
    return await store.create_group("A")


@pytest.fixture
async def group_b(store):
    return await store.create_group("B")
