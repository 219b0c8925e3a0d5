"""Settings: database URL normalization and SERVER_ADDR parsing."""

import pytest

from workhours.config import Settings


def _settings(**overrides):
    return Settings(_env_file=None, **overrides)


def test_postgres_url_gets_async_driver():
    s = _settings(database_url="postgresql://u:p@db:5432/hours")
    assert s.database_url == "postgresql+asyncpg://u:p@db:5432/hours"


def test_sqlite_url_unchanged():
    s = _settings(database_url="sqlite+aiosqlite:///./hours.db")
    assert s.database_url == "sqlite+aiosqlite:///./hours.db"


@pytest.mark.parametrize("addr,expected", [
    ("0.0.0.0:3000", ("0.0.0.0", 3000)),
    ("127.0.0.1:8080", ("127.0.0.1", 8080)),
    (":3000", ("0.0.0.0", 3000)),
])
def test_bind_address(addr, expected):
    assert _settings(server_addr=addr).bind_address() == expected


@pytest.mark.parametrize("addr", ["localhost", "localhost:http", ""])
def test_bind_address_rejects_missing_port(addr):
    with pytest.raises(ValueError):
        _settings(server_addr=addr).bind_address()
