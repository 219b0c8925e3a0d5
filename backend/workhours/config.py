"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): single instance per process
    - server_addr is the only network setting; "host:port" or ":port"
    - local_timezone decides what "today" means; unset = host local time

Design Decisions:
    - Defaults provided for every setting: a bare `python -m workhours` runs against
      a local SQLite file
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_HOST = "0.0.0.0"


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = "sqlite+aiosqlite:///./hours.db"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10
    database_create_schema: bool = True

    # Server
    server_addr: str = f"{DEFAULT_HOST}:3000"

    # Reporting
    local_timezone: str | None = None

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    def bind_address(self) -> tuple[str, int]:
        """Split server_addr into (host, port); an empty host binds all interfaces."""
        host, _, port = self.server_addr.rpartition(":")
        if not port.isdigit():
            raise ValueError(f"Invalid SERVER_ADDR '{self.server_addr}'")
        return host or DEFAULT_HOST, int(port)


@lru_cache
def get_settings() -> Settings:
    return Settings()
