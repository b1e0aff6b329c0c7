"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - owner_principal is fixed for the process lifetime (get_settings() is cached)
    - Defaults provided for all settings: works out-of-the-box with a local database

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Owner comes from configuration only, never from a stored snapshot
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Ledger
    owner_principal: str = "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"
    ledger_key: str = "default"
    genesis_block_height: int = 0
    snapshot_persistence: bool = True

    @field_validator("owner_principal")
    @classmethod
    def require_owner(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("owner_principal cannot be empty")
        return v

    # Database
    database_url: str = (
        "postgresql+asyncpg://infraopt:infraopt@db:5432/infraopt"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
