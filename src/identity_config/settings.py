"""Identity store settings loaded from environment variables.

Configuration file discovery (in priority order):
1. OS environment variables (always highest priority)
2. IDENTITY_ENV_FILE environment variable (path to .env file)
3. config/.env.dev - local development
4. config/.env - production/Docker

Uses pydantic-settings for automatic type coercion and validation.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, SecretStr, computed_field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _find_project_root() -> Path:
    """Find the project root directory."""
    current = Path(__file__).resolve().parent

    for parent in [current, *current.parents]:
        if (parent / "config").is_dir():
            return parent
        if (parent / ".git").is_dir():
            return parent
        if parent == Path("/app"):
            return parent

    return Path(__file__).resolve().parents[2]


def get_config_dir() -> Path:
    """Get the config directory path."""
    return _find_project_root() / "config"


def _resolve_env_file_path() -> Path | None:
    """Resolve the .env file path.

    Priority:
    1. IDENTITY_ENV_FILE env var (full path)
    2. config/.env.dev (local development)
    3. config/.env (production)
    """
    env_file_path = os.environ.get("IDENTITY_ENV_FILE")
    if env_file_path:
        path = Path(env_file_path)
        if not path.is_absolute():
            path = _find_project_root() / path
        if path.exists():
            return path

    config_dir = get_config_dir()

    dev_env = config_dir / ".env.dev"
    if dev_env.exists():
        return dev_env

    prod_env = config_dir / ".env"
    if prod_env.exists():
        return prod_env

    return None


class Settings(BaseSettings):
    """Identity store configuration loaded from environment variables.

    Values are loaded from:
    1. OS environment variables (highest priority)
    2. .env file (config/.env.dev or config/.env)
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Database
    database_driver: Literal["sqlite", "postgresql"] = "sqlite"
    database_echo: bool = False
    sqlite_path: str = "data/identity.db"

    # PostgreSQL (POSTGRES_ prefix)
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_password: SecretStr | None = None
    postgres_db: str = "identity"

    # Identity schema (IDENTITY_ prefix)
    identity_key_type: Literal["uuid", "string", "int"] = "uuid"
    identity_require_unique_email: bool = True
    identity_max_key_length: int = Field(default=128, ge=0)  # 0 = unbounded

    # Logging (LOG_ prefix)
    log_level: str = "INFO"

    @model_validator(mode="after")
    def _require_postgres_password(self) -> Settings:
        if self.database_driver == "postgresql" and self.postgres_password is None:
            msg = "POSTGRES_PASSWORD must be set when DATABASE_DRIVER=postgresql"
            raise ValueError(msg)
        return self

    @computed_field  # type: ignore[prop-decorator]
    @property
    def database_url(self) -> str:
        """Construct the database URL from components."""
        if self.database_driver == "sqlite":
            return f"sqlite+aiosqlite:///{self.sqlite_path}"

        password = self.postgres_password.get_secret_value()  # type: ignore[union-attr]
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @property
    def max_key_length(self) -> int | None:
        """Length limit for login and token key columns (None = unbounded)."""
        return self.identity_max_key_length or None


@lru_cache()
def get_settings() -> Settings:
    """Return cached identity store settings."""
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
