"""Application configuration for the property management API."""
from __future__ import annotations

import json
from functools import lru_cache
from typing import Annotated

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    app_env: str = Field(default="development")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=10000)
    log_level: str = Field(default="INFO")

    database_url: str = Field(
        default="sqlite+aiosqlite:///./property_manager.db",
        validation_alias=AliasChoices("database_url", "db_connection_string"),
    )
    database_ssl_required: bool = Field(default=False)
    db_pool_size: int = Field(default=5, ge=1)
    db_max_overflow: int = Field(default=0, ge=0)
    db_pool_timeout: float = Field(default=30.0, gt=0)

    cors_allow_origins: Annotated[list[str], NoDecode] = Field(default_factory=lambda: [
        "http://localhost:3000",
        "https://grokpmfrontend.onrender.com",
    ])

    stripe_secret_key: str = Field(default="")
    seed_on_startup: bool = Field(default=True)

    @field_validator("cors_allow_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: object) -> object:
        """Allow comma-separated or JSON-list env values for CORS origins."""

        if isinstance(value, str):
            stripped = value.strip()
            if stripped.startswith("["):
                return json.loads(stripped)
            return [item.strip() for item in stripped.split(",") if item.strip()]
        return value

    @field_validator("database_url", mode="after")
    @classmethod
    def _use_async_driver(cls, value: str) -> str:
        """Point bare PostgreSQL URLs at the asyncpg driver."""

        for prefix in ("postgres://", "postgresql://"):
            if value.startswith(prefix):
                return "postgresql+asyncpg://" + value[len(prefix):]
        return value

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()


settings = get_settings()
