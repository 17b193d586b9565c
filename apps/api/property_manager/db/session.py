"""Database engine, session management and schema creation."""
from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from ..core.config import Settings, settings
from ..models import Base

logger = logging.getLogger(__name__)


def engine_options(config: Settings) -> dict[str, Any]:
    """Return ``create_async_engine`` keyword arguments for the configured database."""

    options: dict[str, Any] = {"echo": False, "pool_pre_ping": True}
    if config.is_sqlite:
        return options

    # Requests queue for up to pool_timeout seconds once the pool is exhausted.
    options.update(
        pool_size=config.db_pool_size,
        max_overflow=config.db_max_overflow,
        pool_timeout=config.db_pool_timeout,
    )
    if config.database_ssl_required:
        options["connect_args"] = {"ssl": True}
    return options


engine = create_async_engine(settings.database_url, **engine_options(settings))
SessionLocal = async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency to provide an async session."""

    async with SessionLocal() as session:
        yield session


async def create_schema(bind: AsyncEngine | None = None) -> None:
    """Create any missing tables. Existing tables and rows are left alone."""

    target = bind or engine
    async with target.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema ensured on %s", target.url.render_as_string(hide_password=True))
