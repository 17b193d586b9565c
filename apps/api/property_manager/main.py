"""FastAPI application for the property management API."""
from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response

from .core.config import settings
from .core.error_handlers import register_error_handlers
from .core.logging_config import configure_logging
from .db.session import SessionLocal, create_schema
from .routers import contacts, ledger, media, portfolios, properties, subscriptions, units
from .services.seed import seed_database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    configure_logging(settings.log_level)
    logger.info("Starting property manager API (%s)", settings.app_env)
    await create_schema()
    if settings.seed_on_startup:
        async with SessionLocal() as session:
            await seed_database(session)
    yield
    logger.info("Property manager API stopped")


app = FastAPI(title="Property Manager API", version="0.1.0", lifespan=lifespan)

if settings.cors_allow_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

register_error_handlers(app)

app.include_router(properties.router, prefix="/api/properties", tags=["properties"])
app.include_router(units.router, prefix="/api", tags=["units"])
app.include_router(contacts.router, prefix="/api", tags=["contacts"])
app.include_router(ledger.router, prefix="/api", tags=["ledger"])
app.include_router(media.router, prefix="/api", tags=["media"])
app.include_router(subscriptions.router, prefix="/api", tags=["subscriptions"])
app.include_router(portfolios.router, prefix="/api/portfolios", tags=["portfolios"])


@app.get("/api/health", tags=["meta"])
async def health() -> dict[str, str]:
    """Simple liveness probe."""

    return {"status": "ok"}


@app.head("/api/health", tags=["meta"])
async def health_head() -> Response:
    """Allow HEAD for uptime monitors that only need the status code."""

    return Response(status_code=200)
