"""Create the database schema and seed sample data for development."""
from __future__ import annotations

import asyncio
import logging

from property_manager.core.config import settings
from property_manager.core.logging_config import configure_logging
from property_manager.db.session import SessionLocal, create_schema, engine
from property_manager.services.seed import seed_database

logger = logging.getLogger("bootstrap_db")


async def main() -> None:
    configure_logging(settings.log_level)
    await create_schema()
    async with SessionLocal() as session:
        seeded = await seed_database(session)
    await engine.dispose()
    if seeded:
        logger.info("Database schema ensured and sample data seeded: %s", ", ".join(seeded))
    else:
        logger.info("Database schema ensured; sample data already present.")


if __name__ == "__main__":
    asyncio.run(main())
