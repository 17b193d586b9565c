"""Run the API with uvicorn: ``python -m property_manager``."""
from __future__ import annotations

import uvicorn

from .core.config import settings


def main() -> None:
    uvicorn.run(
        "property_manager.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
