"""Initialize the PostGIS extension and sensor tables."""

from __future__ import annotations

import asyncio
import logging
import sys

from sqlalchemy.ext.asyncio import create_async_engine

from sensor_api.infrastructure.persistence_postgres import init_schema
from sensor_api.setup.config import get_settings
from sensor_api.setup.logging import setup_logging

logger = logging.getLogger(__name__)


async def init_db() -> int:
    """Create extension and tables; returns a process exit code."""
    settings = get_settings()
    target = settings.database_url.split("@")[1] if "@" in settings.database_url else "database"
    logger.info("Connecting to database", extra={"target": target})

    engine = create_async_engine(settings.database_url, echo=False)
    try:
        await init_schema(engine)
        logger.info("Database initialization completed")
        return 0
    except Exception:  # pragma: no cover - diagnostic output
        logger.exception("Error initializing database")
        return 1
    finally:
        await engine.dispose()


def main() -> None:
    """Entry point for database initialization."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.service_name)
    sys.exit(asyncio.run(init_db()))


if __name__ == "__main__":
    main()
