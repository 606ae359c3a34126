"""Schema bootstrap for the sensor tables.

Creates missing objects only; there are no versioned migrations.
"""

from __future__ import annotations

import logging

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine

from sensor_api.infrastructure.persistence_postgres.constants import REQUIRED_EXTENSIONS
from sensor_api.infrastructure.persistence_postgres.tables import metadata

logger = logging.getLogger(__name__)


async def init_schema(engine: AsyncEngine) -> None:
    """PostGIS 확장과 센서 테이블을 생성합니다.

    Extensions are checked first so a non-superuser role can still run this
    against a database where an administrator pre-installed PostGIS.
    """
    async with engine.begin() as conn:
        for extension in REQUIRED_EXTENSIONS:
            result = await conn.execute(
                text("SELECT 1 FROM pg_extension WHERE extname = :ext_name"),
                {"ext_name": extension},
            )
            if result.scalar():
                continue

            try:
                await conn.execute(text(f"CREATE EXTENSION IF NOT EXISTS {extension}"))
            except Exception as e:
                raise RuntimeError(
                    f"Extension '{extension}' not found and cannot be created. "
                    "Install it with superuser privileges first."
                ) from e
            logger.info("Created database extension", extra={"extension": extension})

        await conn.run_sync(metadata.create_all)
    logger.info("Sensor schema ready", extra={"tables": sorted(metadata.tables)})
