"""Sensor API - FastAPI application entry point."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from sensor_api.infrastructure.persistence_postgres import init_schema
from sensor_api.presentation.http.controllers import health_router, sensors_router
from sensor_api.presentation.http.errors import register_exception_handlers
from sensor_api.setup.config import get_settings
from sensor_api.setup.database import dispose_engine, get_engine
from sensor_api.setup.dependencies import close_geocoder
from sensor_api.setup.logging import setup_logging

logger = logging.getLogger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """애플리케이션 라이프사이클 관리."""
    setup_logging(settings.log_level, settings.service_name)
    logger.info(
        f"Starting {settings.service_name}",
        extra={"environment": settings.environment, "store_backend": settings.store_backend},
    )

    if settings.store_backend == "postgres" and settings.auto_create_schema:
        await init_schema(get_engine())

    yield

    logger.info(f"Shutting down {settings.service_name}")
    await close_geocoder()
    await dispose_engine()


def create_app() -> FastAPI:
    """FastAPI 애플리케이션을 생성합니다."""
    app = FastAPI(
        title="Sensor API",
        description="Named sensor locations with nearest-first proximity search",
        version="1.0.0",
        lifespan=lifespan,
    )

    register_exception_handlers(app)

    # 라우터 등록
    app.include_router(health_router)
    app.include_router(sensors_router)

    return app


app = create_app()


def run() -> None:
    """uvicorn으로 서버를 실행합니다."""
    import uvicorn

    uvicorn.run(
        "sensor_api.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.environment == "development",
    )


if __name__ == "__main__":
    run()
