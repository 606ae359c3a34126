"""Dependency Injection for FastAPI."""

from __future__ import annotations

import logging
from typing import Annotated, AsyncIterator

from fastapi import Depends

from sensor_api.application.sensors import (
    CreateSensorCommand,
    FindClosestSensorsQuery,
    Geocoder,
    GetSensorQuery,
    SensorFinder,
    SensorStore,
    UpdateSensorCommand,
)
from sensor_api.infrastructure.persistence_memory import MemorySensorStore
from sensor_api.infrastructure.persistence_postgres import SqlaSensorStore
from sensor_api.setup.config import get_settings
from sensor_api.setup.database import get_session_factory

logger = logging.getLogger(__name__)

_memory_store: MemorySensorStore | None = None
_geocoder: Geocoder | None = None


def get_memory_store() -> MemorySensorStore:
    """프로세스 단위 메모리 저장소 싱글톤을 반환합니다."""
    global _memory_store  # noqa: PLW0603
    if _memory_store is None:
        _memory_store = MemorySensorStore()
        logger.info("In-memory sensor store created")
    return _memory_store


def get_geocoder() -> Geocoder | None:
    """Mapbox 지오코더 싱글톤을 반환합니다."""
    global _geocoder  # noqa: PLW0603
    if _geocoder is None:
        settings = get_settings()
        if settings.mapbox_access_token:
            from sensor_api.infrastructure.integrations.mapbox import MapboxGeocoder

            _geocoder = MapboxGeocoder(
                access_token=settings.mapbox_access_token,
                timeout=settings.mapbox_timeout,
            )
            logger.info("Mapbox geocoder created")
        else:
            logger.warning("SENSOR_API_MAPBOX_ACCESS_TOKEN not set, place name lookup disabled")
    return _geocoder


async def close_geocoder() -> None:
    """지오코더 리소스를 정리합니다."""
    global _geocoder  # noqa: PLW0603
    if _geocoder is not None:
        await _geocoder.close()
        _geocoder = None


async def get_sensor_store() -> AsyncIterator[SensorStore]:
    """설정된 백엔드의 SensorStore를 주입합니다.

    postgres 백엔드는 요청마다 세션을 열고 응답 후 닫습니다.
    """
    if get_settings().store_backend == "memory":
        yield get_memory_store()
        return

    async with get_session_factory()() as session:
        yield SqlaSensorStore(session)


async def get_create_sensor_command(
    store: Annotated[SensorStore, Depends(get_sensor_store)],
) -> CreateSensorCommand:
    """CreateSensorCommand를 주입합니다."""
    return CreateSensorCommand(store)


async def get_update_sensor_command(
    store: Annotated[SensorStore, Depends(get_sensor_store)],
) -> UpdateSensorCommand:
    """UpdateSensorCommand를 주입합니다."""
    return UpdateSensorCommand(store)


async def get_get_sensor_query(
    store: Annotated[SensorStore, Depends(get_sensor_store)],
) -> GetSensorQuery:
    """GetSensorQuery를 주입합니다."""
    return GetSensorQuery(store)


async def get_find_closest_query(
    store: Annotated[SensorStore, Depends(get_sensor_store)],
) -> FindClosestSensorsQuery:
    """FindClosestSensorsQuery를 주입합니다."""
    finder = store if isinstance(store, SensorFinder) else None
    return FindClosestSensorsQuery(
        finder=finder,
        geocoder=get_geocoder(),
        backend_name=store.backend_name,
    )
