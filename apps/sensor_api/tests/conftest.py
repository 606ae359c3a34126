"""Test fixtures for sensor api tests."""

from __future__ import annotations

import os
from unittest.mock import AsyncMock, MagicMock

import pytest

# Settings are cached on first import; pin the backend before that happens.
os.environ.setdefault("SENSOR_API_STORE_BACKEND", "memory")
os.environ.pop("SENSOR_API_MAPBOX_ACCESS_TOKEN", None)

from sensor_api.domain.entities import Sensor  # noqa: E402
from sensor_api.infrastructure.persistence_memory import MemorySensorStore  # noqa: E402


@pytest.fixture(autouse=True)
def reset_global_state():
    """모든 테스트 전후로 싱글톤/의존성 오버라이드를 리셋합니다."""
    from sensor_api.main import app
    from sensor_api.setup import dependencies

    dependencies._memory_store = None
    dependencies._geocoder = None
    app.dependency_overrides.clear()

    yield

    dependencies._memory_store = None
    dependencies._geocoder = None
    app.dependency_overrides.clear()


@pytest.fixture
def memory_store() -> MemorySensorStore:
    """빈 메모리 저장소."""
    return MemorySensorStore()


@pytest.fixture
def sample_sensor() -> Sensor:
    """테스트용 센서."""
    return Sensor(
        name="abc123",
        lat=44.916241209323736,
        lon=-93.21112681214602,
        tags=["x", "y", "z"],
    )


@pytest.fixture
def twin_cities_sensors() -> list[Sensor]:
    """St. Paul, Minneapolis (100km 이내), Chicago (100km 밖)."""
    return [
        Sensor(name="st-paul", lat=44.9559, lon=-93.0984, tags=["capitol"]),
        Sensor(name="minneapolis", lat=44.9762, lon=-93.2736, tags=[]),
        Sensor(name="chicago", lat=41.8695, lon=-87.6806, tags=["far", "away"]),
    ]


@pytest.fixture
def mock_finder() -> AsyncMock:
    """SensorFinder mock."""
    finder = AsyncMock()
    finder.find_closest = AsyncMock(return_value=[])
    return finder


@pytest.fixture
def mock_geocoder() -> AsyncMock:
    """Geocoder mock."""
    geocoder = AsyncMock()
    geocoder.geocode = AsyncMock(return_value=(44.9778, -93.265))
    return geocoder


@pytest.fixture
def mock_session() -> AsyncMock:
    """AsyncSession mock. execute() returns a result whose scalar accessors give id 7."""
    result = MagicMock()
    result.scalar_one.return_value = 7
    result.scalar_one_or_none.return_value = 7
    result.one_or_none.return_value = None
    result.all.return_value = []

    session = AsyncMock()
    session.execute = AsyncMock(return_value=result)
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    return session
