"""Domain Layer 단위 테스트."""

from __future__ import annotations

from sensor_api.domain.entities import Sensor
from sensor_api.domain.exceptions import (
    DomainError,
    ResourceNotFoundError,
    SensorAlreadyExistsError,
)


class TestSensor:
    """Sensor Entity 테스트."""

    def test_defaults(self) -> None:
        """태그와 id 기본값."""
        sensor = Sensor(name="s1", lat=1.0, lon=2.0)
        assert sensor.tags == []
        assert sensor.id is None

    def test_out_of_range_coordinates_accepted(self) -> None:
        """범위 밖 좌표도 그대로 보존."""
        sensor = Sensor(name="odd", lat=123.0, lon=-540.5)
        assert sensor.lat == 123.0
        assert sensor.lon == -540.5


class TestExceptions:
    """도메인 예외 테스트."""

    def test_resource_not_found_message(self) -> None:
        """리소스 타입과 식별자가 메시지에 포함."""
        exc = ResourceNotFoundError("abc123")
        assert exc.message == "no sensor resource exists: abc123"
        assert exc.identifier == "abc123"
        assert exc.resource_type == "sensor"
        assert isinstance(exc, DomainError)

    def test_resource_not_found_custom_type(self) -> None:
        """다른 리소스 타입."""
        exc = ResourceNotFoundError("t-1", resource_type="tag")
        assert str(exc) == "no tag resource exists: t-1"

    def test_sensor_already_exists(self) -> None:
        """중복 이름 예외."""
        exc = SensorAlreadyExistsError("abc123")
        assert exc.name == "abc123"
        assert "abc123" in exc.message
