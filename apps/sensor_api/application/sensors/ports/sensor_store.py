"""Sensor Store Ports."""

from __future__ import annotations

from abc import ABC, abstractmethod

from sensor_api.domain.entities import Sensor


class SensorStore(ABC):
    """센서 저장소 포트.

    Infrastructure Layer에서 구현합니다. Every implementation raises
    ``ResourceNotFoundError`` from ``update_by_name`` for a missing name and
    ``SensorStoreError`` for backend failures.
    """

    backend_name: str = "sensor"

    @abstractmethod
    async def create(self, sensor: Sensor) -> Sensor:
        """센서를 저장합니다.

        Args:
            sensor: 저장할 센서 (id는 무시됨)

        Returns:
            저장된 센서 (백엔드가 id를 부여하면 포함)

        Raises:
            SensorAlreadyExistsError: 같은 이름이 이미 존재할 때
        """
        ...

    @abstractmethod
    async def get_by_name(self, name: str) -> Sensor | None:
        """이름으로 센서를 조회합니다.

        Returns:
            Sensor 또는 None (미발견 시)
        """
        ...

    @abstractmethod
    async def update_by_name(self, name: str, sensor: Sensor) -> Sensor:
        """이름으로 지정한 센서를 새 값으로 교체합니다.

        The replacement may carry a different name, which renames the sensor.

        Raises:
            ResourceNotFoundError: ``name``에 해당하는 센서가 없을 때
        """
        ...


class SensorFinder(ABC):
    """근접 검색 포트.

    Optional capability: only stores backed by a geospatial index provide it.
    """

    @abstractmethod
    async def find_closest(
        self,
        lat: float,
        lon: float,
        radius_meters: int,
    ) -> list[Sensor]:
        """반경 내 센서를 가까운 순으로 조회합니다.

        Args:
            lat: 위도
            lon: 경도
            radius_meters: 반경 (미터)

        Returns:
            거리 오름차순 센서 목록 (없으면 빈 리스트)
        """
        ...
