"""Find Closest Sensors Query.

근접 센서 검색 Query(지휘자)입니다.
반경/위치 파싱을 Service에 위임하고, Port를 통해 저장소를 조회합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sensor_api.application.common.exceptions import ProximitySearchUnavailableError
from sensor_api.application.sensors.dto import ClosestSearchRequest
from sensor_api.application.sensors.services import parse_radius, resolve_location
from sensor_api.domain.entities import Sensor

if TYPE_CHECKING:
    from sensor_api.application.sensors.ports import Geocoder, SensorFinder

logger = logging.getLogger(__name__)


class FindClosestSensorsQuery:
    """근접 센서 검색 Query.

    Workflow:
        1. 반경 파싱 및 미터 변환 (Service)
        2. 위치 파싱, 필요 시 지오코딩 (Service / Port)
        3. 백엔드 지원 여부 확인
        4. 근접 검색 (Port)
    """

    def __init__(
        self,
        finder: "SensorFinder | None",
        geocoder: "Geocoder | None" = None,
        backend_name: str = "sensor",
    ) -> None:
        """Initialize.

        Args:
            finder: 근접 검색 Port (백엔드가 지원하지 않으면 None)
            geocoder: 지오코딩 Port (선택)
            backend_name: 오류 메시지에 쓰일 저장소 이름
        """
        self._finder = finder
        self._geocoder = geocoder
        self._backend_name = backend_name

    async def execute(self, request: ClosestSearchRequest) -> list[Sensor]:
        """반경 내 센서를 가까운 순으로 반환합니다."""
        radius_meters = parse_radius(request.radius)
        lat, lon = await resolve_location(request.location, self._geocoder)
        if self._finder is None:
            raise ProximitySearchUnavailableError(self._backend_name)

        logger.info(
            "Closest sensor search started",
            extra={"lat": lat, "lon": lon, "radius_m": radius_meters},
        )
        sensors = await self._finder.find_closest(lat, lon, radius_meters)
        logger.info("Closest sensor search completed", extra={"results_count": len(sensors)})
        return sensors
