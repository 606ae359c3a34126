"""In-memory Sensor Store Implementation."""

from __future__ import annotations

from sensor_api.application.sensors.ports import SensorStore
from sensor_api.domain.entities import Sensor
from sensor_api.domain.exceptions import ResourceNotFoundError, SensorAlreadyExistsError


class MemorySensorStore(SensorStore):
    """메모리 기반 센서 저장소.

    SensorStore Port를 구현합니다. 테스트 및 DB 없는 로컬 실행용.

    No operation awaits between reading and writing the map, so it is safe
    within a single event loop. Sharing one instance across threads needs an
    external lock. Proximity search is not provided.
    """

    backend_name = "memory"

    def __init__(self) -> None:
        self._by_name: dict[str, Sensor] = {}

    async def create(self, sensor: Sensor) -> Sensor:
        """센서를 저장합니다."""
        if sensor.name in self._by_name:
            raise SensorAlreadyExistsError(sensor.name)
        stored = self._copy(sensor)
        self._by_name[stored.name] = stored
        return self._copy(stored)

    async def get_by_name(self, name: str) -> Sensor | None:
        """이름으로 센서를 조회합니다."""
        stored = self._by_name.get(name)
        if stored is None:
            return None
        return self._copy(stored)

    async def update_by_name(self, name: str, sensor: Sensor) -> Sensor:
        """센서를 새 값으로 교체합니다."""
        if name not in self._by_name:
            raise ResourceNotFoundError(name)
        if sensor.name != name and sensor.name in self._by_name:
            raise SensorAlreadyExistsError(sensor.name)

        stored = self._copy(sensor)
        del self._by_name[name]
        self._by_name[stored.name] = stored
        return self._copy(stored)

    def __len__(self) -> int:
        return len(self._by_name)

    @staticmethod
    def _copy(sensor: Sensor) -> Sensor:
        # tags is a list; copied on the way in and on the way out
        return Sensor(name=sensor.name, lat=sensor.lat, lon=sensor.lon, tags=list(sensor.tags))
