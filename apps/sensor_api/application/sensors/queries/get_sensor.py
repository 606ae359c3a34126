"""Get Sensor Query."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sensor_api.domain.entities import Sensor
from sensor_api.domain.exceptions import ResourceNotFoundError

if TYPE_CHECKING:
    from sensor_api.application.sensors.ports import SensorStore


class GetSensorQuery:
    """이름으로 센서 조회 Query."""

    def __init__(self, store: "SensorStore") -> None:
        self._store = store

    async def execute(self, name: str) -> Sensor:
        """센서를 조회합니다.

        The store reports a missing sensor as ``None``; this query turns it
        into ``ResourceNotFoundError`` for the HTTP layer.
        """
        sensor = await self._store.get_by_name(name)
        if sensor is None:
            raise ResourceNotFoundError(name)
        return sensor
