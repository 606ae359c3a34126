"""Create Sensor Command."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sensor_api.domain.entities import Sensor

if TYPE_CHECKING:
    from sensor_api.application.sensors.ports import SensorStore

logger = logging.getLogger(__name__)


class CreateSensorCommand:
    """센서 생성 Command."""

    def __init__(self, store: "SensorStore") -> None:
        self._store = store

    async def execute(self, sensor: Sensor) -> Sensor:
        """센서를 생성합니다."""
        created = await self._store.create(sensor)
        logger.info(
            "Sensor created",
            extra={"sensor_name": created.name, "sensor_id": created.id, "tags": len(created.tags)},
        )
        return created
