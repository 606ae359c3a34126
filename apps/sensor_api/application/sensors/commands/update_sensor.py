"""Update Sensor Command."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sensor_api.domain.entities import Sensor

if TYPE_CHECKING:
    from sensor_api.application.sensors.ports import SensorStore

logger = logging.getLogger(__name__)


class UpdateSensorCommand:
    """센서 수정 Command.

    The stored record is replaced as a whole: location, tags and possibly
    the name itself.
    """

    def __init__(self, store: "SensorStore") -> None:
        self._store = store

    async def execute(self, name: str, sensor: Sensor) -> Sensor:
        """``name``으로 저장된 센서를 교체합니다.

        Raises:
            ResourceNotFoundError: 해당 이름의 센서가 없을 때
        """
        updated = await self._store.update_by_name(name, sensor)
        if updated.name != name:
            logger.info("Sensor renamed", extra={"old_name": name, "new_name": updated.name})
        else:
            logger.info("Sensor updated", extra={"sensor_name": name})
        return updated
