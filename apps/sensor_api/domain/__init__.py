"""Sensor Domain Layer."""

from sensor_api.domain.entities import Sensor
from sensor_api.domain.exceptions import (
    DomainError,
    ResourceNotFoundError,
    SensorAlreadyExistsError,
)

__all__ = ["Sensor", "DomainError", "ResourceNotFoundError", "SensorAlreadyExistsError"]
