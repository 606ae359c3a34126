"""도메인 예외."""

from sensor_api.domain.exceptions.base import DomainError
from sensor_api.domain.exceptions.sensor import (
    ResourceNotFoundError,
    SensorAlreadyExistsError,
)

__all__ = [
    "DomainError",
    "ResourceNotFoundError",
    "SensorAlreadyExistsError",
]
