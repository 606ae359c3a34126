"""Domain Entities."""

from sensor_api.domain.entities.sensor import Sensor

__all__ = ["Sensor"]
