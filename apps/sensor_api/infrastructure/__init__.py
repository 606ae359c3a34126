"""Sensor Infrastructure Layer."""

from sensor_api.infrastructure.persistence_memory import MemorySensorStore
from sensor_api.infrastructure.persistence_postgres import SqlaSensorStore, metadata

__all__ = ["MemorySensorStore", "SqlaSensorStore", "metadata"]
