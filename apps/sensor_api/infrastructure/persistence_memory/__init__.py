"""In-Memory Infrastructure."""

from sensor_api.infrastructure.persistence_memory.sensor_store_memory import MemorySensorStore

__all__ = ["MemorySensorStore"]
