"""Application DTOs."""

from sensor_api.application.sensors.dto.closest_search_request import ClosestSearchRequest

__all__ = ["ClosestSearchRequest"]
