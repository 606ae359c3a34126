"""Application Queries."""

from sensor_api.application.sensors.queries.find_closest import FindClosestSensorsQuery
from sensor_api.application.sensors.queries.get_sensor import GetSensorQuery

__all__ = ["FindClosestSensorsQuery", "GetSensorQuery"]
