"""Sensor Application Layer."""

from sensor_api.application.sensors.commands import CreateSensorCommand, UpdateSensorCommand
from sensor_api.application.sensors.dto import ClosestSearchRequest
from sensor_api.application.sensors.ports import Geocoder, SensorFinder, SensorStore
from sensor_api.application.sensors.queries import FindClosestSensorsQuery, GetSensorQuery

__all__ = [
    "ClosestSearchRequest",
    "SensorStore",
    "SensorFinder",
    "Geocoder",
    "CreateSensorCommand",
    "UpdateSensorCommand",
    "GetSensorQuery",
    "FindClosestSensorsQuery",
]
