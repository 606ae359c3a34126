"""Sensor Application Layer."""

from sensor_api.application.sensors import (
    CreateSensorCommand,
    FindClosestSensorsQuery,
    Geocoder,
    GetSensorQuery,
    SensorFinder,
    SensorStore,
    UpdateSensorCommand,
)

__all__ = [
    "SensorStore",
    "SensorFinder",
    "Geocoder",
    "CreateSensorCommand",
    "UpdateSensorCommand",
    "GetSensorQuery",
    "FindClosestSensorsQuery",
]
