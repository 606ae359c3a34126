"""Application Ports."""

from sensor_api.application.sensors.ports.geocoder import Geocoder
from sensor_api.application.sensors.ports.sensor_store import SensorFinder, SensorStore

__all__ = ["SensorStore", "SensorFinder", "Geocoder"]
