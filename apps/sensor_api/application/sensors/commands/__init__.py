"""Application Commands."""

from sensor_api.application.sensors.commands.create_sensor import CreateSensorCommand
from sensor_api.application.sensors.commands.update_sensor import UpdateSensorCommand

__all__ = ["CreateSensorCommand", "UpdateSensorCommand"]
