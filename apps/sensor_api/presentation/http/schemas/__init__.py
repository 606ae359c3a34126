"""HTTP Schemas."""

from sensor_api.presentation.http.schemas.sensor import (
    SensorBody,
    SensorData,
    SensorDetailsResponse,
    SensorListResponse,
)

__all__ = ["SensorBody", "SensorData", "SensorDetailsResponse", "SensorListResponse"]
