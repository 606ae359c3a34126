"""Application Services."""

from sensor_api.application.sensors.services.query_params import (
    KM_TO_METERS,
    MI_TO_METERS,
    parse_location,
    parse_radius,
    resolve_location,
)

__all__ = [
    "KM_TO_METERS",
    "MI_TO_METERS",
    "parse_location",
    "parse_radius",
    "resolve_location",
]
