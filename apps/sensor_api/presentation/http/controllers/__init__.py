"""HTTP Controllers."""

from sensor_api.presentation.http.controllers.health import router as health_router
from sensor_api.presentation.http.controllers.sensors import router as sensors_router

__all__ = ["health_router", "sensors_router"]
