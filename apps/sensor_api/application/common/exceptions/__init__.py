"""Application Exceptions."""

from sensor_api.application.common.exceptions.base import ApplicationError
from sensor_api.application.common.exceptions.geocoding import (
    GeocodingError,
    LocationNotFoundError,
)
from sensor_api.application.common.exceptions.store import (
    ProximitySearchUnavailableError,
    SensorStoreError,
)
from sensor_api.application.common.exceptions.validation import (
    InvalidQueryParameterError,
    QueryParserInvariantError,
)

__all__ = [
    "ApplicationError",
    "GeocodingError",
    "InvalidQueryParameterError",
    "LocationNotFoundError",
    "ProximitySearchUnavailableError",
    "QueryParserInvariantError",
    "SensorStoreError",
]
