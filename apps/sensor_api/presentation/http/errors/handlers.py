"""Exception Handlers.

도메인/애플리케이션 예외를 HTTP 응답으로 변환합니다.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from sensor_api.application.common.exceptions import (
    ApplicationError,
    GeocodingError,
    InvalidQueryParameterError,
    LocationNotFoundError,
    ProximitySearchUnavailableError,
    QueryParserInvariantError,
    SensorStoreError,
)
from sensor_api.domain.exceptions import (
    DomainError,
    ResourceNotFoundError,
    SensorAlreadyExistsError,
)

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "internal server error"


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(ResourceNotFoundError)
    async def resource_not_found_handler(request: Request, exc: ResourceNotFoundError):
        return JSONResponse(
            status_code=404,
            content={"detail": exc.message, "code": "RESOURCE_NOT_FOUND"},
        )

    @app.exception_handler(SensorAlreadyExistsError)
    async def sensor_already_exists_handler(request: Request, exc: SensorAlreadyExistsError):
        return JSONResponse(
            status_code=409,
            content={"detail": exc.message, "code": "SENSOR_ALREADY_EXISTS"},
        )

    @app.exception_handler(InvalidQueryParameterError)
    async def invalid_query_parameter_handler(request: Request, exc: InvalidQueryParameterError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "INVALID_QUERY_PARAMETER"},
        )

    @app.exception_handler(LocationNotFoundError)
    async def location_not_found_handler(request: Request, exc: LocationNotFoundError):
        return JSONResponse(
            status_code=404,
            content={"detail": exc.message, "code": "LOCATION_NOT_FOUND"},
        )

    @app.exception_handler(GeocodingError)
    async def geocoding_error_handler(request: Request, exc: GeocodingError):
        return JSONResponse(
            status_code=502,
            content={"detail": exc.message, "code": "GEOCODING_FAILED"},
        )

    @app.exception_handler(ProximitySearchUnavailableError)
    async def proximity_unavailable_handler(
        request: Request, exc: ProximitySearchUnavailableError
    ):
        return JSONResponse(
            status_code=501,
            content={"detail": exc.message, "code": "PROXIMITY_SEARCH_UNAVAILABLE"},
        )

    @app.exception_handler(SensorStoreError)
    async def sensor_store_error_handler(request: Request, exc: SensorStoreError):
        logger.error(
            "Sensor store failure",
            extra={"method": request.method, "path": request.url.path, "error": exc.message},
            exc_info=exc,
        )
        return JSONResponse(
            status_code=500,
            content={"detail": INTERNAL_ERROR_MESSAGE, "code": "STORE_ERROR"},
        )

    @app.exception_handler(QueryParserInvariantError)
    async def parser_invariant_handler(request: Request, exc: QueryParserInvariantError):
        logger.error("Query parser invariant violated", extra={"error": str(exc)}, exc_info=exc)
        return JSONResponse(
            status_code=500,
            content={"detail": INTERNAL_ERROR_MESSAGE, "code": "INTERNAL_ERROR"},
        )

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "DOMAIN_ERROR"},
        )

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "APPLICATION_ERROR"},
        )
