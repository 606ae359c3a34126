"""Sensor Controller."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from sensor_api.application.sensors import (
    ClosestSearchRequest,
    CreateSensorCommand,
    FindClosestSensorsQuery,
    GetSensorQuery,
    UpdateSensorCommand,
)
from sensor_api.presentation.http.schemas import (
    SensorBody,
    SensorData,
    SensorDetailsResponse,
    SensorListResponse,
)
from sensor_api.setup.dependencies import (
    get_create_sensor_command,
    get_find_closest_query,
    get_get_sensor_query,
    get_update_sensor_command,
)

router = APIRouter(prefix="/sensors", tags=["sensors"])


@router.post(
    "",
    response_model=SensorDetailsResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create sensor",
)
async def create_sensor(
    body: SensorBody,
    command: Annotated[CreateSensorCommand, Depends(get_create_sensor_command)],
) -> SensorDetailsResponse:
    """센서를 생성합니다."""
    sensor = await command.execute(body.to_domain())
    return SensorDetailsResponse(data=SensorData.from_domain(sensor))


# Registered before "/{name}" so "closest" is not taken as a sensor name.
@router.get("/closest", response_model=SensorListResponse, summary="Find closest sensors")
async def find_closest(
    query: Annotated[FindClosestSensorsQuery, Depends(get_find_closest_query)],
    location: str = Query(
        ...,
        min_length=1,
        description='Coordinates like "45.12,-90.34", or a place name when geocoding is enabled',
    ),
    radius: str = Query(..., min_length=1, description='Search radius like "50km" or "100mi"'),
) -> SensorListResponse:
    """반경 내 센서를 가까운 순으로 조회합니다."""
    sensors = await query.execute(ClosestSearchRequest(location=location, radius=radius))
    return SensorListResponse(data=[SensorData.from_domain(s) for s in sensors])


@router.get("/{name}", response_model=SensorDetailsResponse, summary="Get sensor by name")
async def get_sensor(
    name: str,
    query: Annotated[GetSensorQuery, Depends(get_get_sensor_query)],
) -> SensorDetailsResponse:
    """이름으로 센서를 조회합니다."""
    sensor = await query.execute(name)
    return SensorDetailsResponse(data=SensorData.from_domain(sensor))


@router.put("/{name}", response_model=SensorDetailsResponse, summary="Update sensor by name")
async def update_sensor(
    name: str,
    body: SensorBody,
    command: Annotated[UpdateSensorCommand, Depends(get_update_sensor_command)],
) -> SensorDetailsResponse:
    """센서를 교체합니다 (이름 변경 포함)."""
    sensor = await command.execute(name, body.to_domain())
    return SensorDetailsResponse(data=SensorData.from_domain(sensor))
