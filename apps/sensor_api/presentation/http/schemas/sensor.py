"""Sensor HTTP Schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from sensor_api.domain.entities import Sensor


class SensorBody(BaseModel):
    """센서 생성/수정 요청 스키마. Unknown fields are rejected."""

    name: str = Field(..., min_length=1)
    lat: float
    lon: float
    tags: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")

    def to_domain(self) -> Sensor:
        return Sensor(name=self.name, lat=self.lat, lon=self.lon, tags=list(self.tags))


class SensorData(BaseModel):
    """센서 응답 스키마."""

    id: int | None = None
    name: str
    lat: float
    lon: float
    tags: list[str]

    @classmethod
    def from_domain(cls, sensor: Sensor) -> SensorData:
        return cls(
            id=sensor.id,
            name=sensor.name,
            lat=sensor.lat,
            lon=sensor.lon,
            tags=list(sensor.tags),
        )


class SensorDetailsResponse(BaseModel):
    """단일 센서 응답."""

    data: SensorData


class SensorListResponse(BaseModel):
    """센서 목록 응답."""

    data: list[SensorData]
