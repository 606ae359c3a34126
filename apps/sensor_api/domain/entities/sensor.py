"""Sensor Entity."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Sensor:
    """이름으로 식별되는 위치 기반 센서.

    `name` is the caller-facing identity and may change on update.
    `id` is assigned by stores that use a surrogate key and stays ``None``
    otherwise. Coordinates are stored as given; no range check is applied.
    """

    name: str
    lat: float
    lon: float
    tags: list[str] = field(default_factory=list)
    id: int | None = None
