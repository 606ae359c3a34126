"""Geocoder Port.

장소 이름을 좌표로 변환하는 외부 서비스 포트.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class Geocoder(ABC):
    """지오코딩 포트."""

    @abstractmethod
    async def geocode(self, place: str) -> tuple[float, float]:
        """장소 이름을 (위도, 경도)로 변환합니다.

        Raises:
            LocationNotFoundError: 일치하는 장소가 없을 때
            GeocodingError: 서비스 호출이 실패했을 때
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """리소스 정리."""
        ...
