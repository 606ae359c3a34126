"""Mapbox 지오코딩 HTTP 클라이언트.

Mapbox Geocoding API의 HTTP 구현체.
- 장소 검색: GET /geocoding/v5/mapbox.places/{query}.json
- 인증: access_token 쿼리 파라미터
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any
from urllib.parse import quote

import httpx

from sensor_api.application.common.exceptions import GeocodingError, LocationNotFoundError
from sensor_api.application.sensors.ports import Geocoder

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


class MapboxGeocoder(Geocoder):
    """Mapbox 지오코딩 클라이언트."""

    BASE_URL = "https://api.mapbox.com/geocoding/v5"

    def __init__(
        self,
        access_token: str,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._access_token = access_token
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._lock = asyncio.Lock()

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            async with self._lock:
                if self._client is None:
                    self._client = httpx.AsyncClient(
                        base_url=self.BASE_URL,
                        timeout=self._timeout,
                        transport=self._transport,
                    )
        return self._client

    async def geocode(self, place: str) -> tuple[float, float]:
        """장소 이름을 (위도, 경도)로 변환합니다."""
        client = await self._get_client()
        path = f"/mapbox.places/{quote(place, safe='')}.json"

        try:
            response = await client.get(path, params={"access_token": self._access_token})
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(
                "Mapbox API HTTP error",
                extra={"status_code": e.response.status_code, "place": place},
            )
            raise GeocodingError(
                f"Mapbox geocode request failed with status {e.response.status_code}"
            ) from e
        except httpx.TimeoutException as e:
            logger.error("Mapbox API timeout", extra={"place": place})
            raise GeocodingError("Mapbox geocode request timed out") from e
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Mapbox geocode failed", extra={"place": place, "error": str(e)})
            raise GeocodingError("Mapbox geocode request failed") from e

        return self._parse_center(data, place)

    def _parse_center(self, data: dict[str, Any], place: str) -> tuple[float, float]:
        features = data.get("features") or []
        if not features:
            raise LocationNotFoundError(place)

        # center is [lon, lat]
        center = features[0].get("center") or []
        if len(center) != 2:
            raise GeocodingError("Mapbox geocode response has invalid center")
        try:
            lon, lat = float(center[0]), float(center[1])
        except (TypeError, ValueError) as e:
            raise GeocodingError("Mapbox geocode response has invalid center") from e
        return lat, lon

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None
