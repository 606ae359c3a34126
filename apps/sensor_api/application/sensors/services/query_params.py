"""Query parameter parsing for proximity search.

Turns the raw ``radius`` ("50km", "100mi") and ``location`` ("45.12,-90.34")
strings into numbers the store understands. Both grammars are matched in full
and checked before any store call is made.
"""

from __future__ import annotations

import logging
import re
from decimal import Decimal
from typing import TYPE_CHECKING

from sensor_api.application.common.exceptions import (
    GeocodingError,
    InvalidQueryParameterError,
    LocationNotFoundError,
    QueryParserInvariantError,
)

if TYPE_CHECKING:
    from sensor_api.application.sensors.ports import Geocoder

logger = logging.getLogger(__name__)

KM_TO_METERS = Decimal(1000)
# Kept at 1609.34 so "100mi" yields 160934 meters.
MI_TO_METERS = Decimal("1609.34")
# Upper bound of a PostgreSQL BIGINT, the type the radius is bound as.
MAX_RADIUS_METERS = 2**63 - 1
_MAX_RADIUS_DIGITS = len(str(MAX_RADIUS_METERS))

_UNIT_TO_METERS = {
    "km": KM_TO_METERS,
    "mi": MI_TO_METERS,
}

RADIUS_PATTERN = re.compile(r"([0-9]+)(km|mi)")
LOCATION_PATTERN = re.compile(r"(-?[0-9]+(?:\.[0-9]+)?),(-?[0-9]+(?:\.[0-9]+)?)")

RADIUS_FORMAT = '"50km" or "100mi"'
LOCATION_FORMAT = '"45.12,-90.34"'


def parse_radius(raw: str) -> int:
    """반경 문자열을 미터 단위 정수로 변환합니다.

    Args:
        raw: ``<digits><km|mi>`` 형식의 문자열

    Returns:
        반경 (미터, 소수점 이하 버림)

    Raises:
        InvalidQueryParameterError: 형식이 맞지 않거나 범위를 넘을 때
    """
    match = RADIUS_PATTERN.fullmatch(raw)
    if match is None:
        raise InvalidQueryParameterError(param="radius", expected=RADIUS_FORMAT)

    groups = match.groups()
    if len(groups) != 2:
        raise QueryParserInvariantError(param="radius", raw=raw)

    digits, unit = groups
    factor = _UNIT_TO_METERS.get(unit)
    if factor is None:
        raise InvalidQueryParameterError(param="radius", expected=RADIUS_FORMAT)

    # checked before int(), which rejects very long digit strings
    if len(digits.lstrip("0")) > _MAX_RADIUS_DIGITS:
        raise InvalidQueryParameterError(param="radius", expected=RADIUS_FORMAT)

    meters = int(Decimal(int(digits)) * factor)
    if meters > MAX_RADIUS_METERS:
        raise InvalidQueryParameterError(param="radius", expected=RADIUS_FORMAT)
    return meters


def parse_location(raw: str) -> tuple[float, float]:
    """``lat,lon`` 문자열을 (위도, 경도)로 변환합니다.

    Raises:
        InvalidQueryParameterError: 형식이 맞지 않을 때
    """
    match = LOCATION_PATTERN.fullmatch(raw)
    if match is None:
        raise InvalidQueryParameterError(param="location", expected=LOCATION_FORMAT)

    groups = match.groups()
    if len(groups) != 2:
        raise QueryParserInvariantError(param="location", raw=raw)

    lat, lon = groups
    return float(lat), float(lon)


async def resolve_location(raw: str, geocoder: Geocoder | None = None) -> tuple[float, float]:
    """좌표 문자열을 파싱하고, 실패하면 지오코더로 장소 이름을 조회합니다.

    The geocoder is only consulted when the coordinate grammar rejects the
    input. Without a geocoder the validation error is raised unchanged.

    Raises:
        InvalidQueryParameterError: 좌표 형식이 아니고 지오코더도 없을 때
        LocationNotFoundError: 지오코더가 장소를 찾지 못했을 때
    """
    try:
        return parse_location(raw)
    except InvalidQueryParameterError:
        if geocoder is None:
            raise

    logger.info("Location is not a coordinate pair, geocoding", extra={"place": raw})
    try:
        return await geocoder.geocode(raw)
    except LocationNotFoundError:
        raise
    except GeocodingError as e:
        logger.warning("Geocoding failed", extra={"place": raw, "error": e.message})
        raise LocationNotFoundError(raw) from e
