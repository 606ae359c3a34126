"""SQLAlchemy Sensor Store Implementation."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Sequence

from sqlalchemy import Float, Select, cast, delete, func, insert, null, select, update
from sqlalchemy.dialects.postgresql import ARRAY, array_agg
from sqlalchemy.engine import Row
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.types import Text

from sensor_api.application.common.exceptions import SensorStoreError
from sensor_api.application.sensors.ports import SensorFinder, SensorStore
from sensor_api.domain.entities import Sensor
from sensor_api.domain.exceptions import ResourceNotFoundError, SensorAlreadyExistsError
from sensor_api.infrastructure.persistence_postgres.constants import WGS84_SRID
from sensor_api.infrastructure.persistence_postgres.tables import sensors_table, tags_table
from sensor_api.infrastructure.persistence_postgres.types import Geography, Geometry

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION = "23505"


class SqlaSensorStore(SensorStore, SensorFinder):
    """SQLAlchemy 기반 센서 저장소.

    SensorStore, SensorFinder Port를 구현합니다.
    PostGIS geography 거리(ST_DWithin / ST_Distance)로 근접 검색을 수행합니다.

    Writes that touch both tables run in a single transaction, so a sensor
    is never visible without its tags.
    """

    backend_name = "postgres"

    def __init__(self, session: AsyncSession) -> None:
        """Initialize.

        Args:
            session: SQLAlchemy 비동기 세션
        """
        self._session = session

    async def create(self, sensor: Sensor) -> Sensor:
        """센서와 태그를 하나의 트랜잭션으로 저장합니다."""
        async with self._transaction("create", sensor.name) as session:
            result = await session.execute(
                insert(sensors_table)
                .values(name=sensor.name, location=make_point(sensor.lat, sensor.lon))
                .returning(sensors_table.c.id)
            )
            sensor_id = int(result.scalar_one())
            await self._insert_tags(sensor_id, sensor.tags)

        return Sensor(
            id=sensor_id,
            name=sensor.name,
            lat=sensor.lat,
            lon=sensor.lon,
            tags=list(sensor.tags),
        )

    async def get_by_name(self, name: str) -> Sensor | None:
        """이름으로 센서를 조회합니다."""
        query = self._sensor_select().where(sensors_table.c.name == name)
        try:
            result = await self._session.execute(query)
            row = result.one_or_none()
        except SQLAlchemyError as e:
            logger.error("Sensor lookup failed", extra={"sensor_name": name, "error": str(e)})
            raise SensorStoreError("failed to retrieve sensor") from e

        if row is None:
            return None
        return self._to_domain(row)

    async def update_by_name(self, name: str, sensor: Sensor) -> Sensor:
        """센서 행을 갱신하고 태그를 전부 교체합니다."""
        async with self._transaction("update", sensor.name) as session:
            result = await session.execute(
                update(sensors_table)
                .where(sensors_table.c.name == name)
                .values(name=sensor.name, location=make_point(sensor.lat, sensor.lon))
                .returning(sensors_table.c.id)
            )
            sensor_id = result.scalar_one_or_none()
            if sensor_id is None:
                raise ResourceNotFoundError(name)

            await session.execute(delete(tags_table).where(tags_table.c.sensor_id == sensor_id))
            await self._insert_tags(int(sensor_id), sensor.tags)

        return Sensor(
            id=int(sensor_id),
            name=sensor.name,
            lat=sensor.lat,
            lon=sensor.lon,
            tags=list(sensor.tags),
        )

    async def find_closest(
        self,
        lat: float,
        lon: float,
        radius_meters: int,
    ) -> list[Sensor]:
        """반경 내 센서를 geography 거리 오름차순으로 조회합니다."""
        distance_expr = geography_distance(lat, lon)
        query = (
            self._sensor_select()
            .where(distance_within(lat, lon, radius_meters))
            .order_by(distance_expr.asc(), sensors_table.c.id.asc())
        )
        try:
            result = await self._session.execute(query)
            rows = result.all()
        except SQLAlchemyError as e:
            logger.error(
                "Closest sensor query failed",
                extra={"lat": lat, "lon": lon, "radius_m": radius_meters, "error": str(e)},
            )
            raise SensorStoreError("failed to find closest sensors") from e

        return [self._to_domain(row) for row in rows]

    @asynccontextmanager
    async def _transaction(self, operation: str, sensor_name: str) -> AsyncIterator[AsyncSession]:
        """커밋/롤백과 드라이버 예외 변환을 담당합니다."""
        try:
            yield self._session
            await self._session.commit()
        except IntegrityError as e:
            await self._session.rollback()
            if _is_unique_violation(e):
                raise SensorAlreadyExistsError(sensor_name) from e
            logger.error(
                "Sensor write violated a constraint",
                extra={"operation": operation, "sensor_name": sensor_name, "error": str(e)},
            )
            raise SensorStoreError(f"failed to {operation} sensor") from e
        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(
                "Sensor write failed",
                extra={"operation": operation, "sensor_name": sensor_name, "error": str(e)},
            )
            raise SensorStoreError(f"failed to {operation} sensor") from e
        except BaseException:
            await self._session.rollback()
            raise

    async def _insert_tags(self, sensor_id: int, tags: Sequence[str]) -> None:
        """태그 행을 삽입합니다 (빈 목록이면 쿼리 없음)."""
        if not tags:
            return
        await self._session.execute(
            insert(tags_table),
            [{"sensor_id": sensor_id, "value": tag} for tag in tags],
        )

    @staticmethod
    def _sensor_select() -> Select:
        """센서 행과 집계된 태그 배열을 조회하는 기본 SELECT."""
        tags_expr = func.array_remove(
            array_agg(tags_table.c.value),
            null(),
            type_=ARRAY(Text),
        ).label("tags")
        return (
            select(
                sensors_table.c.id,
                sensors_table.c.name,
                func.ST_Y(sensors_table.c.location, type_=Float).label("lat"),
                func.ST_X(sensors_table.c.location, type_=Float).label("lon"),
                tags_expr,
            )
            .select_from(
                sensors_table.outerjoin(tags_table, tags_table.c.sensor_id == sensors_table.c.id)
            )
            .group_by(sensors_table.c.id)
        )

    @staticmethod
    def _to_domain(row: Row) -> Sensor:
        """조회 행을 도메인 엔티티로 변환합니다."""
        return Sensor(
            id=int(row.id),
            name=row.name,
            lat=float(row.lat),
            lon=float(row.lon),
            tags=list(row.tags or []),
        )


def make_point(lat: float, lon: float):
    """SRID 4326 점 표현식. PostGIS points are (x=lon, y=lat)."""
    return func.ST_SetSRID(func.ST_MakePoint(lon, lat), WGS84_SRID, type_=Geometry())


def geography_distance(lat: float, lon: float):
    """geography 거리 표현식 (미터, 회전타원체 기준)."""
    return func.ST_Distance(
        cast(sensors_table.c.location, Geography()),
        cast(make_point(lat, lon), Geography()),
        type_=Float,
    )


def distance_within(lat: float, lon: float, radius_meters: int):
    """ST_DWithin on geography; uses the same distance as the ORDER BY."""
    return func.ST_DWithin(
        cast(sensors_table.c.location, Geography()),
        cast(make_point(lat, lon), Geography()),
        radius_meters,
    )


def _is_unique_violation(error: IntegrityError) -> bool:
    orig = error.orig
    code = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    return code == UNIQUE_VIOLATION
