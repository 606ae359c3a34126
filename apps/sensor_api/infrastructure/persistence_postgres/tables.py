"""Sensor tables - one row per sensor, one row per (sensor, tag) pair."""

from __future__ import annotations

from sqlalchemy import Column, ForeignKey, Index, Integer, MetaData, Table, Text, cast

from sensor_api.infrastructure.persistence_postgres.constants import (
    SENSORS_TABLE,
    TAGS_TABLE,
    WGS84_SRID,
)
from sensor_api.infrastructure.persistence_postgres.types import Geography, Geometry

metadata = MetaData()

sensors_table = Table(
    SENSORS_TABLE,
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", Text, nullable=False, unique=True),
    Column("location", Geometry("POINT", WGS84_SRID), nullable=False),
)

tags_table = Table(
    TAGS_TABLE,
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "sensor_id",
        Integer,
        ForeignKey(f"{SENSORS_TABLE}.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    ),
    Column("value", Text, nullable=False),
)

# Radius queries compare on geography; index the same expression.
Index(
    "ix_sensors_location_geography",
    cast(sensors_table.c.location, Geography()),
    postgresql_using="gist",
)
