"""PostgreSQL/PostGIS Infrastructure."""

from sensor_api.infrastructure.persistence_postgres.schema import init_schema
from sensor_api.infrastructure.persistence_postgres.sensor_store_sqla import SqlaSensorStore
from sensor_api.infrastructure.persistence_postgres.tables import (
    metadata,
    sensors_table,
    tags_table,
)

__all__ = ["SqlaSensorStore", "init_schema", "metadata", "sensors_table", "tags_table"]
