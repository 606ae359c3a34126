"""PostGIS column types.

Only the DDL spelling is needed: coordinates are written with
``ST_MakePoint`` and read back with ``ST_X``/``ST_Y``, so no value
conversion happens in Python.
"""

from __future__ import annotations

from sqlalchemy.types import UserDefinedType

from sensor_api.infrastructure.persistence_postgres.constants import WGS84_SRID


class Geometry(UserDefinedType):
    """``geometry(<type>, <srid>)``."""

    cache_ok = True

    def __init__(self, geometry_type: str = "POINT", srid: int = WGS84_SRID) -> None:
        self.geometry_type = geometry_type
        self.srid = srid

    def get_col_spec(self, **kw) -> str:
        return f"geometry({self.geometry_type}, {self.srid})"


class Geography(UserDefinedType):
    """``geography``, used as a cast target for geodesic distance."""

    cache_ok = True

    def get_col_spec(self, **kw) -> str:
        return "geography"
