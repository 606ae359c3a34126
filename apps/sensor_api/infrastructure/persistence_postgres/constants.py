"""Database table and spatial reference constants."""

# =============================================================================
# Table Names
# =============================================================================
SENSORS_TABLE = "sensors"
TAGS_TABLE = "tags"

# =============================================================================
# Spatial Reference
# =============================================================================
WGS84_SRID = 4326  # GPS lat/lon

REQUIRED_EXTENSIONS = ("postgis",)
