"""Setup Module."""

from sensor_api.setup.config import Settings, get_settings
from sensor_api.setup.database import dispose_engine, get_engine, get_session_factory
from sensor_api.setup.logging import setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "dispose_engine",
    "get_engine",
    "get_session_factory",
    "setup_logging",
]
