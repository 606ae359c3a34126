"""Logging configuration."""

from __future__ import annotations

import logging
import sys

# Third-party loggers that are noisy at INFO.
QUIET_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool", "asyncpg", "httpx", "httpcore")


def setup_logging(level: str = "INFO", service_name: str = "sensor-api") -> None:
    """서비스 로깅을 설정합니다.

    Records carry the service name.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=f"%(asctime)s - {service_name} - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
