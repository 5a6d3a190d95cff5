import logging
import sys
from typing import Optional

from pythonjsonlogger import jsonlogger

from cwa_weather.config import get_settings

settings = get_settings()

SERVICE_NAME = "cwa-weather-proxy"


def setup_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Set up a logger with JSON formatting for structured logging.

    Every record carries the service name and deployment environment so
    that log lines from several instances can be told apart.

    Args:
        name: The name of the logger (usually __name__)
        level: Log level override, defaults to ``settings.log_level``

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    log_level = getattr(logging, (level or settings.log_level).upper())
    logger.setLevel(log_level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)

    formatter = jsonlogger.JsonFormatter(
        fmt="%(asctime)s %(name)s %(levelname)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        static_fields={
            "service": SERVICE_NAME,
            "environment": settings.environment,
        },
    )
    handler.setFormatter(formatter)

    logger.addHandler(handler)
    logger.propagate = False

    return logger
