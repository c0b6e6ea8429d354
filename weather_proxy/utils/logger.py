"""
Structured JSON logging for the proxy.
"""

import logging
import sys

from pythonjsonlogger import jsonlogger

from weather_proxy.config import get_settings

settings = get_settings()

# Loggers that would otherwise print upstream request URLs, which carry the appid.
QUIET_LOGGERS = ("httpx", "httpcore")


def silence_upstream_loggers(level: int = logging.WARNING) -> None:
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(level)


def setup_logger(name: str) -> logging.Logger:
    """
    Set up a logger with JSON formatting for structured logging.

    Args:
        name: The name of the logger (usually __name__)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    log_level = getattr(logging, settings.log_level.upper())
    logger.setLevel(log_level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(
        jsonlogger.JsonFormatter(
            fmt="%(asctime)s %(name)s %(levelname)s %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            rename_fields={"levelname": "level", "asctime": "timestamp"},
        )
    )

    logger.addHandler(handler)
    logger.propagate = False

    return logger


silence_upstream_loggers()
