"""Structured logging setup.

The library only emits events through ``structlog.get_logger()``. Applications
that want the JSON pipeline call :func:`configure_logging` once at startup.
"""
import logging
import sys

import structlog

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


def configure_logging(level: str = "info", json: bool = True) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        level: One of debug, info, warn, error
        json: Render JSON lines (True) or human-readable console output (False)
    """
    level = level.lower()
    if level not in LOG_LEVELS:
        raise ValueError(f"Invalid log level: {level}")

    logging.basicConfig(format="%(message)s", stream=sys.stderr)
    logging.getLogger().setLevel(LOG_LEVELS[level])

    renderer = structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
