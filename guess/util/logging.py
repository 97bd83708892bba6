"""Logging configuration for the application."""

import logging
import sys

import logfire

from guess.config import Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Chatty libraries kept at WARNING regardless of the app level
QUIET_LOGGERS = ("httpx", "httpcore", "asyncpg", "uvicorn.access")


def setup_logging(settings: Settings) -> None:
    """Configure stdlib logging for the app.

    Records go to stdout; records from the ``guess`` package are also
    forwarded to Logfire so admin actions show up next to traces.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    app_logger = logging.getLogger("guess")
    app_logger.setLevel(level)
    if not any(isinstance(h, logfire.LogfireLoggingHandler) for h in app_logger.handlers):
        app_logger.addHandler(logfire.LogfireLoggingHandler())

    get_logger(__name__).info(
        "Logging configured: environment=%s level=%s",
        settings.environment,
        logging.getLevelName(level),
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
