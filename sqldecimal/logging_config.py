"""structlog setup for tools built on the codec.

The library itself only emits debug events through ``structlog.get_logger()``;
callers that want to see them configure output here.
"""

import logging
import os

import structlog

from sqldecimal.constants import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV


def resolve_log_level(level: str | int | None = None) -> int:
    """Turn a level name, number or None into a logging level.

    None falls back to the SQLDECIMAL_LOG_LEVEL environment variable, then INFO.

    Raises:
        ValueError: If the name is not a known logging level
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def configure_logging(level: str | int | None = None) -> None:
    """Configure structlog console output at the given level."""
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(resolve_log_level(level)),
    )
