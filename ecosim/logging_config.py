"""Logging set-up for headless simulation runs.

Library modules only create ``logging.getLogger(__name__)`` loggers; the
command-line driver calls :func:`configure_logging` once. Per-step events are
logged at DEBUG, generation summaries at INFO.
"""

from __future__ import annotations

import logging
import os
from typing import Iterable

DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DEFAULT_DATEFMT = "%H:%M:%S"
DEFAULT_LEVEL = "INFO"
LOG_LEVEL_ENV_VAR = "ECOSIM_LOG_LEVEL"


def resolve_level(level: str | None = None) -> tuple[str, str]:
    """Pick the log level and report where it came from.

    Returns:
        (upper-case level name, one of "argument", "environment", "default")
    """
    if level:
        return level.upper(), "argument"
    env_level = os.getenv(LOG_LEVEL_ENV_VAR)
    if env_level:
        return env_level.upper(), "environment"
    return DEFAULT_LEVEL, "default"


def configure_logging(
    *,
    level: str | None = None,
    format: str = DEFAULT_FORMAT,
    datefmt: str = DEFAULT_DATEFMT,
    extra_loggers: Iterable[str] | None = None,
) -> logging.Logger:
    """Configure logging for a simulation run.

    Args:
        level: Explicit level name; overrides ``ECOSIM_LOG_LEVEL``.
        format: Record format string.
        datefmt: Timestamp format string.
        extra_loggers: Logger names outside ``ecosim`` (e.g. the driver's own)
            that should follow the same level.

    Returns:
        The package logger (``ecosim``).
    """
    resolved_level, source = resolve_level(level)
    logging.basicConfig(level=resolved_level, format=format, datefmt=datefmt)

    package_logger = logging.getLogger("ecosim")
    package_logger.setLevel(resolved_level)

    for logger_name in extra_loggers or ():
        logging.getLogger(logger_name).setLevel(resolved_level)

    package_logger.debug("ecosim logging at %s (from %s)", resolved_level, source)
    return package_logger
