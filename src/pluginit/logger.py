"""Structured logger for pluginit.

Importing this module changes no global logging state. Applications that
want pluginit's own console output call :func:`configure_logging` once at
startup; otherwise events flow through whatever structlog configuration the
application already has.
"""

from __future__ import annotations

import logging
import sys

import structlog

from pluginit.config import get_settings

LOGGER_NAME = "pluginit"

logger = structlog.get_logger(LOGGER_NAME)


def configure_logging(level: str | None = None) -> None:
    """Set up structlog console output and the ``pluginit`` log level.

    ``level`` defaults to ``Settings.logging.level``. The level is applied to
    the ``pluginit`` stdlib logger only, so other loggers keep theirs.
    """
    level_name = (level or get_settings().logging.level).upper()
    numeric_level = getattr(logging, level_name, logging.INFO)

    # Adds a stderr handler only if the root logger has none yet
    logging.basicConfig(format="%(message)s", stream=sys.stderr)
    logging.getLogger(LOGGER_NAME).setLevel(numeric_level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
