"""Structured logging via structlog.

Usage::

    from poolbet.utils.logging import get_logger

    log = get_logger(__name__)
    log.info("wager_added", expected="Home", stake="3")
"""

from __future__ import annotations

import logging
import sys

import structlog

from poolbet.config import settings

_configured = False


def configure_logging(level: str | None = None, json: bool | None = None) -> None:
    """Configure structlog processors, renderer and level filter.

    Falls back to ``settings.log_level`` / ``settings.log_json`` for any
    argument left as None. Safe to call again (e.g. from the CLI's
    ``--verbose`` flag); later calls replace the configuration.
    """
    global _configured

    level_name = (level or settings.log_level).upper()
    use_json = settings.log_json if json is None else json

    renderer = (
        structlog.processors.JSONRenderer()
        if use_json
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level_name)
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )
    _configured = True


def get_logger(name: str | None = None) -> structlog.typing.FilteringBoundLogger:
    """Return a structlog logger, configuring logging on first use."""
    if not _configured:
        configure_logging()
    return structlog.get_logger(name)
