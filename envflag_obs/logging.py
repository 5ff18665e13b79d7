"""
Structured Logging (structlog).

Events go through stdlib logging to stderr, so stdout stays free for the
usage listing and for the program's own output. ENVFLAG_LOG_FORMAT picks JSON
lines or the console renderer.
"""

import logging
import sys

import structlog

from envflag_config.settings import Settings


def log_level(settings: Settings) -> str:
    """ENVFLAG_DEBUG forces DEBUG so per-variable bindings show up."""
    return "DEBUG" if settings.DEBUG else settings.LOG_LEVEL.upper()


def build_processors(settings: Settings) -> list:
    """Processor chain ending in the renderer chosen by LOG_FORMAT."""
    renderer = (
        structlog.processors.JSONRenderer()
        if settings.LOG_FORMAT == "json"
        else structlog.dev.ConsoleRenderer()
    )
    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
        renderer,
    ]


def setup_logging(settings: Settings) -> None:
    """Configure structlog on top of stdlib logging."""
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=log_level(settings))

    structlog.configure(
        processors=build_processors(settings),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get configured logger."""
    return structlog.get_logger(name)
