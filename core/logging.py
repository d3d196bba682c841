"""
Structured logging setup.

All modules log through `get_logger()`; events are snake_case names with
keyword context, e.g. `log.info("view_computed", view="top_players", rows=10)`.
"""

import logging
import sys

import structlog


def setup_logging(
    log_level: str = "INFO",
    json_format: bool = False,
    service_name: str = "gridiron-weather-api",
) -> None:
    """
    Configure structlog and the stdlib root logger.

    Args:
        log_level: Minimum level name (DEBUG, INFO, ...)
        json_format: Render JSON lines instead of the console renderer
        service_name: Added to every event as `service`
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)

    renderer = (
        structlog.processors.JSONRenderer()
        if json_format
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
    structlog.contextvars.bind_contextvars(service=service_name)


def get_logger(name: str | None = None):
    """Return a structlog logger, optionally bound to a component name."""
    log = structlog.get_logger()
    if name:
        return log.bind(component=name)
    return log
