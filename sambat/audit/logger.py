"""
Conversion Logger

DESIGN DECISION: The engine does no I/O of its own, but the moments a
caller should know about are still logged:
1. days_in_month() answering from the fallback year
2. A conversion rejected for leaving the supported range
3. Individual conversions (debug level only)

structlog is configured on import from SAMBAT_LOG_* settings and routes
through the standard library so the host application controls handlers
and levels. structlog configuration is process-wide, so importing sambat
replaces any structlog setup the host made earlier. A host with its own
setup should call configure_logging() or structlog.configure() again
after importing sambat; the last call wins.
"""

import logging

import structlog

from sambat.config import get_settings


def configure_logging(level: str = "WARNING", json_output: bool = True) -> None:
    """Configure structlog on top of the stdlib logging machinery."""
    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.getLogger("sambat").setLevel(level)


def get_logger(name: str = "sambat"):
    """Return a structlog logger bound to the given stdlib logger name."""
    return structlog.get_logger(name)


_log_settings = get_settings().logging
configure_logging(level=_log_settings.level, json_output=_log_settings.json_output)
