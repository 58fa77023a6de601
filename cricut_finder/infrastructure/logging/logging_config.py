"""
Structured logging configuration for cricut-finder.

Configures structlog for console or JSON logging on stderr, keeping stdout
free for command output.
"""

import structlog
import logging
import sys
from typing import Any


def configure_logging(log_level: str = "INFO", log_format: str = "text") -> None:
    """
    Configure structlog on top of the standard logging module.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_format: "text" for human-readable output, "json" for structured logs
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, log_level.upper(), logging.INFO),
        force=True,
    )

    if log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
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


def get_logger(name: str = None, **context: Any) -> structlog.stdlib.BoundLogger:
    """
    Get a logger instance with optional bound context.

    Args:
        name: Logger name, usually the module's __name__
        **context: Key-value pairs bound to every event

    Returns:
        Configured logger instance
    """
    if name is None:
        return structlog.get_logger(**context)
    return structlog.get_logger(name, **context)
