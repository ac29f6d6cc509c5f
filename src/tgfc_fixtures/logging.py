"""Structured logging configuration using structlog.

Diagnostics (found fixtures, skipped rows, fatal errors) go to stderr so they
never mix with a rendered schedule. JSON output is available for scheduled
runs, console output for interactive use. Modules log through get_logger().
"""

import logging
import sys
from typing import TextIO

import structlog


def setup_logging(
    json_output: bool = False,
    log_level: str = "INFO",
    stream: TextIO | None = None,
) -> None:
    """Configure structlog processors, output format and level.

    Args:
        json_output: If True, output JSON lines. If False, console format.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        stream: Destination for log lines, stderr when omitted.
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)
    stream = stream or sys.stderr

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    if json_output:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=stream.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=False,
    )

    # Library loggers (jinja2, pydantic) share the same stream and level
    root = logging.getLogger()
    root.handlers = [logging.StreamHandler(stream)]
    root.setLevel(numeric_level)


def bind_run_context(**values) -> None:
    """Attach key/value pairs (input paths, version) to every log line of this run."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(**values)


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a logger instance bound with the module name.

    Args:
        name: Logger name (typically __name__ from calling module).
    """
    return structlog.get_logger(name)
