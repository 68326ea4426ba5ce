"""Structured logging configuration for the axe HTML fixer.

Provides:
- Structured logging with structlog
- Scoped logging context
- Operation start/end logging
"""

import logging
import sys
from contextlib import contextmanager
from typing import Optional

import structlog


def configure_logging(
    level: str = "INFO",
    json_format: bool = False,
    include_timestamp: bool = True,
) -> None:
    """Configure structured logging for the application.

    Logs go to stderr so that stdout stays free for the MCP stdio transport
    and the CLI's JSON output.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_format: Output logs as JSON
        include_timestamp: Include timestamps in logs
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper()),
    )

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso") if include_timestamp else structlog.processors.TimeStamper(fmt=None),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: Optional[str] = None, **context) -> structlog.BoundLogger:
    """Get a configured logger with optional context.

    Args:
        name: Logger name
        **context: Additional context to bind

    Returns:
        Configured structlog logger
    """
    logger = structlog.get_logger(name)
    if context:
        logger = logger.bind(**context)
    return logger


class LogContext:
    """Context manager for scoped logging context.

    Usage:
        with LogContext(file_scanned="Dashboard.html"):
            logger.info("Remediating")
    """

    def __init__(self, **context):
        self.context = context

    def __enter__(self) -> "LogContext":
        structlog.contextvars.bind_contextvars(**self.context)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        structlog.contextvars.unbind_contextvars(*self.context.keys())


@contextmanager
def log_operation(
    operation: str,
    logger: Optional[structlog.BoundLogger] = None,
    **context,
):
    """Context manager for logging operation start/end.

    Args:
        operation: Name of the operation
        logger: Optional logger to use
        **context: Additional context

    Yields:
        Dict to store operation results

    Example:
        with log_operation("remediate", file="page.html") as op:
            result = remediate(html, report)
            op["changes"] = len(result.changes_required)
    """
    log = logger or get_logger()
    log = log.bind(operation=operation, **context)

    log.debug(f"{operation} started")
    result = {"success": False, "error": None}

    try:
        yield result
        result["success"] = True
        log.info(f"{operation} completed", **result)
    except Exception as e:
        result["error"] = str(e)
        log.error(f"{operation} failed", **result)
        raise
