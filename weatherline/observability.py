"""Observability configuration for structured logging.

Uses structlog for all diagnostic output. Logs go to stderr so that
stdout carries nothing but the weather report, e.g.:

    weatherline London 2>/dev/null
    LOG_FORMAT=json LOG_LEVEL=INFO weatherline London 2>&1 >/dev/null | jq .
"""

import logging
import sys
from typing import Any, Optional

import structlog


def _stderr_logger(*args: Any) -> structlog.PrintLogger:
    # Look up sys.stderr per logger so redirected streams are honoured
    return structlog.PrintLogger(file=sys.stderr)


def configure_logging(
    log_level: str = "WARNING",
    json_format: bool = False,
) -> None:
    """Configure structured logging with structlog.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        json_format: If True, output JSON; if False, output plain text
    """
    level = getattr(logging, log_level.upper())

    processors = [
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
        structlog.processors.format_exc_info,
    ]

    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=_stderr_logger,
        cache_logger_on_first_use=False,
    )

    # Standard library logging (urllib3 retries) goes to stderr too
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s"))
    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(level)

    structlog.get_logger().info(
        "logging_configured",
        log_level=log_level,
        json_format=json_format,
    )


def get_logger(name: Optional[str] = None) -> Any:
    """Get a structured logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Lazy structlog proxy carrying the optional name. It resolves
        the active configuration on each call, so module-level loggers
        pick up a later configure_logging().
    """
    if name:
        return structlog.get_logger(name, logger_name=name)
    return structlog.get_logger()


def log_api_request(
    query: str,
    days: int,
    status: str,
    duration_ms: float,
    **extra: Any,
) -> None:
    """Log a forecast API request.

    Args:
        query: Location query sent to the API
        days: Requested forecast days
        status: Request status (success, error, timeout)
        duration_ms: Request duration in milliseconds
        **extra: Additional context (status_code, error)
    """
    logger = get_logger("api")
    logger.info(
        "api_request",
        query=query,
        days=days,
        status=status,
        duration_ms=round(duration_ms, 2),
        **extra,
    )
