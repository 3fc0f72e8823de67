"""
Observability Infrastructure

Structured logging for the planning engine. The engine itself performs no
I/O; callers decide where log events go by calling
``setup_structured_logging`` once at start-up.
"""

import logging
import sys
from typing import Any

import structlog

from .config import Settings, settings


def setup_structured_logging(config: Settings | None = None) -> None:
    """Configure structured logging with console or JSON output."""
    config = config or settings

    log_level = getattr(logging, config.LOG_LEVEL.upper(), logging.INFO)

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.TimeStamper(fmt="ISO"),
        structlog.processors.add_log_level,
    ]

    if config.LOG_FORMAT == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=config.is_local))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)


def log_performance_metrics(
    operation: str,
    duration_seconds: float,
    metadata: dict[str, Any] | None = None,
) -> None:
    """Log performance metrics for operations."""
    logger = get_logger("performance")

    metrics_data: dict[str, Any] = {
        "operation": operation,
        "duration_seconds": duration_seconds,
    }

    if metadata:
        metrics_data.update(metadata)

    logger.debug("Performance metric recorded", **metrics_data)
