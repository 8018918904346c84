"""
Structured Logging Utilities using Structlog.

This module provides composable logging utilities built on structlog,
shared by the CEP temperature HTTP services.

Key Features:
- Async-safe request context management with contextvars
- OpenTelemetry trace/span ids on every log line
- Environment-based output formatting
- Optional file-based logging with rotation
"""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

import structlog
from opentelemetry.trace import get_current_span
from structlog.contextvars import bind_contextvars, clear_contextvars, merge_contextvars
from structlog.typing import Processor


def add_service_context(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """
    Add OpenTelemetry service context to all logs.

    Fields added:
    - service.name: Logical service name (from SERVICE_NAME env var)
    - deployment.environment: Environment (development/production)
    """
    event_dict["service.name"] = os.getenv("SERVICE_NAME", "unknown")
    event_dict["deployment.environment"] = os.getenv("ENVIRONMENT", "development")
    return event_dict


def add_trace_context(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """
    Add the active span's trace_id and span_id to the log event.

    Ids are rendered as zero-padded lowercase hex (32 and 16 characters) so
    log lines can be joined against the tracing backend. Nothing is added
    when there is no valid active span.
    """
    span = get_current_span()
    if span is None:
        return event_dict

    span_context = span.get_span_context()
    if not span_context.is_valid:
        return event_dict

    event_dict["trace_id"] = format(span_context.trace_id, "032x")
    event_dict["span_id"] = format(span_context.span_id, "016x")
    return event_dict


def configure_service_logging(
    service_name: str,
    environment: str | None = None,
    log_level: str = "INFO",
    log_to_file: bool | None = None,
    log_file_path: str | None = None,
) -> None:
    """
    Configure structlog for a service.

    Args:
        service_name: Name of the service (e.g., "temperature-service")
        environment: Environment name (defaults to ENVIRONMENT env var)
        log_level: Logging level (defaults to "INFO")
        log_to_file: Enable file-based logging (defaults to LOG_TO_FILE env var)
        log_file_path: Path to log file (defaults to LOG_FILE_PATH env var
            or /app/logs/{service_name}.log)

    Environment Variables:
        LOG_FORMAT: Output format - "json" for JSON, "console" for human-readable (default: console)
        LOG_TO_FILE: Enable file logging (default: false)
        LOG_FILE_PATH: Custom log file path (default: /app/logs/{service_name}.log)
        LOG_MAX_BYTES: Max bytes per log file before rotation (default: 104857600 = 100MB)
        LOG_BACKUP_COUNT: Number of backup log files to keep (default: 10)
    """
    if environment is None:
        environment = os.getenv("ENVIRONMENT", "development")

    # Set environment variables for processors
    os.environ.setdefault("SERVICE_NAME", service_name)
    os.environ.setdefault("ENVIRONMENT", environment)

    if log_to_file is None:
        log_to_file = os.getenv("LOG_TO_FILE", "false").lower() in ("true", "1", "yes")

    # LOG_FORMAT wins; otherwise production logs JSON
    log_format = os.getenv("LOG_FORMAT", "").lower()
    use_json = log_format == "json" or (not log_format and environment == "production")

    shared_processors: list[Processor] = [
        merge_contextvars,
        add_service_context,
        add_trace_context,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            ],
        ),
    ]

    if use_json:
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.set_exc_info,
            structlog.dev.ConsoleRenderer(colors=True),
        ]

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    if log_to_file:
        if log_file_path is None:
            log_file_path = os.getenv("LOG_FILE_PATH", f"/app/logs/{service_name}.log")

        log_file = Path(log_file_path)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        max_bytes = int(os.getenv("LOG_MAX_BYTES", "104857600"))  # 100MB default
        backup_count = int(os.getenv("LOG_BACKUP_COUNT", "10"))

        handlers.append(
            RotatingFileHandler(
                filename=str(log_file),
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
            )
        )

    logging.basicConfig(
        format="%(message)s",
        handlers=handlers,
        level=getattr(logging, log_level.upper()),
        force=True,  # Force reconfiguration if already configured
    )

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def create_service_logger(name: str | None = None) -> Any:
    """
    Create a service logger with optional name binding.

    Args:
        name: Optional logger name (e.g., "app", "api", "pipeline")

    Returns:
        A configured structlog BoundLogger instance
    """
    logger = structlog.get_logger()

    if name:
        logger = logger.bind(logger_name=name)

    return logger


def bind_request_context(correlation_id: str, **additional_context: Any) -> None:
    """
    Reset the structlog context for a new request and bind its identifiers.

    Every log line emitted while handling the request carries
    ``correlation_id`` plus any additional context (path, method, ...).
    """
    clear_contextvars()
    bind_contextvars(correlation_id=correlation_id, **additional_context)


def clear_request_context() -> None:
    """Drop all request-scoped log context."""
    clear_contextvars()
