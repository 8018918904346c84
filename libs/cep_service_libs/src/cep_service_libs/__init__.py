"""
Shared service infrastructure for the CEP temperature services.

Logging, settings, structured errors, tracing and HTTP middleware used by
both the temperature service and the input gateway.
"""

from cep_service_libs.logging_utils import configure_service_logging, create_service_logger
from cep_service_libs.metrics_middleware import create_http_metrics, setup_metrics_middleware
from cep_service_libs.middleware import setup_tracing_middleware
from cep_service_libs.observability import (
    extract_trace_context,
    get_current_trace_id,
    get_tracer,
    init_tracing,
    inject_trace_context,
    shutdown_tracing,
    trace_operation,
)
from cep_service_libs.quart_app import ServiceApp

__all__ = [
    "ServiceApp",
    "configure_service_logging",
    "create_http_metrics",
    "create_service_logger",
    "extract_trace_context",
    "get_current_trace_id",
    "get_tracer",
    "init_tracing",
    "inject_trace_context",
    "setup_metrics_middleware",
    "setup_tracing_middleware",
    "shutdown_tracing",
    "trace_operation",
]
