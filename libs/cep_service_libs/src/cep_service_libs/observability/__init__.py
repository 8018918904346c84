"""Distributed tracing utilities."""

from cep_service_libs.observability.tracing import (
    extract_trace_context,
    get_current_trace_id,
    get_tracer,
    init_tracing,
    inject_trace_context,
    shutdown_tracing,
    trace_operation,
)

__all__ = [
    "extract_trace_context",
    "get_current_trace_id",
    "get_tracer",
    "init_tracing",
    "inject_trace_context",
    "shutdown_tracing",
    "trace_operation",
]
