"""
Quart tracing middleware.

Attaches the trace context carried by inbound W3C headers to each request so
spans opened by handlers continue the caller's trace, and returns the active
trace id to the caller in ``X-Trace-ID``.
"""

from __future__ import annotations

from typing import Optional

from opentelemetry import context as otel_context
from opentelemetry.trace import Tracer
from quart import Quart, Response, g, request

from cep_service_libs.logging_utils import (
    bind_request_context,
    clear_request_context,
)
from cep_service_libs.observability.tracing import (
    extract_trace_context,
    get_current_trace_id,
)

TRACE_ID_HEADER = "X-Trace-ID"
CORRELATION_ID_HEADER = "X-Correlation-ID"


def setup_tracing_middleware(app: Quart, tracer: Optional[Tracer] = None) -> None:
    """Register request hooks that propagate trace context through *app*.

    Args:
        app: The Quart application to configure
        tracer: Service tracer; stored on ``app.tracer`` for handlers that
            look it up from the application
    """
    if tracer is not None:
        app.tracer = tracer  # type: ignore[attr-defined]

    @app.before_request
    async def attach_trace_context() -> None:
        ctx = extract_trace_context(request.headers)
        g.otel_context_token = otel_context.attach(ctx)

        correlation_id = request.headers.get(CORRELATION_ID_HEADER)
        if correlation_id:
            bind_request_context(correlation_id)

    @app.after_request
    async def add_trace_header(response: Response) -> Response:
        trace_id = get_current_trace_id()
        if trace_id:
            response.headers[TRACE_ID_HEADER] = trace_id
        return response

    @app.teardown_request
    async def detach_trace_context(exc: Optional[BaseException]) -> None:
        token = g.pop("otel_context_token", None)
        if token is not None:
            otel_context.detach(token)
        clear_request_context()
