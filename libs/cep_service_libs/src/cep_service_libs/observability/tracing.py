"""
OpenTelemetry tracing setup and helpers.

The tracer provider is process-wide: ``init_tracing`` installs it once when
a service starts serving and ``shutdown_tracing`` flushes it once when the
service stops. Request handlers only borrow tracers from it.

Trace context crosses service boundaries as W3C ``traceparent`` headers.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, Mapping, MutableMapping

from opentelemetry import trace
from opentelemetry.context import Context
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.propagate import extract, inject, set_global_textmap
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.sdk.trace.sampling import ALWAYS_ON
from opentelemetry.trace import Span, Status, StatusCode, Tracer
from opentelemetry.trace.propagation.tracecontext import TraceContextTextMapPropagator

from cep_service_libs.error_handling.service_error import ServiceError
from cep_service_libs.logging_utils import create_service_logger

logger = create_service_logger("observability.tracing")

_tracer_provider: TracerProvider | None = None


def init_tracing(
    service_name: str,
    otlp_endpoint: str | None = None,
    environment: str = "development",
) -> Tracer:
    """
    Install the process-wide tracer provider and return a tracer for the service.

    Spans are exported over OTLP/gRPC in batches when *otlp_endpoint* is set.
    Without an endpoint spans are still created (ids propagate downstream
    and appear in logs) but nothing is exported.
    """
    global _tracer_provider

    resource = Resource.create(
        {
            SERVICE_NAME: service_name,
            "deployment.environment": environment,
        }
    )
    provider = TracerProvider(resource=resource, sampler=ALWAYS_ON)

    if otlp_endpoint:
        exporter = OTLPSpanExporter(endpoint=otlp_endpoint, insecure=True)
        provider.add_span_processor(BatchSpanProcessor(exporter))
        logger.info("OTLP span exporter configured", otlp_endpoint=otlp_endpoint)
    else:
        logger.warning("No OTLP endpoint configured; spans will not be exported")

    trace.set_tracer_provider(provider)
    set_global_textmap(TraceContextTextMapPropagator())
    _tracer_provider = provider

    return trace.get_tracer(service_name)


def shutdown_tracing() -> None:
    """Flush pending spans and shut the tracer provider down."""
    global _tracer_provider

    if _tracer_provider is None:
        return

    _tracer_provider.force_flush()
    _tracer_provider.shutdown()
    _tracer_provider = None


def get_tracer(name: str) -> Tracer:
    """Return a tracer from the global provider (no-op until init_tracing runs)."""
    return trace.get_tracer(name)


@contextmanager
def trace_operation(
    tracer: Tracer,
    operation_name: str,
    attributes: Mapping[str, Any] | None = None,
) -> Iterator[Span]:
    """
    Run the enclosed block inside a child span of the current span.

    The span status follows the block: OK when it completes, ERROR when it
    raises. ``ServiceError`` records itself on the active span when it is
    created, so only other exceptions are recorded here.
    """
    with tracer.start_as_current_span(
        operation_name,
        attributes=dict(attributes) if attributes else None,
        record_exception=False,
        set_status_on_exception=False,
    ) as span:
        try:
            yield span
        except ServiceError as e:
            span.set_status(Status(StatusCode.ERROR, e.error_detail.message))
            raise
        except Exception as e:
            span.record_exception(e)
            span.set_status(Status(StatusCode.ERROR, str(e)))
            raise
        else:
            span.set_status(Status(StatusCode.OK))


def inject_trace_context(carrier: MutableMapping[str, str]) -> None:
    """Write the current trace context into *carrier* (e.g. outbound HTTP headers)."""
    inject(carrier)


def extract_trace_context(carrier: Any) -> Context:
    """Build a context from trace headers found in *carrier*.

    Header lookups go through ``carrier.get``, so pass inbound request headers
    as they are (case-insensitive) rather than a plain dict copy.
    """
    return extract(carrier)


def get_current_trace_id() -> str | None:
    """Return the active trace id as 32 hex characters, or None without an active trace."""
    span_context = trace.get_current_span().get_span_context()
    if not span_context.is_valid:
        return None
    return format(span_context.trace_id, "032x")
