"""
Factory for ErrorDetail instances with automatic context capture.
"""

from __future__ import annotations

import traceback
import uuid
from datetime import datetime, timezone
from typing import Any, Optional
from uuid import UUID

from common_core.error_enums import ErrorCode
from common_core.models.error_models import ErrorDetail
from opentelemetry import trace

_NO_EXCEPTION_TRACE = "NoneType: None"


def create_error_detail_with_context(
    error_code: ErrorCode,
    message: str,
    service: str,
    operation: str,
    correlation_id: Optional[UUID] = None,
    details: Optional[dict[str, Any]] = None,
    capture_stack: bool = True,
) -> ErrorDetail:
    """
    Create an ErrorDetail, filling in timestamp, correlation id, stack trace
    and the active trace/span ids.

    Args:
        error_code: Error classification
        message: Human-readable message (internal; never sent to clients)
        service: Service raising the error
        operation: Operation that failed
        correlation_id: Request correlation id; generated when omitted
        details: Extra structured context
        capture_stack: Whether to attach a stack trace

    Returns:
        Frozen ErrorDetail
    """
    stack_trace: Optional[str] = None
    if capture_stack:
        stack_trace = traceback.format_exc()
        if stack_trace.strip() == _NO_EXCEPTION_TRACE:
            stack_trace = "".join(traceback.format_stack())

    trace_id: Optional[str] = None
    span_id: Optional[str] = None
    span = trace.get_current_span()
    if span and span.is_recording():
        span_context = span.get_span_context()
        trace_id = format(span_context.trace_id, "032x")
        span_id = format(span_context.span_id, "016x")

    return ErrorDetail(
        error_code=error_code,
        message=message,
        correlation_id=correlation_id or uuid.uuid4(),
        timestamp=datetime.now(timezone.utc),
        service=service,
        operation=operation,
        details=details or {},
        stack_trace=stack_trace,
        trace_id=trace_id,
        span_id=span_id,
    )
