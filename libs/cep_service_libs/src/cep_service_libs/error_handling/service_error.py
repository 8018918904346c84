"""
ServiceError: the single exception type raised across service boundaries.

It wraps a pure ``ErrorDetail`` and records itself on the active
OpenTelemetry span at construction time, so each failure shows up on the
span of the stage where it happened.
"""

from __future__ import annotations

from typing import Any

from common_core.models.error_models import ErrorDetail
from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

from cep_service_libs.logging_utils import create_service_logger

logger = create_service_logger("error_handling.service_error")

_SPAN_ATTRIBUTE_TYPES = (str, bool, int, float)


class ServiceError(Exception):
    """Structured service exception carrying an ErrorDetail."""

    def __init__(self, error_detail: ErrorDetail) -> None:
        self.error_detail = error_detail
        super().__init__(error_detail.message)
        self._record_to_span()

    def __str__(self) -> str:
        return f"[{self.error_detail.error_code.value}] {self.error_detail.message}"

    @property
    def correlation_id(self) -> str:
        return str(self.error_detail.correlation_id)

    @property
    def error_code(self) -> str:
        return self.error_detail.error_code.value

    @property
    def service(self) -> str:
        return self.error_detail.service

    @property
    def operation(self) -> str:
        return self.error_detail.operation

    def to_dict(self) -> dict[str, Any]:
        """JSON-safe representation for logs and internal error bodies."""
        return self.error_detail.model_dump(mode="json")

    def _record_to_span(self) -> None:
        """Record the error on the current span if one is recording.

        Failures while recording are logged and swallowed; tracing must not
        change how the error propagates.
        """
        span = trace.get_current_span()
        if span is None or not span.is_recording():
            return

        detail = self.error_detail
        try:
            span.record_exception(self)
            span.set_status(Status(StatusCode.ERROR, detail.message))
            span.set_attribute("error", True)
            span.set_attribute("error.code", detail.error_code.value)
            span.set_attribute("error.message", detail.message)
            span.set_attribute("error.service", detail.service)
            span.set_attribute("error.operation", detail.operation)
            span.set_attribute("correlation_id", str(detail.correlation_id))
            for key, value in detail.details.items():
                if not isinstance(value, _SPAN_ATTRIBUTE_TYPES):
                    value = str(value)
                span.set_attribute(f"error.details.{key}", value)
        except Exception as e:
            logger.warning("Failed to record error on span", error=str(e))
