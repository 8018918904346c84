"""Tests for logging_utils processors and configuration."""

from typing import Any
from unittest.mock import Mock, patch

import pytest
import structlog
from opentelemetry import trace
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from cep_service_libs.logging_utils import (
    add_service_context,
    add_trace_context,
    bind_request_context,
    clear_request_context,
    configure_service_logging,
)


class TestAddServiceContext:
    """Tests for the add_service_context processor."""

    def test_adds_service_fields_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Verify service.name and deployment.environment come from the environment."""
        # Arrange
        monkeypatch.setenv("SERVICE_NAME", "temperature-service")
        monkeypatch.setenv("ENVIRONMENT", "production")
        event_dict: dict[str, Any] = {"event": "City found", "city": "São Paulo"}

        # Act
        result = add_service_context(None, "", event_dict)

        # Assert
        assert result["service.name"] == "temperature-service"
        assert result["deployment.environment"] == "production"
        assert result["city"] == "São Paulo"

    def test_defaults_when_env_missing(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Verify defaults when SERVICE_NAME and ENVIRONMENT are unset."""
        # Arrange
        monkeypatch.delenv("SERVICE_NAME", raising=False)
        monkeypatch.delenv("ENVIRONMENT", raising=False)

        # Act
        result = add_service_context(None, "", {})

        # Assert
        assert result["service.name"] == "unknown"
        assert result["deployment.environment"] == "development"


class TestAddTraceContext:
    """Tests for the add_trace_context processor."""

    def test_adds_ids_inside_span(
        self, opentelemetry_test_isolation: InMemorySpanExporter
    ) -> None:
        """Verify hex trace_id and span_id are added inside an active span."""
        # Arrange
        tracer = trace.get_tracer("test")

        # Act
        with tracer.start_as_current_span("convert-temperatures") as span:
            result = add_trace_context(None, "", {"event": "converted"})
            span_context = span.get_span_context()

        # Assert
        assert result["trace_id"] == format(span_context.trace_id, "032x")
        assert result["span_id"] == format(span_context.span_id, "016x")
        assert len(result["trace_id"]) == 32
        assert len(result["span_id"]) == 16

    def test_no_ids_without_span(self) -> None:
        """Verify the event is unchanged when there is no valid span."""
        # Act
        result = add_trace_context(None, "", {"event": "startup"})

        # Assert
        assert result == {"event": "startup"}

    @patch("cep_service_libs.logging_utils.get_current_span")
    def test_handles_none_span(self, mock_get_current_span: Mock) -> None:
        """Verify a None span is tolerated."""
        # Arrange
        mock_get_current_span.return_value = None

        # Act
        result = add_trace_context(None, "", {"event": "x"})

        # Assert
        assert "trace_id" not in result


class TestRequestContext:
    """Tests for request-scoped contextvars helpers."""

    def test_bind_and_clear(self) -> None:
        """Verify bound values are visible to merge_contextvars and cleared afterwards."""
        # Act
        bind_request_context("corr-123", path="/temperature")
        bound = structlog.contextvars.get_contextvars()
        clear_request_context()

        # Assert
        assert bound == {"correlation_id": "corr-123", "path": "/temperature"}
        assert structlog.contextvars.get_contextvars() == {}

    def test_bind_replaces_previous_request(self) -> None:
        """Verify context from a previous request does not leak into the next."""
        # Act
        bind_request_context("first", cep="01001000")
        bind_request_context("second")
        bound = structlog.contextvars.get_contextvars()
        clear_request_context()

        # Assert
        assert bound == {"correlation_id": "second"}


class TestConfigureServiceLogging:
    """Tests for configure_service_logging."""

    def test_file_handler_created(
        self, tmp_path: Any, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Verify a rotating file handler is configured when file logging is enabled."""
        # Arrange
        monkeypatch.delenv("LOG_FORMAT", raising=False)
        log_file = tmp_path / "logs" / "temperature-service.log"

        # Act
        with patch("cep_service_libs.logging_utils.logging.basicConfig") as mock_basic_config:
            configure_service_logging(
                "temperature-service",
                environment="development",
                log_to_file=True,
                log_file_path=str(log_file),
            )

        # Assert
        handlers = mock_basic_config.call_args.kwargs["handlers"]
        assert any(type(h).__name__ == "RotatingFileHandler" for h in handlers)
        assert log_file.parent.exists()
        for handler in handlers:
            handler.close()

    def test_json_renderer_in_production(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Verify production logging renders JSON."""
        # Arrange
        monkeypatch.delenv("LOG_FORMAT", raising=False)

        # Act
        with patch("cep_service_libs.logging_utils.structlog.configure") as mock_configure:
            configure_service_logging("input-service", environment="production")

        # Assert
        processors = mock_configure.call_args.kwargs["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_console_renderer_in_development(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Verify development logging uses the console renderer."""
        # Arrange
        monkeypatch.delenv("LOG_FORMAT", raising=False)

        # Act
        with patch("cep_service_libs.logging_utils.structlog.configure") as mock_configure:
            configure_service_logging("input-service", environment="development")

        # Assert
        processors = mock_configure.call_args.kwargs["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
