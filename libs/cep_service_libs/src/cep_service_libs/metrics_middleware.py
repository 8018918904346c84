"""Shared Prometheus metrics middleware for the Quart services."""

from __future__ import annotations

import time
from typing import Any

from prometheus_client import CollectorRegistry, Counter, Histogram
from quart import Quart, Response, current_app, g, request

from cep_service_libs.logging_utils import create_service_logger

logger = create_service_logger("metrics_middleware")

REQUEST_COUNT_METRIC = "http_requests_total"
REQUEST_DURATION_METRIC = "http_request_duration_seconds"


def setup_metrics_middleware(
    app: Quart,
    request_count_metric_name: str = REQUEST_COUNT_METRIC,
    request_duration_metric_name: str = REQUEST_DURATION_METRIC,
    status_label_name: str = "status_code",
    logger_name: str | None = None,
) -> None:
    """Setup Prometheus metrics middleware for a Quart application.

    Args:
        app: The Quart application to configure
        request_count_metric_name: Key of the request counter in the metrics dict
        request_duration_metric_name: Key of the duration histogram in the metrics dict
        status_label_name: Name of the status code label
        logger_name: Optional custom logger name for this service

    Note:
        The metric instances must be stored in app.extensions["metrics"] as a
        dict, typically built with ``create_http_metrics`` in startup_setup.py.
    """
    service_logger = create_service_logger(logger_name) if logger_name else logger

    @app.before_request
    async def record_start_time() -> None:
        g.start_time = time.time()

    @app.after_request
    async def record_request_metrics(response: Response) -> Response:
        try:
            start_time = getattr(g, "start_time", None)
            extensions = getattr(current_app, "extensions", {})
            metrics = extensions.get("metrics", {}) if extensions else {}

            if start_time is not None and metrics:
                duration = time.time() - start_time
                endpoint = request.path
                method = request.method

                request_count = metrics.get(request_count_metric_name)
                request_duration = metrics.get(request_duration_metric_name)

                if request_count:
                    request_count.labels(
                        method=method,
                        endpoint=endpoint,
                        **{status_label_name: str(response.status_code)},
                    ).inc()
                if request_duration:
                    request_duration.labels(method=method, endpoint=endpoint).observe(duration)

        except Exception as e:
            service_logger.error(f"Error recording request metrics: {e}")

        return response


def create_http_metrics(registry: CollectorRegistry) -> dict[str, Any]:
    """Create the request counter and duration histogram read by the middleware."""
    return {
        REQUEST_COUNT_METRIC: Counter(
            REQUEST_COUNT_METRIC,
            "Total HTTP requests",
            ["method", "endpoint", "status_code"],
            registry=registry,
        ),
        REQUEST_DURATION_METRIC: Histogram(
            REQUEST_DURATION_METRIC,
            "HTTP request duration in seconds",
            ["method", "endpoint"],
            registry=registry,
        ),
    }
