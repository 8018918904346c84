"""Health and metrics routes for the Temperature Service."""

from __future__ import annotations

import uuid

from dishka import FromDishka
from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, generate_latest
from quart import Blueprint, Response, jsonify
from quart_dishka import inject

from cep_service_libs.logging_utils import create_service_logger
from services.temperature_service.config import Settings

logger = create_service_logger("temperature_service.api.health")
health_bp = Blueprint("health_routes", __name__)


@health_bp.route("/healthz")
@inject
async def health_check(settings: FromDishka[Settings]) -> Response | tuple[Response, int]:
    """Standardized health check endpoint."""
    correlation_id = uuid.uuid4()

    health_response = {
        "service": "temperature_service",
        "status": "healthy",
        "message": "Temperature Service is healthy",
        "version": "1.0.0",
        "checks": {
            "service_responsive": True,
            "weather_api_key_configured": settings.WEATHER_API_KEY is not None,
        },
        "environment": settings.ENVIRONMENT.value,
        "correlation_id": str(correlation_id),
    }
    return jsonify(health_response), 200


@health_bp.route("/metrics")
@inject
async def metrics(registry: FromDishka[CollectorRegistry]) -> Response:
    """Prometheus metrics endpoint."""
    correlation_id = uuid.uuid4()

    try:
        metrics_data = generate_latest(registry)
        response = Response(metrics_data, content_type=CONTENT_TYPE_LATEST)
        response.headers["X-Correlation-ID"] = str(correlation_id)
        return response
    except Exception as e:
        logger.error(
            f"Error generating metrics: {e}",
            correlation_id=str(correlation_id),
            exc_info=True,
        )
        return Response("Error generating metrics", status=500)
