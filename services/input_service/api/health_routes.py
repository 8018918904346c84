"""Health and metrics routes for the Input Service."""

from __future__ import annotations

import uuid

from dishka import FromDishka
from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, generate_latest
from quart import Blueprint, Response, jsonify
from quart_dishka import inject

from cep_service_libs.logging_utils import create_service_logger
from services.input_service.config import Settings

logger = create_service_logger("input_service.api.health")
health_bp = Blueprint("health_routes", __name__)


@health_bp.route("/healthz")
@inject
async def health_check(settings: FromDishka[Settings]) -> Response | tuple[Response, int]:
    """Standardized health check endpoint."""
    return jsonify(
        {
            "service": "input_service",
            "status": "healthy",
            "message": "Input Service is healthy",
            "version": "1.0.0",
            "checks": {"service_responsive": True},
            "dependencies": {
                "temperature_service": {"url": settings.TEMPERATURE_SERVICE_URL},
            },
            "environment": settings.ENVIRONMENT.value,
            "correlation_id": str(uuid.uuid4()),
        }
    ), 200


@health_bp.route("/metrics")
@inject
async def metrics(registry: FromDishka[CollectorRegistry]) -> Response:
    """Prometheus metrics endpoint."""
    try:
        return Response(generate_latest(registry), content_type=CONTENT_TYPE_LATEST)
    except Exception as e:
        logger.error(f"Error generating metrics: {e}", exc_info=True)
        return Response("Error generating metrics", status=500)
