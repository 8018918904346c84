"""Temperature lookup route for the Temperature Service."""

from __future__ import annotations

import uuid

from common_core.error_enums import ErrorCode
from dishka import FromDishka
from opentelemetry.trace import Tracer
from quart import Blueprint, Response, jsonify, request
from quart_dishka import inject

from cep_service_libs.error_handling import ServiceError
from cep_service_libs.logging_utils import bind_request_context, create_service_logger
from cep_service_libs.observability import trace_operation
from services.temperature_service.implementations.temperature_pipeline import (
    INVALID_ZIPCODE,
    TEMPERATURE_UNAVAILABLE,
    ZIPCODE_NOT_FOUND,
    TemperaturePipeline,
)

logger = create_service_logger("temperature_service.api.temperature")
temperature_bp = Blueprint("temperature_routes", __name__)

_ERROR_RESPONSES: dict[ErrorCode, tuple[int, str]] = {
    ErrorCode.VALIDATION_ERROR: (422, INVALID_ZIPCODE),
    ErrorCode.RESOURCE_NOT_FOUND: (404, ZIPCODE_NOT_FOUND),
    ErrorCode.EXTERNAL_SERVICE_ERROR: (500, TEMPERATURE_UNAVAILABLE),
}


def _text_response(message: str, status: int) -> Response:
    return Response(message, status=status, content_type="text/plain; charset=utf-8")


@temperature_bp.route("/temperature", methods=["GET"])
@inject
async def get_temperature(
    pipeline: FromDishka[TemperaturePipeline],
    tracer: FromDishka[Tracer],
) -> Response | tuple[Response, int]:
    """Return the current temperature for ``?cep=`` in C, F and K."""
    cep = request.args.get("cep", "")
    correlation_id = uuid.uuid4()
    bind_request_context(str(correlation_id), cep=cep)
    logger.info("Temperature request received", cep=cep)

    try:
        with trace_operation(tracer, "temperature-handler", {"cep": cep}):
            report = await pipeline.run(cep, correlation_id)
    except ServiceError as e:
        status, message = _ERROR_RESPONSES.get(
            e.error_detail.error_code, (500, TEMPERATURE_UNAVAILABLE)
        )
        logger.info("Temperature request failed", error_code=e.error_code, status=status)
        return _text_response(message, status)
    except Exception as e:
        logger.error("Unexpected error handling temperature request", error=str(e), exc_info=True)
        return _text_response(TEMPERATURE_UNAVAILABLE, 500)

    return jsonify(report.to_response()), 200
