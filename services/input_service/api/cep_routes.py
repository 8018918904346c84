"""CEP submission route for the Input Service gateway."""

from __future__ import annotations

import uuid

from common_core.cep import clean_cep, is_valid_cep
from common_core.temperature_models import CepRequest, GatewayErrorResponse
from dishka import FromDishka
from opentelemetry.trace import Span, Tracer
from pydantic import ValidationError
from quart import Blueprint, Response, jsonify, request
from quart_dishka import inject

from cep_service_libs.error_handling import ServiceError, raise_validation_error
from cep_service_libs.logging_utils import bind_request_context, create_service_logger
from cep_service_libs.observability import trace_operation
from services.input_service.protocols import TemperatureServiceClientProtocol

logger = create_service_logger("input_service.api.cep")
cep_bp = Blueprint("cep_routes", __name__)

INVALID_ZIPCODE = "invalid zipcode"
INTERNAL_SERVER_ERROR = "internal server error"


def _error_response(message: str, status: int) -> tuple[Response, int]:
    return jsonify(GatewayErrorResponse(message=message).model_dump()), status


async def _read_cep(span: Span) -> str:
    """Parse the JSON body and return the cleaned CEP, or raise VALIDATION_ERROR."""
    raw_body = await request.get_data()
    try:
        cep_request = CepRequest.model_validate_json(raw_body)
    except ValidationError as e:
        span.set_attribute("validation.error", "invalid request body")
        raise_validation_error(
            service="input_service",
            operation="validate_cep",
            field="cep",
            message=INVALID_ZIPCODE,
            error_count=e.error_count(),
        )

    span.set_attribute("cep", cep_request.cep)
    cep = clean_cep(cep_request.cep)
    if not is_valid_cep(cep):
        span.set_attribute("validation.error", "invalid cep format")
        raise_validation_error(
            service="input_service",
            operation="validate_cep",
            field="cep",
            message=INVALID_ZIPCODE,
            cep=cep_request.cep,
        )
    return cep


@cep_bp.route("/", methods=["POST"])
@cep_bp.route("/temperature", methods=["POST"])
@inject
async def submit_cep(
    client: FromDishka[TemperatureServiceClientProtocol],
    tracer: FromDishka[Tracer],
) -> Response | tuple[Response, int]:
    """Validate ``{"cep": ...}`` and relay the temperature service's answer."""
    bind_request_context(str(uuid.uuid4()))

    try:
        with trace_operation(tracer, "validate-cep") as span:
            cep = await _read_cep(span)
    except ServiceError:
        logger.info("Rejected CEP request")
        return _error_response(INVALID_ZIPCODE, 422)

    logger.info("Forwarding CEP to temperature service", cep=cep)
    try:
        upstream = await client.fetch_temperature(cep)
    except ServiceError as e:
        logger.error("Temperature service unreachable", error_code=e.error_code)
        return _error_response(INTERNAL_SERVER_ERROR, 500)
    except Exception as e:
        logger.error("Unexpected error forwarding CEP", error=str(e), exc_info=True)
        return _error_response(INTERNAL_SERVER_ERROR, 500)

    return Response(upstream.body, status=upstream.status_code, content_type=upstream.content_type)
