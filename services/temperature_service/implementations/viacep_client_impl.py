"""ViaCEP geocode client implementation."""

from __future__ import annotations

import asyncio

import aiohttp
from common_core.temperature_models import ViaCepResponse
from opentelemetry.trace import Span
from pydantic import ValidationError

from cep_service_libs.error_handling import (
    raise_connection_error,
    raise_external_service_error,
    raise_parsing_error,
    raise_resource_not_found,
    raise_timeout_error,
)
from cep_service_libs.logging_utils import create_service_logger
from services.temperature_service.config import Settings
from services.temperature_service.protocols import GeocodeClientProtocol

logger = create_service_logger("temperature_service.viacep_client")

SERVICE_NAME = "temperature_service"
OPERATION = "resolve_city"


class ViaCepClientImpl(GeocodeClientProtocol):
    """HTTP client for the ViaCEP postal code directory."""

    def __init__(self, settings: Settings, http_session: aiohttp.ClientSession):
        self.settings = settings
        self.http_session = http_session

    async def resolve_city(self, cep: str, span: Span) -> str:
        url = f"{self.settings.VIACEP_BASE_URL.rstrip('/')}/{cep}/json/"
        span.set_attribute("viacep.url", url)
        span.set_attribute("viacep.cep", cep)
        span.set_attribute("http.method", "GET")

        timeout_seconds = self.settings.HTTP_CLIENT_TIMEOUT_SECONDS
        try:
            async with self.http_session.get(
                url, timeout=aiohttp.ClientTimeout(total=timeout_seconds)
            ) as response:
                span.set_attribute("http.status_code", response.status)
                if response.status != 200:
                    logger.warning("ViaCEP returned unexpected status", cep=cep, status=response.status)
                    raise_external_service_error(
                        service=SERVICE_NAME,
                        operation=OPERATION,
                        external_service="viacep",
                        message=f"ViaCEP API returned status: {response.status}",
                        status_code=response.status,
                    )
                body = await response.read()

        except asyncio.TimeoutError:
            logger.error("Timeout while querying ViaCEP", cep=cep, timeout_seconds=timeout_seconds)
            raise_timeout_error(
                service=SERVICE_NAME,
                operation=OPERATION,
                timeout_seconds=timeout_seconds,
                message="ViaCEP request timed out",
                external_service="viacep",
            )
        except aiohttp.ClientError as e:
            logger.error("HTTP client error while querying ViaCEP", cep=cep, error=str(e))
            raise_connection_error(
                service=SERVICE_NAME,
                operation=OPERATION,
                target="viacep",
                message=f"ViaCEP request failed: {e}",
            )

        try:
            payload = ViaCepResponse.model_validate_json(body)
        except ValidationError as e:
            logger.error("Failed to decode ViaCEP response", cep=cep, error=str(e))
            raise_parsing_error(
                service=SERVICE_NAME,
                operation=OPERATION,
                parse_target="viacep_response",
                message="Failed to decode ViaCEP response",
            )

        span.set_attribute("viacep.localidade", payload.localidade)
        span.set_attribute("viacep.erro", payload.erro)

        if payload.erro or not payload.localidade:
            logger.info("CEP not found in ViaCEP", cep=cep, erro=payload.erro)
            raise_resource_not_found(
                service=SERVICE_NAME,
                operation=OPERATION,
                resource_type="CEP",
                resource_id=cep,
            )

        return payload.localidade
