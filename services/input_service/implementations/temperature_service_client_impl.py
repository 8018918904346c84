"""Temperature Service client implementation."""

from __future__ import annotations

import asyncio

import aiohttp
from opentelemetry.trace import Tracer

from cep_service_libs.error_handling import raise_connection_error, raise_timeout_error
from cep_service_libs.logging_utils import create_service_logger
from cep_service_libs.observability import inject_trace_context, trace_operation
from services.input_service.config import Settings
from services.input_service.protocols import (
    TemperatureServiceClientProtocol,
    TemperatureServiceResponse,
)

logger = create_service_logger("input_service.temperature_client")

SERVICE_NAME = "input_service"
OPERATION = "fetch_temperature"


class TemperatureServiceClientImpl(TemperatureServiceClientProtocol):
    """HTTP client for the temperature service."""

    def __init__(self, settings: Settings, http_session: aiohttp.ClientSession, tracer: Tracer):
        self.settings = settings
        self.http_session = http_session
        self.tracer = tracer

    async def fetch_temperature(self, cep: str) -> TemperatureServiceResponse:
        url = f"{self.settings.TEMPERATURE_SERVICE_URL.rstrip('/')}/temperature"
        timeout_seconds = self.settings.HTTP_CLIENT_TIMEOUT_SECONDS

        with trace_operation(
            self.tracer,
            "call-temperature-service",
            {"temperature_service.url": url, "clean_cep": cep, "http.method": "GET"},
        ) as span:
            headers: dict[str, str] = {}
            inject_trace_context(headers)

            try:
                async with self.http_session.get(
                    url,
                    params={"cep": cep},
                    headers=headers,
                    timeout=aiohttp.ClientTimeout(total=timeout_seconds),
                ) as response:
                    body = await response.read()
                    span.set_attribute("http.status_code", response.status)
                    logger.info("Temperature service responded", cep=cep, status=response.status)
                    return TemperatureServiceResponse(
                        status_code=response.status,
                        body=body,
                        content_type=response.headers.get("Content-Type", "application/json"),
                    )

            except asyncio.TimeoutError:
                logger.error(
                    "Timeout while calling temperature service",
                    cep=cep,
                    timeout_seconds=timeout_seconds,
                )
                raise_timeout_error(
                    service=SERVICE_NAME,
                    operation=OPERATION,
                    timeout_seconds=timeout_seconds,
                    message="Temperature service request timed out",
                )
            except aiohttp.ClientError as e:
                logger.error("HTTP client error while calling temperature service", cep=cep, error=str(e))
                raise_connection_error(
                    service=SERVICE_NAME,
                    operation=OPERATION,
                    target="temperature_service",
                    message=f"Temperature service request failed: {e}",
                )
