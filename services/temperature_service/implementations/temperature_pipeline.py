"""
Temperature lookup pipeline.

validate CEP -> geocode (city) -> weather (Celsius) -> convert. Each stage
runs in its own child span of the request span. The first failing stage
ends the run with one stage-level error:

    invalid CEP          -> VALIDATION_ERROR
    any geocode failure  -> RESOURCE_NOT_FOUND
    any weather failure  -> EXTERNAL_SERVICE_ERROR

The whole run shares one deadline. A stage still running when it expires
fails with TIMEOUT, which maps like any other failure of that stage.
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, Optional, TypeVar
from uuid import UUID

from common_core.cep import is_valid_cep
from common_core.error_enums import PipelineOutcome
from common_core.temperature_models import TemperatureReport
from opentelemetry.trace import Tracer

from cep_service_libs.error_handling import (
    ServiceError,
    raise_external_service_error,
    raise_resource_not_found,
    raise_timeout_error,
    raise_validation_error,
)
from cep_service_libs.logging_utils import create_service_logger
from cep_service_libs.observability import trace_operation
from services.temperature_service.implementations.temperature_converter import (
    convert_temperature,
)
from services.temperature_service.protocols import (
    GeocodeClientProtocol,
    TemperatureMetricsProtocol,
    WeatherClientProtocol,
)

logger = create_service_logger("temperature_service.pipeline")

SERVICE_NAME = "temperature_service"

INVALID_ZIPCODE = "invalid zipcode"
ZIPCODE_NOT_FOUND = "can not find zipcode"
TEMPERATURE_UNAVAILABLE = "error getting temperature"

T = TypeVar("T")


class TemperaturePipeline:
    """Runs one CEP lookup from validation to the converted report."""

    def __init__(
        self,
        geocode_client: GeocodeClientProtocol,
        weather_client: WeatherClientProtocol,
        metrics: TemperatureMetricsProtocol,
        tracer: Tracer,
        request_timeout_seconds: float = 30.0,
    ) -> None:
        self.geocode_client = geocode_client
        self.weather_client = weather_client
        self.metrics = metrics
        self.tracer = tracer
        self.request_timeout_seconds = request_timeout_seconds

    async def _before_deadline(
        self,
        stage: Awaitable[T],
        deadline: float,
        operation: str,
        correlation_id: Optional[UUID],
    ) -> T:
        try:
            async with asyncio.timeout_at(deadline):
                return await stage
        except TimeoutError:
            raise_timeout_error(
                service=SERVICE_NAME,
                operation=operation,
                timeout_seconds=self.request_timeout_seconds,
                message="Request deadline exceeded",
                correlation_id=correlation_id,
            )

    async def run(self, cep: str, correlation_id: Optional[UUID] = None) -> TemperatureReport:
        """
        Resolve *cep* to a TemperatureReport.

        Raises:
            ServiceError: with VALIDATION_ERROR, RESOURCE_NOT_FOUND or
                EXTERNAL_SERVICE_ERROR as described in the module docstring
        """
        if not is_valid_cep(cep):
            logger.info("Rejected malformed CEP", cep=cep)
            self.metrics.record_lookup(PipelineOutcome.INVALID_CEP)
            raise_validation_error(
                service=SERVICE_NAME,
                operation="validate_cep",
                field="cep",
                message=INVALID_ZIPCODE,
                correlation_id=correlation_id,
                cep=cep,
            )

        deadline = asyncio.get_running_loop().time() + self.request_timeout_seconds

        try:
            with trace_operation(self.tracer, "get-city-from-cep", {"cep": cep}) as span:
                city = await self._before_deadline(
                    self.geocode_client.resolve_city(cep, span),
                    deadline,
                    "get_city_from_cep",
                    correlation_id,
                )
        except ServiceError as e:
            logger.warning("City lookup failed", cep=cep, error_code=e.error_code)
            self.metrics.record_lookup(PipelineOutcome.CEP_NOT_FOUND)
            raise_resource_not_found(
                service=SERVICE_NAME,
                operation="get_city_from_cep",
                resource_type="zipcode",
                resource_id=cep,
                correlation_id=correlation_id,
                cause=e.error_code,
            )
        logger.info("City found", cep=cep, city=city)

        try:
            with trace_operation(
                self.tracer, "get-temperature-from-weather-api", {"city": city}
            ) as span:
                celsius = await self._before_deadline(
                    self.weather_client.resolve_temperature(city, span),
                    deadline,
                    "get_temperature_from_weather_api",
                    correlation_id,
                )
        except ServiceError as e:
            logger.warning("Temperature lookup failed", city=city, error_code=e.error_code)
            self.metrics.record_lookup(PipelineOutcome.WEATHER_ERROR)
            raise_external_service_error(
                service=SERVICE_NAME,
                operation="get_temperature_from_weather_api",
                external_service="weatherapi",
                message=TEMPERATURE_UNAVAILABLE,
                correlation_id=correlation_id,
                cause=e.error_code,
            )
        logger.info("Temperature obtained", city=city, temp_c=celsius)

        with trace_operation(self.tracer, "convert-temperatures", {"temperature.celsius": celsius}) as span:
            report = convert_temperature(celsius, city)
            span.set_attribute("temperature.fahrenheit", report.temp_f)
            span.set_attribute("temperature.kelvin", report.temp_k)

        logger.info(
            "Temperatures converted",
            city=city,
            temp_c=report.temp_c,
            temp_f=report.temp_f,
            temp_k=report.temp_k,
        )
        self.metrics.record_lookup(PipelineOutcome.SUCCESS)
        return report
