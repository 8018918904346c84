"""WeatherAPI client implementation."""

from __future__ import annotations

import asyncio
from urllib.parse import quote_plus

import aiohttp
from common_core.temperature_models import WeatherApiResponse
from opentelemetry.trace import Span
from pydantic import ValidationError

from cep_service_libs.error_handling import (
    raise_configuration_error,
    raise_connection_error,
    raise_external_service_error,
    raise_parsing_error,
    raise_timeout_error,
)
from cep_service_libs.logging_utils import create_service_logger
from services.temperature_service.config import Settings
from services.temperature_service.protocols import WeatherClientProtocol

logger = create_service_logger("temperature_service.weather_client")

SERVICE_NAME = "temperature_service"
OPERATION = "resolve_temperature"


class WeatherApiClientImpl(WeatherClientProtocol):
    """HTTP client for WeatherAPI current conditions."""

    def __init__(self, settings: Settings, http_session: aiohttp.ClientSession):
        self.settings = settings
        self.http_session = http_session

    def _api_key(self) -> str:
        key = self.settings.WEATHER_API_KEY
        return key.get_secret_value() if key is not None else ""

    async def resolve_temperature(self, city: str, span: Span) -> float:
        """
        Fetch the current temperature in Celsius for *city*.

        The key is checked before any request is made. Only the redacted URL
        is put on the span or in logs.
        """
        api_key = self._api_key()
        if not api_key:
            logger.error("Weather API key is not configured")
            raise_configuration_error(
                service=SERVICE_NAME,
                operation=OPERATION,
                config_key="WEATHER_API_KEY",
                message="Weather API key is not configured",
            )

        base_url = self.settings.WEATHER_API_BASE_URL
        escaped_city = quote_plus(city)
        url = f"{base_url}?key={quote_plus(api_key)}&q={escaped_city}"
        redacted_url = f"{base_url}?key=***&q={escaped_city}"

        span.set_attribute("weather.url", redacted_url)
        span.set_attribute("weather.city", city)
        span.set_attribute("http.method", "GET")

        timeout_seconds = self.settings.HTTP_CLIENT_TIMEOUT_SECONDS
        try:
            async with self.http_session.get(
                url, timeout=aiohttp.ClientTimeout(total=timeout_seconds)
            ) as response:
                span.set_attribute("http.status_code", response.status)
                if response.status != 200:
                    logger.warning(
                        "WeatherAPI returned unexpected status", city=city, status=response.status
                    )
                    raise_external_service_error(
                        service=SERVICE_NAME,
                        operation=OPERATION,
                        external_service="weatherapi",
                        message=f"WeatherAPI returned status: {response.status}",
                        status_code=response.status,
                    )
                body = await response.read()

        except asyncio.TimeoutError:
            logger.error("Timeout while querying WeatherAPI", city=city, timeout_seconds=timeout_seconds)
            raise_timeout_error(
                service=SERVICE_NAME,
                operation=OPERATION,
                timeout_seconds=timeout_seconds,
                message="WeatherAPI request timed out",
                external_service="weatherapi",
            )
        except aiohttp.ClientError as e:
            # aiohttp error text can embed the request URL
            logger.error(
                "HTTP client error while querying WeatherAPI",
                city=city,
                error_type=type(e).__name__,
            )
            raise_connection_error(
                service=SERVICE_NAME,
                operation=OPERATION,
                target="weatherapi",
                message=f"WeatherAPI request failed: {type(e).__name__}",
            )

        try:
            payload = WeatherApiResponse.model_validate_json(body)
        except ValidationError as e:
            logger.error("Failed to decode WeatherAPI response", city=city, error_count=e.error_count())
            raise_parsing_error(
                service=SERVICE_NAME,
                operation=OPERATION,
                parse_target="weatherapi_response",
                message="Failed to decode WeatherAPI response",
            )

        temp_c = payload.current.temp_c
        span.set_attribute("weather.temp_c", temp_c)
        return temp_c
