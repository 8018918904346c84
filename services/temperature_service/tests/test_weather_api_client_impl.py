"""
Tests for the WeatherAPI client.
"""

from __future__ import annotations

import asyncio
import re
from unittest.mock import MagicMock

import aiohttp
import pytest
from aioresponses import aioresponses
from common_core.error_enums import ErrorCode
from opentelemetry.trace import Span

from cep_service_libs.error_handling import ServiceError
from services.temperature_service.config import Settings
from services.temperature_service.implementations.weather_api_client_impl import (
    WeatherApiClientImpl,
)

WEATHER_URL = re.compile(r"^http://weather\.test/v1/current\.json\?.*$")


@pytest.fixture
def mock_span() -> MagicMock:
    return MagicMock(spec=Span)


@pytest.fixture
def client(test_settings: Settings, http_session: aiohttp.ClientSession) -> WeatherApiClientImpl:
    return WeatherApiClientImpl(test_settings, http_session)


def _attributes(span: MagicMock) -> dict:
    return {call[0][0]: call[0][1] for call in span.set_attribute.call_args_list}


def _requested_urls(m: aioresponses) -> list:
    return [url for (_method, url) in m.requests.keys()]


class TestResolveTemperature:
    """Test successful lookups."""

    async def test_returns_celsius_and_escapes_city(
        self, client: WeatherApiClientImpl, mock_span: MagicMock
    ) -> None:
        """Test the city is query-escaped and temp_c is returned."""
        # Arrange
        with aioresponses() as m:
            m.get(WEATHER_URL, payload={"location": {"name": "Sao Paulo"}, "current": {"temp_c": 25.5}})

            # Act
            temp_c = await client.resolve_temperature("São Paulo", mock_span)

        # Assert
        assert temp_c == 25.5
        (url,) = _requested_urls(m)
        assert url.query["key"] == "test-key"
        assert url.query["q"] == "São Paulo"
        assert _attributes(mock_span)["weather.url"].endswith("&q=S%C3%A3o+Paulo")

    async def test_api_key_redacted_on_span(
        self, client: WeatherApiClientImpl, mock_span: MagicMock
    ) -> None:
        """Test the recorded URL never contains the API key."""
        with aioresponses() as m:
            m.get(WEATHER_URL, payload={"current": {"temp_c": 18.0}})

            await client.resolve_temperature("Curitiba", mock_span)

        attributes = _attributes(mock_span)
        assert attributes["weather.url"] == "http://weather.test/v1/current.json?key=***&q=Curitiba"
        assert all("test-key" not in str(value) for value in attributes.values())
        assert attributes["http.status_code"] == 200

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"current": {}},
            {"current": {"condition": "Sunny"}},
            {"current": {"temp_c": None}},
            {"current": None},
        ],
    )
    async def test_missing_temperature_is_zero(
        self, client: WeatherApiClientImpl, mock_span: MagicMock, payload: dict
    ) -> None:
        """Test a parseable body with a missing or null temp_c yields a 0.0 reading."""
        with aioresponses() as m:
            m.get(WEATHER_URL, payload=payload)

            temp_c = await client.resolve_temperature("Recife", mock_span)

        assert temp_c == 0.0

    async def test_integer_temperature(
        self, client: WeatherApiClientImpl, mock_span: MagicMock
    ) -> None:
        with aioresponses() as m:
            m.get(WEATHER_URL, payload={"current": {"temp_c": 30}})

            temp_c = await client.resolve_temperature("Manaus", mock_span)

        assert temp_c == 30.0


class TestResolveTemperatureFailures:
    """Test configuration, transport, status and decoding failures."""

    async def test_missing_api_key_makes_no_request(
        self, test_settings: Settings, http_session: aiohttp.ClientSession, mock_span: MagicMock
    ) -> None:
        """Test an absent key fails with CONFIGURATION_ERROR before any network call."""
        # Arrange
        settings = test_settings.model_copy(update={"WEATHER_API_KEY": None})
        client = WeatherApiClientImpl(settings, http_session)

        with aioresponses() as m:
            m.get(WEATHER_URL, payload={"current": {"temp_c": 25.5}})

            # Act
            with pytest.raises(ServiceError) as exc_info:
                await client.resolve_temperature("São Paulo", mock_span)

        # Assert
        assert exc_info.value.error_detail.error_code == ErrorCode.CONFIGURATION_ERROR
        assert not m.requests

    async def test_unauthorized(self, client: WeatherApiClientImpl, mock_span: MagicMock) -> None:
        """Test a 401 from WeatherAPI is an EXTERNAL_SERVICE_ERROR."""
        with aioresponses() as m:
            m.get(WEATHER_URL, status=401, payload={"error": {"code": 2006, "message": "API key is invalid."}})

            with pytest.raises(ServiceError) as exc_info:
                await client.resolve_temperature("São Paulo", mock_span)

        detail = exc_info.value.error_detail
        assert detail.error_code == ErrorCode.EXTERNAL_SERVICE_ERROR
        assert detail.details["status_code"] == 401

    @pytest.mark.parametrize(
        "body",
        ["not json", '{"current": {"temp_c": "hot"}}', '{"current": {"temp_c": "25.5"}}'],
    )
    async def test_undecodable_body(
        self, client: WeatherApiClientImpl, mock_span: MagicMock, body: str
    ) -> None:
        """Test non-JSON bodies and non-numeric temp_c are PARSING_ERROR."""
        with aioresponses() as m:
            m.get(WEATHER_URL, status=200, body=body, content_type="application/json")

            with pytest.raises(ServiceError) as exc_info:
                await client.resolve_temperature("Natal", mock_span)

        assert exc_info.value.error_detail.error_code == ErrorCode.PARSING_ERROR

    async def test_connection_error(self, client: WeatherApiClientImpl, mock_span: MagicMock) -> None:
        with aioresponses() as m:
            m.get(WEATHER_URL, exception=aiohttp.ClientConnectionError("Connection refused"))

            with pytest.raises(ServiceError) as exc_info:
                await client.resolve_temperature("Belém", mock_span)

        assert exc_info.value.error_detail.error_code == ErrorCode.CONNECTION_ERROR
        assert "test-key" not in exc_info.value.error_detail.message

    async def test_timeout(self, client: WeatherApiClientImpl, mock_span: MagicMock) -> None:
        with aioresponses() as m:
            m.get(WEATHER_URL, exception=asyncio.TimeoutError())

            with pytest.raises(ServiceError) as exc_info:
                await client.resolve_temperature("Belém", mock_span)

        assert exc_info.value.error_detail.error_code == ErrorCode.TIMEOUT
