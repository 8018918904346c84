"""Shared fixtures for Temperature Service tests."""

from __future__ import annotations

from typing import AsyncIterator, Generator

import aiohttp
import pytest
from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from services.temperature_service.config import Settings

VIACEP_BASE_URL = "http://viacep.test/ws"
WEATHER_API_BASE_URL = "http://weather.test/v1/current.json"


@pytest.fixture
def opentelemetry_test_isolation() -> Generator[InMemorySpanExporter, None, None]:
    """
    Provide OpenTelemetry test isolation with InMemorySpanExporter.

    Adds a test span processor to the SDK provider (installing one if the
    global provider is still the default proxy).
    """
    span_exporter = InMemorySpanExporter()

    current_provider = trace.get_tracer_provider()
    if not hasattr(current_provider, "add_span_processor"):
        test_provider = TracerProvider()
        trace.set_tracer_provider(test_provider)
        current_provider = test_provider

    test_processor = SimpleSpanProcessor(span_exporter)
    current_provider.add_span_processor(test_processor)

    try:
        yield span_exporter
    finally:
        span_exporter.clear()
        test_processor.shutdown()


@pytest.fixture
def test_settings() -> Settings:
    """Settings pointing at fake provider hosts with a configured API key."""
    return Settings(
        VIACEP_BASE_URL=VIACEP_BASE_URL,
        WEATHER_API_BASE_URL=WEATHER_API_BASE_URL,
        WEATHER_API_KEY="test-key",
        HTTP_CLIENT_TIMEOUT_SECONDS=5.0,
    )


@pytest.fixture
async def http_session() -> AsyncIterator[aiohttp.ClientSession]:
    """Provide a real aiohttp session; requests are intercepted by aioresponses."""
    async with aiohttp.ClientSession() as session:
        yield session
