"""
Temperature Service dependency injection configuration.
"""

from __future__ import annotations

from typing import AsyncIterator

import aiohttp
from dishka import Provider, Scope, provide
from opentelemetry.trace import Tracer
from prometheus_client import CollectorRegistry, Counter

from cep_service_libs.observability import get_tracer
from services.temperature_service.config import Settings, settings
from services.temperature_service.implementations.temperature_pipeline import (
    TemperaturePipeline,
)
from services.temperature_service.implementations.viacep_client_impl import ViaCepClientImpl
from services.temperature_service.implementations.weather_api_client_impl import (
    WeatherApiClientImpl,
)
from services.temperature_service.metrics import PrometheusTemperatureMetrics
from services.temperature_service.protocols import (
    GeocodeClientProtocol,
    TemperatureMetricsProtocol,
    WeatherClientProtocol,
)


class TemperatureServiceProvider(Provider):
    """DI provider for Temperature Service dependencies."""

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide service settings."""
        return settings

    @provide(scope=Scope.APP)
    def provide_collector_registry(self) -> CollectorRegistry:
        """Provide Prometheus collector registry."""
        return CollectorRegistry()

    @provide(scope=Scope.APP)
    async def provide_http_session(self) -> AsyncIterator[aiohttp.ClientSession]:
        """Provide the shared outbound HTTP session, closed with the container."""
        async with aiohttp.ClientSession() as session:
            yield session

    @provide(scope=Scope.APP)
    def provide_tracer(self, settings: Settings) -> Tracer:
        """Provide the service tracer (no-op until tracing is initialized)."""
        return get_tracer(settings.SERVICE_NAME)

    @provide(scope=Scope.APP)
    def provide_temperature_metrics(
        self,
        registry: CollectorRegistry,
    ) -> TemperatureMetricsProtocol:
        """Provide pipeline outcome metrics."""
        lookups = Counter(
            "temperature_lookups_total",
            "Temperature lookups by outcome",
            ["outcome"],
            registry=registry,
        )
        return PrometheusTemperatureMetrics(lookups)

    @provide(scope=Scope.APP)
    def provide_geocode_client(
        self, settings: Settings, http_session: aiohttp.ClientSession
    ) -> GeocodeClientProtocol:
        """Provide ViaCEP client implementation."""
        return ViaCepClientImpl(settings, http_session)

    @provide(scope=Scope.APP)
    def provide_weather_client(
        self, settings: Settings, http_session: aiohttp.ClientSession
    ) -> WeatherClientProtocol:
        """Provide WeatherAPI client implementation."""
        return WeatherApiClientImpl(settings, http_session)

    @provide(scope=Scope.APP)
    def provide_temperature_pipeline(
        self,
        geocode_client: GeocodeClientProtocol,
        weather_client: WeatherClientProtocol,
        metrics: TemperatureMetricsProtocol,
        tracer: Tracer,
        settings: Settings,
    ) -> TemperaturePipeline:
        """Provide the lookup pipeline bounded by the request deadline."""
        return TemperaturePipeline(
            geocode_client,
            weather_client,
            metrics,
            tracer,
            request_timeout_seconds=settings.REQUEST_TIMEOUT_SECONDS,
        )
