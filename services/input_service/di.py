"""
Input Service dependency injection configuration.
"""

from __future__ import annotations

from typing import AsyncIterator

import aiohttp
from dishka import Provider, Scope, provide
from opentelemetry.trace import Tracer
from prometheus_client import CollectorRegistry

from cep_service_libs.observability import get_tracer
from services.input_service.config import Settings, settings
from services.input_service.implementations.temperature_service_client_impl import (
    TemperatureServiceClientImpl,
)
from services.input_service.protocols import TemperatureServiceClientProtocol


class InputServiceProvider(Provider):
    """DI provider for Input Service dependencies."""

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
        """Provide HTTP client session."""
        async with aiohttp.ClientSession() as session:
            yield session

    @provide(scope=Scope.APP)
    def provide_tracer(self, settings: Settings) -> Tracer:
        return get_tracer(settings.SERVICE_NAME)

    @provide(scope=Scope.APP)
    def provide_temperature_service_client(
        self, settings: Settings, http_session: aiohttp.ClientSession, tracer: Tracer
    ) -> TemperatureServiceClientProtocol:
        """Provide temperature service client implementation."""
        return TemperatureServiceClientImpl(settings, http_session, tracer)
