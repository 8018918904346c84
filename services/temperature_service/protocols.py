"""
Protocol interfaces for the Temperature Service.

The pipeline depends only on these; concrete HTTP clients and metrics are
bound in di.py.
"""

from __future__ import annotations

from typing import Protocol

from common_core.error_enums import PipelineOutcome
from opentelemetry.trace import Span


class GeocodeClientProtocol(Protocol):
    """Resolves a CEP to the name of its city."""

    async def resolve_city(self, cep: str, span: Span) -> str:
        """
        Look up the city for a well-formed CEP.

        Args:
            cep: 8-digit postal code, already validated
            span: Stage span that receives request metadata

        Returns:
            Non-empty city name

        Raises:
            ServiceError: RESOURCE_NOT_FOUND when the CEP is unknown,
                CONNECTION_ERROR/TIMEOUT/EXTERNAL_SERVICE_ERROR for transport
                and status failures, PARSING_ERROR for undecodable bodies
        """
        ...


class WeatherClientProtocol(Protocol):
    """Resolves a city name to its current temperature in Celsius."""

    async def resolve_temperature(self, city: str, span: Span) -> float:
        """
        Fetch the current Celsius temperature for *city*.

        Raises:
            ServiceError: CONFIGURATION_ERROR when no API key is configured,
                otherwise the same transport/status/parsing codes as the
                geocode client
        """
        ...


class TemperatureMetricsProtocol(Protocol):
    """Pipeline outcome metrics."""

    def record_lookup(self, outcome: PipelineOutcome) -> None:
        ...
