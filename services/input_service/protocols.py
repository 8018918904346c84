"""Protocol interfaces for the Input Service."""

from __future__ import annotations

from typing import Protocol

from pydantic import BaseModel, ConfigDict


class TemperatureServiceResponse(BaseModel):
    """Raw response from the temperature service, relayed to the caller as is."""

    status_code: int
    body: bytes
    content_type: str

    model_config = ConfigDict(frozen=True)


class TemperatureServiceClientProtocol(Protocol):
    """Client for the temperature service's GET /temperature."""

    async def fetch_temperature(self, cep: str) -> TemperatureServiceResponse:
        """
        Forward a cleaned, valid CEP with the current trace context.

        Any HTTP status is returned, not raised.

        Raises:
            ServiceError: CONNECTION_ERROR or TIMEOUT when the temperature
                service cannot be reached
        """
        ...
