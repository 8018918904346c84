"""
common_core.temperature_models - Request and response contracts for the
temperature lookup flow.

Wire field names (``temp_C``, ``temp_F``, ``temp_K``) are preserved as
aliases; Python code uses the snake_case attribute names.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator


class TemperatureReport(BaseModel):
    """Current temperature for a city in Celsius, Fahrenheit and Kelvin."""

    city: str
    temp_c: float = Field(alias="temp_C")
    temp_f: float = Field(alias="temp_F")
    temp_k: float = Field(alias="temp_K")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_response(self) -> dict[str, object]:
        """Serialize using the public wire field names."""
        return self.model_dump(by_alias=True)


class CepRequest(BaseModel):
    """Body accepted by the input gateway."""

    cep: StrictStr


class GatewayErrorResponse(BaseModel):
    """Error body returned by the input gateway."""

    message: str


class ViaCepResponse(BaseModel):
    """Subset of the ViaCEP lookup payload used by the orchestration service."""

    localidade: str = ""
    erro: bool = False

    model_config = ConfigDict(extra="ignore")


class WeatherApiCurrent(BaseModel):
    temp_c: float = Field(default=0.0, strict=True)

    model_config = ConfigDict(extra="ignore")

    @field_validator("temp_c", mode="before")
    @classmethod
    def _null_reads_as_zero(cls, value: object) -> object:
        return 0.0 if value is None else value


class WeatherApiResponse(BaseModel):
    """Subset of the WeatherAPI current-conditions payload.

    A missing or null ``current`` block or ``temp_c`` field yields a 0.0
    reading rather than a parse failure.
    """

    current: WeatherApiCurrent = Field(default_factory=WeatherApiCurrent)

    model_config = ConfigDict(extra="ignore")

    @field_validator("current", mode="before")
    @classmethod
    def _null_current_reads_as_empty(cls, value: object) -> object:
        return {} if value is None else value
