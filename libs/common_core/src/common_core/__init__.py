"""
Common Core Package for the CEP temperature services.
"""

from .cep import clean_cep, is_valid_cep
from .config_enums import Environment
from .error_enums import ErrorCode, PipelineOutcome
from .models.error_models import ErrorDetail
from .temperature_models import (
    CepRequest,
    GatewayErrorResponse,
    TemperatureReport,
    ViaCepResponse,
    WeatherApiCurrent,
    WeatherApiResponse,
)

__all__ = [
    "CepRequest",
    "Environment",
    "ErrorCode",
    "ErrorDetail",
    "GatewayErrorResponse",
    "PipelineOutcome",
    "TemperatureReport",
    "ViaCepResponse",
    "WeatherApiCurrent",
    "WeatherApiResponse",
    "clean_cep",
    "is_valid_cep",
]
