"""
common_core.error_enums - Centralized error code definitions.
"""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    EXTERNAL_SERVICE_ERROR = "EXTERNAL_SERVICE_ERROR"

    # Transport-level failures talking to another service or provider
    TIMEOUT = "TIMEOUT"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    PARSING_ERROR = "PARSING_ERROR"


class PipelineOutcome(str, Enum):
    """
    Terminal outcome of one temperature lookup.

    Used as the outcome label of the temperature lookup counter.
    """

    SUCCESS = "success"
    INVALID_CEP = "invalid_cep"
    CEP_NOT_FOUND = "cep_not_found"
    WEATHER_ERROR = "weather_error"
