"""
Configuration module for the Temperature Service.

Provider endpoints, the WeatherAPI key and the HTTP port. The legacy
``APIKeyWeather`` and ``PORT`` variables are still honoured.
"""

from __future__ import annotations

from typing import Optional

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import SettingsConfigDict

from cep_service_libs.config import BaseServiceSettings


class Settings(BaseServiceSettings):
    """
    Configuration settings for the Temperature Service.

    Settings are loaded from .env files and environment variables.
    """

    SERVICE_NAME: str = "temperature-service"

    HTTP_PORT: int = Field(
        default=8080,
        validation_alias=AliasChoices("TEMPERATURE_SERVICE_HTTP_PORT", "PORT"),
    )

    # External providers
    VIACEP_BASE_URL: str = "https://viacep.com.br/ws"
    WEATHER_API_BASE_URL: str = "https://api.weatherapi.com/v1/current.json"
    WEATHER_API_KEY: Optional[SecretStr] = Field(
        default=None,
        validation_alias=AliasChoices("TEMPERATURE_SERVICE_WEATHER_API_KEY", "APIKeyWeather"),
        description="WeatherAPI key; lookups fail with a configuration error when unset",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
        env_prefix="TEMPERATURE_SERVICE_",
    )


# Create a single instance for the application to use
settings = Settings()
