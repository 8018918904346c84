"""
Configuration module for the Input Service gateway.

The legacy ``SERVICE_B_URL`` and ``PORT`` variables are still honoured.
"""

from __future__ import annotations

from pydantic import AliasChoices, Field
from pydantic_settings import SettingsConfigDict

from cep_service_libs.config import BaseServiceSettings


class Settings(BaseServiceSettings):
    """
    Configuration settings for the Input Service.

    Settings are loaded from .env files and environment variables.
    """

    SERVICE_NAME: str = "input-service"

    HTTP_PORT: int = Field(
        default=8081,
        validation_alias=AliasChoices("INPUT_SERVICE_HTTP_PORT", "PORT"),
    )

    TEMPERATURE_SERVICE_URL: str = Field(
        default="http://localhost:8080",
        validation_alias=AliasChoices("INPUT_SERVICE_TEMPERATURE_SERVICE_URL", "SERVICE_B_URL"),
        description="Base URL of the temperature service",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
        env_prefix="INPUT_SERVICE_",
    )


# Create a single instance for the application to use
settings = Settings()
