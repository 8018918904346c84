"""
Base settings shared by the CEP temperature services.

Service settings subclass ``BaseServiceSettings`` and set their own
``env_prefix``. Fields that deployments configure globally (environment,
OTLP endpoint) are read from unprefixed variables through validation aliases.
"""

from __future__ import annotations

from typing import Optional

from common_core.config_enums import Environment
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseServiceSettings(BaseSettings):
    """Settings every service carries."""

    SERVICE_NAME: str = "cep-service"
    ENVIRONMENT: Environment = Field(
        default=Environment.DEVELOPMENT,
        validation_alias="ENVIRONMENT",
        description="Runtime environment for the service",
    )
    LOG_LEVEL: str = "INFO"

    OTEL_EXPORTER_OTLP_ENDPOINT: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("OTEL_EXPORTER_OTLP_ENDPOINT"),
        description="OTLP/gRPC collector endpoint; spans are not exported when unset",
    )

    # Quart app.run() parameters
    DEBUG: bool = False
    HTTP_HOST: str = "0.0.0.0"
    HTTP_PORT: int = 8000

    HTTP_CLIENT_TIMEOUT_SECONDS: float = Field(
        default=10.0,
        gt=0,
        description="Total timeout for each outbound HTTP call",
    )
    REQUEST_TIMEOUT_SECONDS: float = Field(
        default=30.0,
        gt=0,
        description="Upper bound for handling one inbound request",
    )

    def is_production(self) -> bool:
        return self.ENVIRONMENT == Environment.PRODUCTION

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )
