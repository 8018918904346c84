"""Startup and shutdown logic for the Temperature Service."""

from __future__ import annotations

from dishka import AsyncContainer, make_async_container
from prometheus_client import CollectorRegistry

from cep_service_libs.logging_utils import create_service_logger
from cep_service_libs.metrics_middleware import create_http_metrics
from cep_service_libs.observability import init_tracing, shutdown_tracing
from cep_service_libs.quart_app import ServiceApp
from services.temperature_service.config import Settings
from services.temperature_service.di import TemperatureServiceProvider

logger = create_service_logger("temperature_service.startup")


def create_di_container() -> AsyncContainer:
    """Creates and returns the DI AsyncContainer."""
    container = make_async_container(TemperatureServiceProvider())
    logger.info("DI AsyncContainer created.")
    return container


async def initialize_tracing(app: ServiceApp, settings: Settings) -> None:
    """Install the process-wide tracer provider."""
    try:
        app.tracer = init_tracing(
            settings.SERVICE_NAME,
            otlp_endpoint=settings.OTEL_EXPORTER_OTLP_ENDPOINT,
            environment=settings.ENVIRONMENT.value,
        )
        logger.info("Temperature Service tracing initialized successfully")
    except Exception as e:
        logger.critical(f"Failed to initialize tracing: {e}", exc_info=True)
        raise


async def initialize_services(app: ServiceApp, settings: Settings, container: AsyncContainer) -> None:
    """Initialize HTTP metrics using the DI registry."""
    try:
        registry = await container.get(CollectorRegistry)
        app.extensions["metrics"] = create_http_metrics(registry)
        if settings.WEATHER_API_KEY is None:
            logger.warning("WEATHER_API_KEY is not set; temperature lookups will fail")
        logger.info("Temperature Service metrics initialized successfully.")
    except Exception as e:
        logger.critical(f"Failed to initialize Temperature Service: {e}", exc_info=True)
        raise


async def shutdown_services(app: ServiceApp) -> None:
    """Flush spans and close the DI container (and its HTTP session)."""
    try:
        shutdown_tracing()
        await app.container.close()
        logger.info("Temperature Service shutdown completed")
    except Exception as e:
        logger.error(f"Error during Temperature Service shutdown: {e}", exc_info=True)
