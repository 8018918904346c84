"""Startup and shutdown logic for the Input Service."""

from __future__ import annotations

from dishka import AsyncContainer, make_async_container
from prometheus_client import CollectorRegistry

from cep_service_libs.logging_utils import create_service_logger
from cep_service_libs.metrics_middleware import create_http_metrics
from cep_service_libs.observability import init_tracing, shutdown_tracing
from cep_service_libs.quart_app import ServiceApp
from services.input_service.config import Settings
from services.input_service.di import InputServiceProvider

logger = create_service_logger("input_service.startup")


def create_di_container() -> AsyncContainer:
    """Creates and returns the DI AsyncContainer."""
    return make_async_container(InputServiceProvider())


async def initialize_tracing(app: ServiceApp, settings: Settings) -> None:
    """Install the process-wide tracer provider."""
    try:
        app.tracer = init_tracing(
            settings.SERVICE_NAME,
            otlp_endpoint=settings.OTEL_EXPORTER_OTLP_ENDPOINT,
            environment=settings.ENVIRONMENT.value,
        )
        logger.info("Input Service tracing initialized successfully")
    except Exception as e:
        logger.critical(f"Failed to initialize tracing: {e}", exc_info=True)
        raise


async def initialize_services(app: ServiceApp, container: AsyncContainer) -> None:
    """Initialize HTTP metrics using the DI registry."""
    try:
        registry = await container.get(CollectorRegistry)
        app.extensions["metrics"] = create_http_metrics(registry)
        logger.info("Input Service metrics initialized successfully.")
    except Exception as e:
        logger.critical(f"Failed to initialize Input Service: {e}", exc_info=True)
        raise


async def shutdown_services(app: ServiceApp) -> None:
    """Flush spans and close the DI container."""
    try:
        shutdown_tracing()
        await app.container.close()
        logger.info("Input Service shutdown completed")
    except Exception as e:
        logger.error(f"Error during Input Service shutdown: {e}", exc_info=True)
