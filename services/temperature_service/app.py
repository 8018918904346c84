"""
Temperature Service Application.

GET /temperature?cep=<8 digits> resolves the CEP to a city via ViaCEP, the
city to a temperature via WeatherAPI, and returns it in C, F and K.
"""

from __future__ import annotations

from dishka import AsyncContainer
from quart_dishka import QuartDishka

from cep_service_libs.logging_utils import configure_service_logging, create_service_logger
from cep_service_libs.metrics_middleware import setup_metrics_middleware
from cep_service_libs.middleware import setup_tracing_middleware
from cep_service_libs.quart_app import ServiceApp
from services.temperature_service import startup_setup
from services.temperature_service.api.health_routes import health_bp
from services.temperature_service.api.temperature_routes import temperature_bp
from services.temperature_service.config import settings

# Configure structured logging
configure_service_logging(
    settings.SERVICE_NAME,
    environment=settings.ENVIRONMENT.value,
    log_level=settings.LOG_LEVEL,
)
logger = create_service_logger("temperature_service.app")


def create_app(container: AsyncContainer | None = None) -> ServiceApp:
    """Build the Quart app; tests pass their own container."""
    app = ServiceApp(__name__)
    app.json.ensure_ascii = False  # type: ignore[attr-defined]
    app.container = container or startup_setup.create_di_container()
    QuartDishka(app=app, container=app.container)

    setup_tracing_middleware(app)
    setup_metrics_middleware(app, logger_name="temperature_service.metrics")

    @app.before_serving
    async def startup() -> None:
        """Initialize tracing and metrics."""
        try:
            await startup_setup.initialize_tracing(app, settings)
            await startup_setup.initialize_services(app, settings, app.container)
            logger.info("Temperature Service startup completed successfully")
        except Exception as e:
            logger.critical(f"Failed to start Temperature Service: {e}", exc_info=True)
            raise

    @app.after_serving
    async def shutdown() -> None:
        """Gracefully shutdown all services."""
        await startup_setup.shutdown_services(app)

    # Register Blueprints
    app.register_blueprint(temperature_bp)
    app.register_blueprint(health_bp)

    return app


app = create_app()


if __name__ == "__main__":
    app.run(debug=settings.DEBUG, host=settings.HTTP_HOST, port=settings.HTTP_PORT)
