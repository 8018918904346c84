"""
Input Service Application.

POST / with {"cep": "..."} validates the CEP and relays the temperature
service's response for it.
"""

from __future__ import annotations

from dishka import AsyncContainer
from quart_dishka import QuartDishka

from cep_service_libs.logging_utils import configure_service_logging, create_service_logger
from cep_service_libs.metrics_middleware import setup_metrics_middleware
from cep_service_libs.middleware import setup_tracing_middleware
from cep_service_libs.quart_app import ServiceApp
from services.input_service import startup_setup
from services.input_service.api.cep_routes import cep_bp
from services.input_service.api.health_routes import health_bp
from services.input_service.config import settings

configure_service_logging(
    settings.SERVICE_NAME,
    environment=settings.ENVIRONMENT.value,
    log_level=settings.LOG_LEVEL,
)
logger = create_service_logger("input_service.app")


def create_app(container: AsyncContainer | None = None) -> ServiceApp:
    app = ServiceApp(__name__)
    app.container = container or startup_setup.create_di_container()
    QuartDishka(app=app, container=app.container)

    setup_tracing_middleware(app)
    setup_metrics_middleware(app, logger_name="input_service.metrics")

    @app.before_serving
    async def startup() -> None:
        try:
            await startup_setup.initialize_tracing(app, settings)
            await startup_setup.initialize_services(app, app.container)
            logger.info("Input Service startup completed successfully")
        except Exception as e:
            logger.critical(f"Failed to start Input Service: {e}", exc_info=True)
            raise

    @app.after_serving
    async def shutdown() -> None:
        await startup_setup.shutdown_services(app)

    app.register_blueprint(cep_bp)
    app.register_blueprint(health_bp)

    return app


app = create_app()


if __name__ == "__main__":
    app.run(debug=settings.DEBUG, host=settings.HTTP_HOST, port=settings.HTTP_PORT)
