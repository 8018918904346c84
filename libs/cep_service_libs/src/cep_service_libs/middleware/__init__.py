"""Framework middleware."""

from cep_service_libs.middleware.quart_middleware import setup_tracing_middleware

__all__ = ["setup_tracing_middleware"]
