"""Structured error handling shared by the services."""

from cep_service_libs.error_handling.error_detail_factory import (
    create_error_detail_with_context,
)
from cep_service_libs.error_handling.factories import (
    raise_configuration_error,
    raise_connection_error,
    raise_external_service_error,
    raise_parsing_error,
    raise_resource_not_found,
    raise_timeout_error,
    raise_validation_error,
)
from cep_service_libs.error_handling.service_error import ServiceError

__all__ = [
    "ServiceError",
    "create_error_detail_with_context",
    "raise_configuration_error",
    "raise_connection_error",
    "raise_external_service_error",
    "raise_parsing_error",
    "raise_resource_not_found",
    "raise_timeout_error",
    "raise_validation_error",
]
