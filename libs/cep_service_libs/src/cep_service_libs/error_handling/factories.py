"""
Error factory functions.

Each factory builds an ErrorDetail with a specific ErrorCode and raises a
ServiceError. Extra keyword arguments end up in ``ErrorDetail.details``.
"""

from __future__ import annotations

from typing import Any, NoReturn, Optional
from uuid import UUID

from common_core.error_enums import ErrorCode

from cep_service_libs.error_handling.error_detail_factory import (
    create_error_detail_with_context,
)
from cep_service_libs.error_handling.service_error import ServiceError


def _raise(
    error_code: ErrorCode,
    service: str,
    operation: str,
    message: str,
    correlation_id: Optional[UUID],
    details: dict[str, Any],
) -> NoReturn:
    error_detail = create_error_detail_with_context(
        error_code=error_code,
        message=message,
        service=service,
        operation=operation,
        correlation_id=correlation_id,
        details=details,
    )
    raise ServiceError(error_detail)


def raise_validation_error(
    service: str,
    operation: str,
    field: str,
    message: str,
    correlation_id: Optional[UUID] = None,
    **additional_context: Any,
) -> NoReturn:
    """Raise VALIDATION_ERROR for a rejected input field."""
    _raise(
        ErrorCode.VALIDATION_ERROR,
        service,
        operation,
        message,
        correlation_id,
        {"field": field, **additional_context},
    )


def raise_resource_not_found(
    service: str,
    operation: str,
    resource_type: str,
    resource_id: str,
    correlation_id: Optional[UUID] = None,
    **additional_context: Any,
) -> NoReturn:
    """Raise RESOURCE_NOT_FOUND with a generated message."""
    _raise(
        ErrorCode.RESOURCE_NOT_FOUND,
        service,
        operation,
        f"{resource_type} with ID '{resource_id}' not found",
        correlation_id,
        {"resource_type": resource_type, "resource_id": resource_id, **additional_context},
    )


def raise_configuration_error(
    service: str,
    operation: str,
    config_key: str,
    message: str,
    correlation_id: Optional[UUID] = None,
    **additional_context: Any,
) -> NoReturn:
    """Raise CONFIGURATION_ERROR for a missing or unusable setting."""
    _raise(
        ErrorCode.CONFIGURATION_ERROR,
        service,
        operation,
        message,
        correlation_id,
        {"config_key": config_key, **additional_context},
    )


def raise_external_service_error(
    service: str,
    operation: str,
    external_service: str,
    message: str,
    correlation_id: Optional[UUID] = None,
    **additional_context: Any,
) -> NoReturn:
    """Raise EXTERNAL_SERVICE_ERROR for an upstream failure."""
    _raise(
        ErrorCode.EXTERNAL_SERVICE_ERROR,
        service,
        operation,
        message,
        correlation_id,
        {"external_service": external_service, **additional_context},
    )


def raise_connection_error(
    service: str,
    operation: str,
    target: str,
    message: str,
    correlation_id: Optional[UUID] = None,
    **additional_context: Any,
) -> NoReturn:
    _raise(
        ErrorCode.CONNECTION_ERROR,
        service,
        operation,
        message,
        correlation_id,
        {"target": target, **additional_context},
    )


def raise_timeout_error(
    service: str,
    operation: str,
    timeout_seconds: float,
    message: str,
    correlation_id: Optional[UUID] = None,
    **additional_context: Any,
) -> NoReturn:
    _raise(
        ErrorCode.TIMEOUT,
        service,
        operation,
        message,
        correlation_id,
        {"timeout_seconds": timeout_seconds, **additional_context},
    )


def raise_parsing_error(
    service: str,
    operation: str,
    parse_target: str,
    message: str,
    correlation_id: Optional[UUID] = None,
    **additional_context: Any,
) -> NoReturn:
    _raise(
        ErrorCode.PARSING_ERROR,
        service,
        operation,
        message,
        correlation_id,
        {"parse_target": parse_target, **additional_context},
    )
