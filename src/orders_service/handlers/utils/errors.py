"""
Error handling utilities for the orders handlers.

This module defines the service error taxonomy, its mapping to HTTP status
codes, and the decorator that turns raised errors into API responses.
"""

import functools
from enum import Enum
from typing import Any, Callable

from aws_lambda_powertools.event_handler import Response
from aws_lambda_powertools.metrics import MetricUnit

from orders_service.handlers.utils.observability import metrics
from orders_service.models.output import ErrorResponse

JSON_CONTENT_TYPE = 'application/json;charset=UTF-8'

INVALID_BODY_MESSAGE = 'Invalid request body, orderId / total / postalCode / town fields cannot be empty.'
MISSING_NAMESPACE_MESSAGE = 'No namespace provided.'
INTERNAL_ERROR_MESSAGE = 'Internal error.'


class ErrorKind(str, Enum):
    """Error kinds for classification."""

    INVALID_INPUT = 'INVALID_INPUT'
    MISSING_PARAMETER = 'MISSING_PARAMETER'
    CONFLICT = 'CONFLICT'
    INTERNAL = 'INTERNAL'


STATUS_CODES = {
    ErrorKind.INVALID_INPUT: 400,
    ErrorKind.MISSING_PARAMETER: 400,
    ErrorKind.CONFLICT: 409,
    ErrorKind.INTERNAL: 500,
}


class ServiceError(Exception):
    """Base exception class for errors answered with an error response."""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def status_code(self) -> int:
        return get_http_status_code(self)


class InvalidInputError(ServiceError):
    """Raised when the request body is malformed or misses required fields."""

    kind = ErrorKind.INVALID_INPUT

    def __init__(self, message: str = INVALID_BODY_MESSAGE) -> None:
        super().__init__(message)


class MissingParameterError(ServiceError):
    """Raised when a required path parameter is absent."""

    kind = ErrorKind.MISSING_PARAMETER

    def __init__(self, message: str = MISSING_NAMESPACE_MESSAGE) -> None:
        super().__init__(message)


class ConflictError(ServiceError):
    """Raised when the resource already exists."""

    kind = ErrorKind.CONFLICT


class InternalError(ServiceError):
    """
    Raised for any unexpected repository or I/O failure.

    The public message is always generic; ``detail`` is only written to the log.
    """

    kind = ErrorKind.INTERNAL

    def __init__(self, detail: str) -> None:
        super().__init__(INTERNAL_ERROR_MESSAGE)
        self.detail = detail


def get_http_status_code(error: ServiceError) -> int:
    """Get appropriate HTTP status code for error."""
    return STATUS_CODES.get(error.kind, 500)


def create_error_response(status_code: int, message: str) -> Response:
    """Create an API response carrying an ErrorResponse body."""
    body = ErrorResponse(status=status_code, message=message)
    return Response(
        status_code=status_code,
        content_type=JSON_CONTENT_TYPE,
        body=body.model_dump_json(),
    )


def handle_service_errors(func: Callable[..., Response]) -> Callable[..., Response]:
    """
    Decorator for handler methods converting errors to HTTP responses.

    The decorated method's instance must expose a ``logger`` attribute.
    """

    @functools.wraps(func)
    def wrapper(self: Any, *args: Any, **kwargs: Any) -> Response:
        try:
            return func(self, *args, **kwargs)
        except InternalError as e:
            self.logger.error(e.detail, exc_info=e.__cause__ or e)
            return _error_response(e)
        except ServiceError as e:
            self.logger.info('Request rejected', extra={
                'operation': func.__name__,
                'error_kind': e.kind.value,
                'error_message': e.message,
            })
            return _error_response(e)
        except Exception as e:
            self.logger.exception('Unexpected error in handler', extra={
                'operation': func.__name__,
                'error': str(e),
            })
            return _error_response(InternalError(f'Unexpected error in {func.__name__}'))

    return wrapper


def _error_response(error: ServiceError) -> Response:
    metrics.add_metric(name=f'{error.kind.value.title().replace("_", "")}Error', unit=MetricUnit.Count, value=1)
    return create_error_response(error.status_code, error.message)
