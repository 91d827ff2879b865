"""
Orders Service Module.

This package contains the orders REST API following a three-layer layout:

- handlers: API routes, request validation and error mapping
- dal: Order repository capability and its storage backends
- models: Order domain model and API output models

Observability is provided by AWS Lambda Powertools and configuration is read
from environment variables validated with Pydantic.
"""

__version__ = "1.0.0"
__description__ = "REST API for orders grouped by namespace"

# Re-export commonly used classes for convenience
from orders_service.models.order import DEFAULT_NAMESPACE, Order
from orders_service.models.output import ErrorResponse
from orders_service.handlers.utils.observability import logger, tracer, metrics

__all__ = [
    "DEFAULT_NAMESPACE",
    "Order",
    "ErrorResponse",
    "logger",
    "tracer",
    "metrics",
]
