"""
Orders Handlers Module.

This module contains the handler layer of the service:

1. order_handler: the Order operations, independent of the hosting runtime
2. orders_api: API Gateway routes and the Lambda entry point

The handlers use AWS Lambda Powertools for:
- Structured logging with correlation IDs
- Distributed tracing with X-Ray
- Custom metrics collection
- REST routing and OpenAPI documentation generation
"""

# Re-export handler utilities for convenience
from orders_service.handlers.utils.observability import logger, tracer, metrics
from orders_service.handlers.utils.rest_api_resolver import app, ORDERS_PATH, NAMESPACE_ORDERS_PATH

__all__ = [
    "logger",
    "tracer",
    "metrics",
    "app",
    "ORDERS_PATH",
    "NAMESPACE_ORDERS_PATH",
]
