"""
Service Models Package

This package contains the Pydantic models used throughout the service:
the Order domain model and the API output models.
"""

from .order import DEFAULT_NAMESPACE, Order
from .output import ErrorResponse, OrderList, serialize_orders

__all__ = [
    # Domain models
    "DEFAULT_NAMESPACE",
    "Order",

    # Output models
    "ErrorResponse",
    "OrderList",
    "serialize_orders",
]
