"""
Data Access Layer (DAL) for the orders service.

This module provides the repository capability consumed by the handlers, the
repository error classification, and a factory selecting the storage backend.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, List, Optional, Protocol, runtime_checkable

from orders_service.models.order import Order

if TYPE_CHECKING:
    from orders_service.handlers.models.env_vars import OrdersHandlerEnvVars


class RepositoryErrorKind(str, Enum):
    """Classification of repository failures."""

    DUPLICATE_KEY = 'DUPLICATE_KEY'
    INTERNAL = 'INTERNAL'


class RepositoryError(Exception):
    """Base exception raised by order repositories."""

    def __init__(self, message: str, kind: RepositoryErrorKind = RepositoryErrorKind.INTERNAL) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind


class DuplicateKeyError(RepositoryError):
    """Raised when an order with the same id already exists."""

    def __init__(self, order_id: str) -> None:
        super().__init__(f'Duplicate order id: {order_id}', kind=RepositoryErrorKind.DUPLICATE_KEY)
        self.order_id = order_id


@runtime_checkable
class OrderRepository(Protocol):
    """Protocol defining the order repository capability."""

    def insert_order(self, order: Order) -> None:
        """Store a new order."""
        ...

    def get_orders(self) -> List[Order]:
        """List orders from all namespaces."""
        ...

    def get_namespace_orders(self, namespace: str) -> List[Order]:
        """List orders of a single namespace."""
        ...

    def delete_orders(self) -> None:
        """Delete orders from all namespaces."""
        ...

    def delete_namespace_orders(self, namespace: str) -> None:
        """Delete orders of a single namespace."""
        ...


class BaseOrderRepository(ABC):
    """Abstract base class for order repository implementations."""

    @abstractmethod
    def insert_order(self, order: Order) -> None:
        """
        Store a new order.

        Raises:
            DuplicateKeyError: If an order with the same id is already stored
            RepositoryError: If the backend fails
        """

    @abstractmethod
    def get_orders(self) -> List[Order]:
        """List orders from all namespaces."""

    @abstractmethod
    def get_namespace_orders(self, namespace: str) -> List[Order]:
        """List orders of a single namespace."""

    @abstractmethod
    def delete_orders(self) -> None:
        """Delete orders from all namespaces."""

    @abstractmethod
    def delete_namespace_orders(self, namespace: str) -> None:
        """Delete orders of a single namespace."""


def get_order_repository(env: Optional['OrdersHandlerEnvVars'] = None) -> OrderRepository:
    """
    Factory function to get the configured order repository.

    Args:
        env: Handler environment variables, read from the process environment if omitted

    Returns:
        Order repository instance
    """
    # Import here to avoid circular imports
    from orders_service.handlers.models.env_vars import get_handler_env_vars

    env = env or get_handler_env_vars()

    if env.uses_dynamodb:
        from orders_service.dal.dynamodb_handler import DynamoDBOrderRepository

        return DynamoDBOrderRepository(
            table_name=env.TABLE_NAME,
            region_name=env.AWS_REGION,
            endpoint_url=env.DYNAMODB_ENDPOINT,
            namespace_index_name=env.NAMESPACE_INDEX_NAME,
        )

    from orders_service.dal.memory_handler import InMemoryOrderRepository

    return InMemoryOrderRepository()


__all__ = [
    'BaseOrderRepository',
    'DuplicateKeyError',
    'OrderRepository',
    'RepositoryError',
    'RepositoryErrorKind',
    'get_order_repository',
]
