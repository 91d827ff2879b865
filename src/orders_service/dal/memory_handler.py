"""
In-memory implementation of the order repository.

Orders live in process memory, in insertion order. Used for local runs and
tests; a Lambda execution environment keeps them only while it stays warm.
"""

import threading
from typing import Dict, List

from orders_service.dal import BaseOrderRepository, DuplicateKeyError
from orders_service.handlers.utils.observability import logger
from orders_service.models.order import Order


class InMemoryOrderRepository(BaseOrderRepository):
    """Thread-safe order store keyed by order id."""

    def __init__(self) -> None:
        self._orders: Dict[str, Order] = {}
        self._lock = threading.Lock()

    def insert_order(self, order: Order) -> None:
        with self._lock:
            if order.order_id in self._orders:
                raise DuplicateKeyError(order.order_id)
            self._orders[order.order_id] = order.model_copy()
        logger.debug('Stored order in memory', extra={'order_id': order.order_id})

    def get_orders(self) -> List[Order]:
        with self._lock:
            return [order.model_copy() for order in self._orders.values()]

    def get_namespace_orders(self, namespace: str) -> List[Order]:
        with self._lock:
            return [
                order.model_copy()
                for order in self._orders.values()
                if order.namespace == namespace
            ]

    def delete_orders(self) -> None:
        with self._lock:
            self._orders.clear()

    def delete_namespace_orders(self, namespace: str) -> None:
        with self._lock:
            self._orders = {
                order_id: order
                for order_id, order in self._orders.items()
                if order.namespace != namespace
            }
