"""
Order Handler - HTTP operations over the Order resource.

Each operation validates its input, delegates to the order repository, and maps
the outcome to an API Gateway response. The handler keeps no state besides the
repository reference, so one instance serves concurrent requests.
"""

from typing import List, Optional, Union

from aws_lambda_powertools import Logger
from aws_lambda_powertools.event_handler import Response
from aws_lambda_powertools.metrics import MetricUnit
from pydantic import ValidationError

from orders_service.dal import OrderRepository, RepositoryError, RepositoryErrorKind
from orders_service.handlers.utils.errors import (
    JSON_CONTENT_TYPE,
    ConflictError,
    InternalError,
    InvalidInputError,
    MissingParameterError,
    handle_service_errors,
)
from orders_service.handlers.utils.observability import logger as service_logger
from orders_service.handlers.utils.observability import metrics, tracer
from orders_service.models.order import Order
from orders_service.models.output import serialize_orders


class OrderHandler:
    """Route handlers for the operations of an OrderRepository."""

    def __init__(self, repository: OrderRepository, logger: Logger = service_logger) -> None:
        """
        Initialize the handler.

        Args:
            repository: Order repository the operations delegate to
            logger: Logger receiving debug and error records
        """
        self.repository = repository
        self.logger = logger

    @tracer.capture_method
    @handle_service_errors
    def insert_order(self, body: Optional[Union[str, bytes]]) -> Response:
        """
        Create an order from a JSON request body.

        Args:
            body: Raw request body

        Returns:
            201 with an empty body, 400 for an invalid body, 409 if the order id
            is taken, 500 on any other failure
        """
        try:
            order = Order.model_validate_json(body or '')
        except ValidationError as e:
            self.logger.debug('Invalid order payload', extra={'validation_errors': e.errors(include_url=False)})
            raise InvalidInputError() from e

        self.logger.debug(f'Inserting order: {order!r}')

        try:
            self.repository.insert_order(order)
        except RepositoryError as e:
            if e.kind is RepositoryErrorKind.DUPLICATE_KEY:
                metrics.add_metric(name='OrderConflict', unit=MetricUnit.Count, value=1)
                raise ConflictError(f'Order {order.order_id} already exists.') from e
            raise InternalError(f'Error inserting order: {order!r}') from e
        except Exception as e:
            raise InternalError(f'Error inserting order: {order!r}') from e

        metrics.add_metric(name='OrderCreated', unit=MetricUnit.Count, value=1)
        return Response(status_code=201, body='')

    @tracer.capture_method
    @handle_service_errors
    def get_orders(self) -> Response:
        """List orders from all namespaces."""
        self.logger.debug('Retrieving orders')

        try:
            orders = self.repository.get_orders()
        except Exception as e:
            raise InternalError('Error retrieving orders.') from e

        return self._respond_orders(orders)

    @tracer.capture_method
    @handle_service_errors
    def get_namespace_orders(self, namespace: Optional[str]) -> Response:
        """List orders of the namespace given as path parameter."""
        if not namespace:
            raise MissingParameterError()

        self.logger.debug(f'Retrieving orders for namespace: {namespace}')

        try:
            orders = self.repository.get_namespace_orders(namespace)
        except Exception as e:
            raise InternalError('Error retrieving orders.') from e

        return self._respond_orders(orders)

    @tracer.capture_method
    @handle_service_errors
    def delete_orders(self) -> Response:
        """Delete orders from all namespaces."""
        self.logger.debug('Deleting all orders')

        try:
            self.repository.delete_orders()
        except Exception as e:
            raise InternalError('Error deleting orders.') from e

        metrics.add_metric(name='OrdersDeleted', unit=MetricUnit.Count, value=1)
        return Response(status_code=204, body='')

    @tracer.capture_method
    @handle_service_errors
    def delete_namespace_orders(self, namespace: Optional[str]) -> Response:
        """Delete orders of the namespace given as path parameter."""
        if not namespace:
            raise MissingParameterError()

        self.logger.debug(f'Deleting orders in namespace {namespace}')

        try:
            self.repository.delete_namespace_orders(namespace)
        except Exception as e:
            raise InternalError(f'Error deleting orders in namespace {namespace}.') from e

        metrics.add_metric(name='OrdersDeleted', unit=MetricUnit.Count, value=1)
        return Response(status_code=204, body='')

    def _respond_orders(self, orders: List[Order]) -> Response:
        try:
            body = serialize_orders(orders)
        except (TypeError, ValueError) as e:
            raise InternalError('Error sending orders response.') from e

        return Response(status_code=200, content_type=JSON_CONTENT_TYPE, body=body)
