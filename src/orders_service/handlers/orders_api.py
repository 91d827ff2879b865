"""
Orders API - Lambda entry point for the orders REST API.

Binds the order routes of the API Gateway resolver to a single OrderHandler
whose repository is selected from the environment.
"""

from typing import Any, Dict

from aws_lambda_powertools.event_handler import Response
from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.utilities.typing import LambdaContext

from orders_service.dal import get_order_repository
from orders_service.handlers.order_handler import OrderHandler
from orders_service.handlers.utils.observability import logger, metrics, tracer
from orders_service.handlers.utils.rest_api_resolver import (
    NAMESPACE_ORDERS_PATH,
    ORDERS_PATH,
    ORDERS_TAG,
    app,
)

# Initialize service dependencies
order_handler = OrderHandler(repository=get_order_repository())


@app.post(ORDERS_PATH, summary='Create an order', tags=[ORDERS_TAG.name])
def insert_order() -> Response:
    return order_handler.insert_order(app.current_event.decoded_body)


@app.get(ORDERS_PATH, summary='List orders of all namespaces', tags=[ORDERS_TAG.name])
def get_orders() -> Response:
    return order_handler.get_orders()


@app.get(NAMESPACE_ORDERS_PATH, summary='List orders of a namespace', tags=[ORDERS_TAG.name])
def get_namespace_orders(namespace: str) -> Response:
    return order_handler.get_namespace_orders(namespace)


@app.delete(ORDERS_PATH, summary='Delete orders of all namespaces', tags=[ORDERS_TAG.name])
def delete_orders() -> Response:
    return order_handler.delete_orders()


@app.delete(NAMESPACE_ORDERS_PATH, summary='Delete orders of a namespace', tags=[ORDERS_TAG.name])
def delete_namespace_orders(namespace: str) -> Response:
    return order_handler.delete_namespace_orders(namespace)


@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@metrics.log_metrics(capture_cold_start_metric=True)
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Main Lambda handler function.

    Args:
        event: API Gateway REST proxy event
        context: Lambda context object

    Returns:
        API Gateway response
    """
    return app.resolve(event, context)
