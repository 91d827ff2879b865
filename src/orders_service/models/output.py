"""
Output models for API responses using Pydantic.
"""

from typing import Annotated, List

from pydantic import BaseModel, Field, TypeAdapter

from orders_service.models.order import Order


class ErrorResponse(BaseModel):
    """Body of every 4xx/5xx response."""

    status: Annotated[int, Field(
        description='HTTP status code of the response',
        examples=[400, 409, 500]
    )]

    message: Annotated[str, Field(
        description='Human-readable error message',
        examples=['No namespace provided.', 'Order o1 already exists.']
    )]


# Serializes a list of orders with their wire (camelCase) field names
OrderList = TypeAdapter(List[Order])


def serialize_orders(orders: List[Order]) -> str:
    """Serialize orders to a JSON array, preserving their order."""
    return OrderList.dump_json(orders, by_alias=True).decode('utf-8')
