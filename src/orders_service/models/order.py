"""
Order domain model.

The same model is used on the wire (camelCase aliases) and by the repositories
(snake_case field names), so a request body is validated in a single step.
"""

from typing import Annotated, Any, Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_NAMESPACE = 'default'


class Order(BaseModel):
    """Purchase record keyed by order id and scoped to a namespace."""

    model_config = ConfigDict(
        populate_by_name=True,
        strict=True,
        json_schema_extra={
            'example': {
                'orderId': 'o1',
                'namespace': 'default',
                'postalCode': '12345',
                'town': 'Metropolis',
                'total': 9.99,
            }
        },
    )

    order_id: Annotated[str, Field(
        alias='orderId',
        min_length=1,
        description='Unique identifier for the order',
        examples=['o1']
    )]

    namespace: Annotated[str, Field(
        default=DEFAULT_NAMESPACE,
        description='Logical partition the order belongs to',
        examples=['default', 'stage']
    )] = DEFAULT_NAMESPACE

    postal_code: Annotated[str, Field(
        alias='postalCode',
        min_length=1,
        description='Postal code of the delivery address',
        examples=['12345']
    )]

    town: Annotated[str, Field(
        min_length=1,
        description='Town of the delivery address',
        examples=['Metropolis']
    )]

    total: Annotated[float, Field(
        allow_inf_nan=False,
        description='Total order amount, finite and never zero',
        examples=[9.99]
    )]

    @field_validator('namespace', mode='before')
    @classmethod
    def resolve_namespace(cls, v: Any) -> Any:
        """Fall back to the default namespace when none is given."""
        if v is None or v == '':
            return DEFAULT_NAMESPACE
        return v

    @field_validator('total')
    @classmethod
    def validate_total(cls, v: float) -> float:
        """Validate that the order total is non-zero."""
        if v == 0:
            raise ValueError('total cannot be zero')
        return v

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the order to its wire representation.

        Returns:
            Dictionary keyed by the JSON field names
        """
        return self.model_dump(by_alias=True)
