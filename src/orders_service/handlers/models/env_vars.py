"""
Environment variable models for type-safe configuration.

This module defines the Pydantic model for the environment variables read by the
orders handlers, validated once per process by aws-lambda-env-modeler.
"""

from typing import Annotated, Literal, Optional

from aws_lambda_env_modeler import BaseModel as BaseEnvModel, get_environment_variables
from pydantic import Field


class OrdersHandlerEnvVars(BaseEnvModel):
    """Environment variables for the orders handlers."""

    # Storage backend behind the OrderRepository capability
    ORDERS_REPOSITORY: Annotated[Literal['memory', 'dynamodb'], Field(
        default='dynamodb',
        description='Order repository backend (memory or dynamodb)'
    )] = 'dynamodb'

    # DynamoDB table name for storing orders
    TABLE_NAME: Annotated[str, Field(
        default='orders',
        description='DynamoDB table name for order storage',
        min_length=1
    )] = 'orders'

    NAMESPACE_INDEX_NAME: Annotated[str, Field(
        default='namespace-index',
        description='Global secondary index keyed by order namespace',
        min_length=1
    )] = 'namespace-index'

    # AWS region
    AWS_REGION: Annotated[str, Field(
        default='us-east-1',
        description='AWS region for service deployment'
    )] = 'us-east-1'

    # For local testing against DynamoDB Local
    DYNAMODB_ENDPOINT: Annotated[Optional[str], Field(
        default=None,
        description='DynamoDB endpoint URL override'
    )] = None

    # Log level for AWS Powertools Logger
    LOG_LEVEL: Annotated[str, Field(
        default='INFO',
        description='Log level for application logging',
        pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$'
    )] = 'INFO'

    # Service name for observability
    POWERTOOLS_SERVICE_NAME: Annotated[str, Field(
        default='orders-service',
        description='Service name for AWS Powertools'
    )] = 'orders-service'

    @property
    def uses_dynamodb(self) -> bool:
        """Check if orders are persisted in DynamoDB."""
        return self.ORDERS_REPOSITORY == 'dynamodb'


def get_handler_env_vars() -> OrdersHandlerEnvVars:
    """
    Get typed environment variables for the orders handlers.

    Returns:
        Validated environment variables model instance
    """
    return get_environment_variables(model=OrdersHandlerEnvVars)
