"""
Unit tests for environment configuration and repository selection.
"""

import pytest
from moto import mock_aws
from pydantic import ValidationError

from orders_service.dal import get_order_repository
from orders_service.dal.dynamodb_handler import DynamoDBOrderRepository
from orders_service.dal.memory_handler import InMemoryOrderRepository
from orders_service.handlers.models.env_vars import OrdersHandlerEnvVars, get_handler_env_vars


class TestOrdersHandlerEnvVars:
    """Test cases for OrdersHandlerEnvVars model."""

    def test_defaults(self):
        env = OrdersHandlerEnvVars()

        assert env.ORDERS_REPOSITORY == "dynamodb"
        assert env.TABLE_NAME == "orders"
        assert env.NAMESPACE_INDEX_NAME == "namespace-index"
        assert env.DYNAMODB_ENDPOINT is None
        assert env.uses_dynamodb

    def test_reads_process_environment(self):
        env = get_handler_env_vars()

        assert env.ORDERS_REPOSITORY == "memory"
        assert env.TABLE_NAME == "test-orders-table"
        assert not env.uses_dynamodb

    def test_unknown_backend_rejected(self):
        with pytest.raises(ValidationError):
            OrdersHandlerEnvVars(ORDERS_REPOSITORY="redis")

    def test_invalid_log_level_rejected(self):
        with pytest.raises(ValidationError):
            OrdersHandlerEnvVars(LOG_LEVEL="VERBOSE")


class TestGetOrderRepository:
    """Test cases for the repository factory."""

    def test_memory_backend(self):
        repository = get_order_repository(OrdersHandlerEnvVars(ORDERS_REPOSITORY="memory"))

        assert isinstance(repository, InMemoryOrderRepository)

    def test_dynamodb_backend(self):
        env = OrdersHandlerEnvVars(
            ORDERS_REPOSITORY="dynamodb",
            TABLE_NAME="prod-orders",
            NAMESPACE_INDEX_NAME="by-namespace",
        )

        with mock_aws():
            repository = get_order_repository(env)

        assert isinstance(repository, DynamoDBOrderRepository)
        assert repository.table_name == "prod-orders"
        assert repository.namespace_index_name == "by-namespace"

    def test_defaults_to_process_environment(self):
        assert isinstance(get_order_repository(), InMemoryOrderRepository)
