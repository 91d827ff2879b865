"""
Pytest configuration and shared fixtures for the orders service.

This module provides common test fixtures and configuration used across
unit, integration, and end-to-end tests.
"""

import json
import os

# Powertools and the env modeler read the environment when the service modules
# are imported, so it is set before anything from orders_service is loaded.
os.environ.update({
    "AWS_DEFAULT_REGION": "us-east-1",
    "AWS_ACCESS_KEY_ID": "test",
    "AWS_SECRET_ACCESS_KEY": "test",
    "ORDERS_REPOSITORY": "memory",
    "TABLE_NAME": "test-orders-table",
    "POWERTOOLS_SERVICE_NAME": "test-orders-service",
    "LOG_LEVEL": "DEBUG",
    "POWERTOOLS_TRACE_DISABLED": "true",  # Disable X-Ray in tests
})

from typing import Any, Callable, Dict, Optional
from unittest.mock import Mock, create_autospec

import boto3
import pytest
from moto import mock_aws

from orders_service.dal import BaseOrderRepository
from orders_service.handlers.utils.observability import metrics
from orders_service.models.order import Order

TEST_TABLE_NAME = "test-orders-table"
TEST_NAMESPACE_INDEX = "namespace-index"


# DynamoDB fixtures
@pytest.fixture
def dynamodb_table():
    """Create a mock DynamoDB orders table for testing."""
    with mock_aws():
        dynamodb = boto3.resource("dynamodb", region_name="us-east-1")

        table = dynamodb.create_table(
            TableName=TEST_TABLE_NAME,
            KeySchema=[
                {"AttributeName": "order_id", "KeyType": "HASH"},
            ],
            AttributeDefinitions=[
                {"AttributeName": "order_id", "AttributeType": "S"},
                {"AttributeName": "namespace", "AttributeType": "S"},
            ],
            GlobalSecondaryIndexes=[
                {
                    "IndexName": TEST_NAMESPACE_INDEX,
                    "KeySchema": [
                        {"AttributeName": "namespace", "KeyType": "HASH"},
                        {"AttributeName": "order_id", "KeyType": "RANGE"},
                    ],
                    "Projection": {"ProjectionType": "ALL"},
                }
            ],
            BillingMode="PAY_PER_REQUEST",
        )

        # Wait for table to be created
        table.wait_until_exists()
        yield table


# Sample data fixtures
@pytest.fixture
def sample_order() -> Order:
    """Create a sample order for testing."""
    return Order(
        order_id="o1",
        namespace="stage",
        postal_code="12345",
        town="Metropolis",
        total=9.99,
    )


@pytest.fixture
def sample_order_data() -> Dict[str, Any]:
    """Sample order payload in wire format."""
    return {
        "orderId": "o1",
        "postalCode": "12345",
        "town": "Metropolis",
        "total": 9.99,
    }


@pytest.fixture
def mock_repository() -> Mock:
    """Order repository mock honouring the repository interface."""
    return create_autospec(BaseOrderRepository, instance=True)


@pytest.fixture
def api_gateway_event() -> Callable[..., Dict[str, Any]]:
    """Build API Gateway REST proxy events for testing."""

    def build(
        method: str,
        path: str,
        body: Optional[Any] = None,
        path_parameters: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        if body is not None and not isinstance(body, str):
            body = json.dumps(body)

        return {
            "resource": path,
            "httpMethod": method,
            "path": path,
            "headers": {
                "Content-Type": "application/json",
                "User-Agent": "test-agent/1.0",
            },
            "multiValueHeaders": {},
            "body": body,
            "requestContext": {
                "requestId": "test-request-id-123",
                "accountId": "123456789012",
                "stage": "test",
                "httpMethod": method,
                "path": path,
                "resourcePath": path,
                "protocol": "HTTP/1.1",
                "requestTime": "2024-01-01T12:00:00.000Z",
                "requestTimeEpoch": 1704110400000,
                "identity": {
                    "sourceIp": "127.0.0.1",
                    "userAgent": "test-agent/1.0",
                },
            },
            "pathParameters": path_parameters,
            "queryStringParameters": None,
            "multiValueQueryStringParameters": None,
            "stageVariables": None,
            "isBase64Encoded": False,
        }

    return build


@pytest.fixture
def lambda_context():
    """Create a mock Lambda context for testing."""
    context = Mock()
    context.function_name = "test-orders-function"
    context.function_version = "1"
    context.invoked_function_arn = "arn:aws:lambda:us-east-1:123456789012:function:test-orders-function"
    context.memory_limit_in_mb = 512
    context.get_remaining_time_in_millis.return_value = 30000
    context.aws_request_id = "test-request-id-123"
    context.log_group_name = "/aws/lambda/test-orders-function"
    context.log_stream_name = "2024/01/01/[$LATEST]test123"
    return context


# Error simulation fixtures
@pytest.fixture
def mock_dynamodb_error():
    """Build DynamoDB client errors for testing error handling."""
    from botocore.exceptions import ClientError

    def create_error(error_code: str, message: str = "Test error"):
        return ClientError(
            error_response={
                "Error": {
                    "Code": error_code,
                    "Message": message,
                }
            },
            operation_name="TestOperation"
        )

    return create_error


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        path = str(item.fspath)
        if "unit" in path:
            item.add_marker(pytest.mark.unit)
        elif "integration" in path:
            item.add_marker(pytest.mark.integration)
        elif "e2e" in path:
            item.add_marker(pytest.mark.e2e)


@pytest.fixture(autouse=True)
def reset_metrics():
    """Drop metrics collected by a previous test."""
    metrics.clear_metrics()
    yield
    metrics.clear_metrics()
