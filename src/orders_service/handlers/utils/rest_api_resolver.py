"""
REST API resolver utility for the orders handlers.

This module provides the configured API Gateway REST resolver with OpenAPI
documentation support.
"""

from aws_lambda_powertools.event_handler import APIGatewayRestResolver
from aws_lambda_powertools.event_handler.openapi.models import Tag

# API path constants
ORDERS_PATH = '/orders'
NAMESPACE_ORDERS_PATH = '/orders/<namespace>'

# OpenAPI tags for documentation
ORDERS_TAG = Tag(name='Orders', description='Order management operations')

# Configure API Gateway REST resolver
app = APIGatewayRestResolver(debug=False)

# Configure OpenAPI documentation
app.enable_swagger(
    path='/swagger',
    title='Orders Service API',
    version='1.0.0',
    description='Create, list and delete orders grouped by namespace',
    tags=[ORDERS_TAG],
)
