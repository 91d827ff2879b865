"""
DynamoDB implementation of the order repository.

The table is keyed by ``order_id``; a global secondary index keyed by
``namespace`` serves the namespace scoped operations.
"""

from decimal import Decimal
from typing import Any, Callable, Dict, Iterator, List, Optional

import boto3
from boto3.dynamodb.conditions import Key
from botocore.exceptions import BotoCoreError, ClientError

from orders_service.dal import BaseOrderRepository, DuplicateKeyError, RepositoryError
from orders_service.handlers.utils.observability import logger, tracer
from orders_service.models.order import Order

ORDER_ID_ATTRIBUTE = 'order_id'
NAMESPACE_ATTRIBUTE = 'namespace'


class DynamoDBOrderRepository(BaseOrderRepository):
    """DynamoDB backed order repository."""

    def __init__(
        self,
        table_name: str,
        region_name: Optional[str] = None,
        endpoint_url: Optional[str] = None,
        namespace_index_name: str = 'namespace-index',
    ) -> None:
        """
        Initialize the DynamoDB repository.

        Args:
            table_name: Name of the DynamoDB table
            region_name: AWS region name
            endpoint_url: DynamoDB endpoint URL (for local testing)
            namespace_index_name: Global secondary index keyed by namespace
        """
        self.table_name = table_name
        self.namespace_index_name = namespace_index_name

        session_config: Dict[str, Any] = {}
        if region_name:
            session_config['region_name'] = region_name
        if endpoint_url:
            session_config['endpoint_url'] = endpoint_url

        self.dynamodb = boto3.resource('dynamodb', **session_config)
        self.table = self.dynamodb.Table(table_name)

        logger.info('DynamoDB order repository initialized', extra={
            'table_name': table_name,
            'region_name': region_name,
            'endpoint_url': endpoint_url,
            'namespace_index_name': namespace_index_name,
        })

    @tracer.capture_method
    def insert_order(self, order: Order) -> None:
        try:
            self.table.put_item(
                Item=self._order_to_item(order),
                ConditionExpression='attribute_not_exists(#id)',
                ExpressionAttributeNames={'#id': ORDER_ID_ATTRIBUTE},
            )
        except ClientError as e:
            if e.response['Error']['Code'] == 'ConditionalCheckFailedException':
                raise DuplicateKeyError(order.order_id) from e
            raise self._repository_error('PutItem', e) from e
        except (BotoCoreError, TypeError, ArithmeticError) as e:
            # boto3's number serializer raises TypeError or decimal traps
            # (Overflow, Underflow, Inexact) for totals DynamoDB can not store
            raise self._repository_error('PutItem', e) from e

    @tracer.capture_method
    def get_orders(self) -> List[Order]:
        try:
            return [self._item_to_order(item) for item in self._paginate(self.table.scan)]
        except (ClientError, BotoCoreError) as e:
            raise self._repository_error('Scan', e) from e

    @tracer.capture_method
    def get_namespace_orders(self, namespace: str) -> List[Order]:
        try:
            items = self._paginate(
                self.table.query,
                IndexName=self.namespace_index_name,
                KeyConditionExpression=Key(NAMESPACE_ATTRIBUTE).eq(namespace),
            )
            return [self._item_to_order(item) for item in items]
        except (ClientError, BotoCoreError) as e:
            raise self._repository_error('Query', e) from e

    @tracer.capture_method
    def delete_orders(self) -> None:
        try:
            keys = self._collect_keys(self._paginate(
                self.table.scan,
                ProjectionExpression='#id',
                ExpressionAttributeNames={'#id': ORDER_ID_ATTRIBUTE},
            ))
        except (ClientError, BotoCoreError) as e:
            raise self._repository_error('Scan', e) from e

        self._delete_keys(keys)

    @tracer.capture_method
    def delete_namespace_orders(self, namespace: str) -> None:
        try:
            keys = self._collect_keys(self._paginate(
                self.table.query,
                IndexName=self.namespace_index_name,
                KeyConditionExpression=Key(NAMESPACE_ATTRIBUTE).eq(namespace),
            ))
        except (ClientError, BotoCoreError) as e:
            raise self._repository_error('Query', e) from e

        self._delete_keys(keys)

    def _paginate(self, operation: Callable[..., Dict[str, Any]], **kwargs: Any) -> Iterator[Dict[str, Any]]:
        """Yield every item of a scan or query, following LastEvaluatedKey."""
        while True:
            response = operation(**kwargs)
            yield from response.get('Items', [])

            last_evaluated_key = response.get('LastEvaluatedKey')
            if not last_evaluated_key:
                return
            kwargs['ExclusiveStartKey'] = last_evaluated_key

    @staticmethod
    def _collect_keys(items: Iterator[Dict[str, Any]]) -> List[Dict[str, Any]]:
        # Keys are collected first so deletes do not disturb the running scan
        return [{ORDER_ID_ATTRIBUTE: item[ORDER_ID_ATTRIBUTE]} for item in items]

    def _delete_keys(self, keys: List[Dict[str, Any]]) -> None:
        try:
            with self.table.batch_writer() as batch:
                for key in keys:
                    batch.delete_item(Key=key)
        except (ClientError, BotoCoreError) as e:
            raise self._repository_error('BatchWriteItem', e) from e
        logger.debug('Deleted orders from DynamoDB', extra={'deleted_count': len(keys)})

    def _repository_error(self, operation: str, error: Exception) -> RepositoryError:
        if isinstance(error, ClientError):
            error_code = error.response['Error']['Code']
        else:
            error_code = type(error).__name__

        logger.error(f'DynamoDB {operation} error', extra={
            'error_code': error_code,
            'error': str(error),
            'table_name': self.table_name,
        })
        return RepositoryError(f'DynamoDB {operation} failed: {error_code}')

    @staticmethod
    def _order_to_item(order: Order) -> Dict[str, Any]:
        return {
            ORDER_ID_ATTRIBUTE: order.order_id,
            NAMESPACE_ATTRIBUTE: order.namespace,
            'postal_code': order.postal_code,
            'town': order.town,
            # boto3 rejects floats, Decimal(str()) keeps the decimal digits
            'total': Decimal(str(order.total)),
        }

    @staticmethod
    def _item_to_order(item: Dict[str, Any]) -> Order:
        return Order(
            order_id=item[ORDER_ID_ATTRIBUTE],
            namespace=item[NAMESPACE_ATTRIBUTE],
            postal_code=item['postal_code'],
            town=item['town'],
            total=float(item['total']),
        )
