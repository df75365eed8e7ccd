import os

import boto3
from boto3.dynamodb.conditions import Attr
from botocore.exceptions import ClientError

from reservations.shared.domain.exception import DuplicateResourceException


class DynamoDBRepository:
    """単一テーブル設計の DynamoDB リポジトリ共通処理

    - PK / SK の複合キーで各ビューを表現する
    - 条件付き書き込み（insert-if-absent）で一意性を保証する
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def _put_if_absent(self, item: dict, duplicate_message: str) -> None:
        """同じキーのアイテムが無い場合のみ書き込む"""
        try:
            self.table.put_item(Item=item, ConditionExpression=Attr("PK").not_exists())
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException(duplicate_message) from e
            raise

    def _get(self, pk: str, sk: str) -> dict | None:
        response = self.table.get_item(
            Key={"PK": pk, "SK": sk},
            ConsistentRead=True,
        )
        return response.get("Item")

    def _exists(self, pk: str, sk: str) -> bool:
        response = self.table.get_item(
            Key={"PK": pk, "SK": sk},
            ProjectionExpression="PK",
            ConsistentRead=True,
        )
        return "Item" in response

    def _query_all(self, **kwargs) -> list[dict]:
        """ページングを辿ってパーティション内の全アイテムを取得する"""
        items: list[dict] = []
        while True:
            response = self.table.query(ConsistentRead=True, **kwargs)
            items.extend(response.get("Items", []))
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                return items
            kwargs["ExclusiveStartKey"] = last_key
