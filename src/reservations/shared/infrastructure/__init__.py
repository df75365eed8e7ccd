from .dynamodb_repository import DynamoDBRepository

__all__ = ["DynamoDBRepository"]
