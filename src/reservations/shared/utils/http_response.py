import json

from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEventV2
from pydantic import BaseModel, ValidationError

from reservations.shared.domain.exception import (
    DuplicateResourceException,
    InvalidInputException,
    ResourceNotFoundException,
)


class ErrorResponse(BaseModel):
    """エラーレスポンスモデル"""

    status: str = "error"
    error_code: str
    message: str
    details: list | None = None


_ERROR_STATUS: dict[type[Exception], tuple[int, str]] = {
    ValidationError: (400, "INVALID_INPUT"),
    InvalidInputException: (400, "INVALID_INPUT"),
    ResourceNotFoundException: (404, "RECORD_NOT_FOUND"),
    DuplicateResourceException: (409, "RECORD_ALREADY_EXISTS"),
}


def api_response(status_code: int, body: dict) -> dict:
    """API Gateway HTTP API のレスポンス形式を生成する"""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, default=str),
    }


def error_response(error: Exception) -> dict:
    """例外を HTTP ステータス付きのエラーレスポンスに変換する

    ドメイン例外以外は 500 とし、メッセージは外部に出さない。
    """
    status_code, error_code = 500, "INTERNAL_ERROR"
    for error_type, mapped in _ERROR_STATUS.items():
        if isinstance(error, error_type):
            status_code, error_code = mapped
            break

    if isinstance(error, ValidationError):
        message = "Request validation failed"
        details = error.errors(include_url=False)
    elif status_code == 500:
        message = "Internal server error"
        details = None
    else:
        message = str(error)
        details = None

    body = ErrorResponse(
        error_code=error_code,
        message=message,
        details=details,
    ).model_dump(exclude_none=True)
    return api_response(status_code, body)


def request_body(event: APIGatewayProxyEventV2) -> dict:
    """リクエストボディを JSON オブジェクトとして取り出す（空の場合は空辞書）"""
    if not event.body:
        return {}
    try:
        body = event.json_body
    except ValueError as e:
        raise InvalidInputException("Request body is not a valid JSON document") from e
    if not isinstance(body, dict):
        raise InvalidInputException("Request body must be a JSON object")
    return body
