from .http_response import api_response, error_response, request_body
from .logger import get_logger
from .validators import is_empty, make_string, validate

__all__ = [
    "api_response",
    "error_response",
    "get_logger",
    "is_empty",
    "make_string",
    "request_body",
    "validate",
]
