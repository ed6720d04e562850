"""Error handling infrastructure package."""

from mgmtops.infrastructure.error.error_middleware import is_error_response, with_error_handling
from mgmtops.infrastructure.error.exception_handler import (
    ErrorCategory,
    ErrorCode,
    ErrorResponse,
    ExceptionHandler,
    get_exception_handler,
)

__all__: list = [
    "ExceptionHandler",
    "ErrorResponse",
    "ErrorCategory",
    "ErrorCode",
    "with_error_handling",
    "is_error_response",
    "get_exception_handler",
]
