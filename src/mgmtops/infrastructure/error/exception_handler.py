"""Exception classification into stable error responses."""

from enum import Enum
from typing import Any, Dict, Optional, Tuple, Type

from pydantic import BaseModel, Field

from mgmtops.domain.base.exceptions import (
    DomainException,
    DuplicateNameError,
    NotFoundError,
    OperationTimeoutError,
    ValidationError,
)
from mgmtops.infrastructure.exceptions import (
    ConfigurationError,
    CredentialError,
    InfrastructureError,
    OperationError,
    TransportError,
)
from mgmtops.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class ErrorCategory(str, Enum):
    """Broad error categories."""
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CREDENTIAL = "credential"
    CONFIGURATION = "configuration"
    SERVICE = "service"
    TRANSPORT = "transport"
    TIMEOUT = "timeout"
    INTERNAL = "internal"


class ErrorCode(str, Enum):
    """Stable error codes surfaced to the user."""
    DUPLICATE_NAME = "DUPLICATE_NAME"
    NOT_FOUND = "NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    CREDENTIAL_ERROR = "CREDENTIAL_ERROR"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    OPERATION_ERROR = "OPERATION_ERROR"
    TRANSPORT_ERROR = "TRANSPORT_ERROR"
    OPERATION_TIMEOUT = "OPERATION_TIMEOUT"
    INFRASTRUCTURE_ERROR = "INFRASTRUCTURE_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ErrorResponse(BaseModel):
    """Normalized error description."""

    error_code: str
    message: str
    category: ErrorCategory
    details: Dict[str, Any] = Field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.error_code,
            "message": self.message,
            "category": self.category.value,
            "details": self.details,
        }


# Most specific classes first.
_CLASSIFICATION: Tuple[Tuple[Type[BaseException], ErrorCode, ErrorCategory], ...] = (
    (DuplicateNameError, ErrorCode.DUPLICATE_NAME, ErrorCategory.VALIDATION),
    (NotFoundError, ErrorCode.NOT_FOUND, ErrorCategory.NOT_FOUND),
    (OperationTimeoutError, ErrorCode.OPERATION_TIMEOUT, ErrorCategory.TIMEOUT),
    (ValidationError, ErrorCode.VALIDATION_ERROR, ErrorCategory.VALIDATION),
    (CredentialError, ErrorCode.CREDENTIAL_ERROR, ErrorCategory.CREDENTIAL),
    (ConfigurationError, ErrorCode.CONFIGURATION_ERROR, ErrorCategory.CONFIGURATION),
    (OperationError, ErrorCode.OPERATION_ERROR, ErrorCategory.SERVICE),
    (TransportError, ErrorCode.TRANSPORT_ERROR, ErrorCategory.TRANSPORT),
    (InfrastructureError, ErrorCode.INFRASTRUCTURE_ERROR, ErrorCategory.INTERNAL),
    (DomainException, ErrorCode.VALIDATION_ERROR, ErrorCategory.VALIDATION),
)


class ExceptionHandler:
    """Maps exceptions to ErrorResponse objects and logs them."""

    def handle_error(self, error: BaseException, context: Optional[str] = None) -> ErrorResponse:
        code, category = self._classify(error)
        details = self._details(error)
        if context:
            details["context"] = context

        if category is ErrorCategory.INTERNAL:
            logger.error("Unhandled error in %s: %s", context or "operation", error, exc_info=error)
        else:
            logger.warning("%s in %s: %s", code.value, context or "operation", error)

        return ErrorResponse(
            error_code=code.value,
            message=str(error),
            category=category,
            details=details,
        )

    @staticmethod
    def _classify(error: BaseException) -> Tuple[ErrorCode, ErrorCategory]:
        for error_type, code, category in _CLASSIFICATION:
            if isinstance(error, error_type):
                return code, category
        return ErrorCode.INTERNAL_ERROR, ErrorCategory.INTERNAL

    @staticmethod
    def _details(error: BaseException) -> Dict[str, Any]:
        if isinstance(error, DomainException):
            return dict(error.details)
        if isinstance(error, OperationError):
            return {"code": error.code, "status_code": error.status_code}
        if isinstance(error, TransportError):
            return {"status_code": error.status_code}
        return {}


_exception_handler: Optional[ExceptionHandler] = None


def get_exception_handler() -> ExceptionHandler:
    """Get the shared exception handler."""
    global _exception_handler
    if _exception_handler is None:
        _exception_handler = ExceptionHandler()
    return _exception_handler
