"""Base domain exceptions - shared by all resource families."""

from typing import Any, Dict, Optional


class DomainException(Exception):
    """Base exception for all domain-specific errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class ValidationError(DomainException):
    """Raised when domain validation fails."""


class DuplicateNameError(ValidationError):
    """Raised when a named child already exists in its parent collection."""

    def __init__(self, child_type: str, name: str):
        super().__init__(
            f"{child_type} with the specified name already exists: {name}",
            "DUPLICATE_NAME",
            {"child_type": child_type, "name": name},
        )
        self.child_type = child_type
        self.name = name


class NotFoundError(DomainException):
    """Raised when a named child or resource cannot be found."""

    def __init__(self, resource_type: str, name: str):
        super().__init__(
            f"{resource_type} with name {name} not found",
            "NOT_FOUND",
            {"resource_type": resource_type, "name": name},
        )
        self.resource_type = resource_type
        self.name = name


class OperationTimeoutError(DomainException):
    """Raised when a polled operation does not reach a terminal state in time."""

    def __init__(self, operation_status_link: str, timeout: float, last_status: Optional[str]):
        super().__init__(
            f"Operation did not complete within {timeout} seconds (last status: {last_status})",
            "OPERATION_TIMEOUT",
            {"operation_status_link": operation_status_link, "last_status": last_status},
        )
        self.operation_status_link = operation_status_link
        self.timeout = timeout
        self.last_status = last_status
