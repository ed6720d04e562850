"""Response mappers: transport responses to user-facing models."""

from .operation_response_mapper import OperationResponseMapper, resource_submission_status

__all__ = ["OperationResponseMapper", "resource_submission_status"]
