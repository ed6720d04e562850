"""Long-running operation domain - statuses, requests and status models."""

from .models import (
    ImportExportRequest,
    ImportRequest,
    StatusModel,
    UserFacingModel,
    overlay_operation_result,
)
from .value_objects import (
    AsyncOperationStatus,
    AuthenticationType,
    DatabaseEdition,
    OperationStatus,
    StorageKeyType,
    status_value,
)

__all__ = [
    "UserFacingModel",
    "ImportExportRequest",
    "ImportRequest",
    "StatusModel",
    "overlay_operation_result",
    "OperationStatus",
    "AsyncOperationStatus",
    "AuthenticationType",
    "StorageKeyType",
    "DatabaseEdition",
    "status_value",
]
