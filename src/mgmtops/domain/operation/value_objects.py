"""Operation value objects - closed status taxonomies and wire enums."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Union


class OperationStatus(str, Enum):
    """Import/export operation status."""

    PENDING = "Pending"
    IN_PROGRESS = "InProgress"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"

    @property
    def is_terminal(self) -> bool:
        return self in (OperationStatus.SUCCEEDED, OperationStatus.FAILED)

    @classmethod
    def from_wire(cls, value: str) -> Union[OperationStatus, str]:
        """
        Convert a service status string to the closed taxonomy.

        A status outside the known aliases is returned unchanged so the
        caller still sees exactly what the service reported.
        """
        return _IMPORT_EXPORT_ALIASES.get(value.replace(" ", "").lower(), value)


class AsyncOperationStatus(str, Enum):
    """Resource-manager asynchronous operation status."""

    IN_PROGRESS = "InProgress"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    CANCELED = "Canceled"

    @property
    def is_terminal(self) -> bool:
        return self is not AsyncOperationStatus.IN_PROGRESS

    @classmethod
    def from_wire(cls, value: str) -> Union[AsyncOperationStatus, str]:
        """Convert a service status string; unknown values pass through as-is."""
        return _ASYNC_ALIASES.get(value.lower(), value)


def status_value(status: Union[Enum, str]) -> str:
    """Wire string of a parsed status, whether known or passed through."""
    return status.value if isinstance(status, Enum) else status


_IMPORT_EXPORT_ALIASES: Dict[str, OperationStatus] = {
    "pending": OperationStatus.PENDING,
    "queued": OperationStatus.PENDING,
    "inprogress": OperationStatus.IN_PROGRESS,
    "running": OperationStatus.IN_PROGRESS,
    "succeeded": OperationStatus.SUCCEEDED,
    "completed": OperationStatus.SUCCEEDED,
    "failed": OperationStatus.FAILED,
    "canceled": OperationStatus.FAILED,
    "cancelled": OperationStatus.FAILED,
}

_ASYNC_ALIASES: Dict[str, AsyncOperationStatus] = {
    "inprogress": AsyncOperationStatus.IN_PROGRESS,
    "accepted": AsyncOperationStatus.IN_PROGRESS,
    "running": AsyncOperationStatus.IN_PROGRESS,
    "updating": AsyncOperationStatus.IN_PROGRESS,
    "succeeded": AsyncOperationStatus.SUCCEEDED,
    "failed": AsyncOperationStatus.FAILED,
    "canceled": AsyncOperationStatus.CANCELED,
    "cancelled": AsyncOperationStatus.CANCELED,
}


class AuthenticationType(str, Enum):
    """Authentication type used by the service to reach the SQL server."""

    NONE = "None"
    SQL = "Sql"
    AD_PASSWORD = "AdPassword"
    MANAGED_IDENTITY = "ManagedIdentity"

    def to_wire(self) -> str:
        return self.value.lower()


class StorageKeyType(str, Enum):
    """Kind of key supplied for the storage account."""

    STORAGE_ACCESS_KEY = "StorageAccessKey"
    SHARED_ACCESS_KEY = "SharedAccessKey"
    MANAGED_IDENTITY = "ManagedIdentity"


class DatabaseEdition(str, Enum):
    """Database edition hint for imports."""

    NONE = "None"
    BASIC = "Basic"
    STANDARD = "Standard"
    PREMIUM = "Premium"
    DATA_WAREHOUSE = "DataWarehouse"
    GENERAL_PURPOSE = "GeneralPurpose"
    BUSINESS_CRITICAL = "BusinessCritical"
    HYPERSCALE = "Hyperscale"
