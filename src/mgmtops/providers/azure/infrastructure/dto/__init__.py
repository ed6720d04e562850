"""Wire-level DTOs exchanged with the management service."""

from .import_export import (
    ImportExportDatabaseDefinition,
    ImportExportOperationResult,
    NetworkIsolationSettings,
    OperationStatusResponse,
    WireModel,
)
from .peering import ContactDetail, PeerAsnDto, PeerAsnListResult, PeerAsnProperties

__all__ = [
    "WireModel",
    "NetworkIsolationSettings",
    "ImportExportDatabaseDefinition",
    "ImportExportOperationResult",
    "OperationStatusResponse",
    "ContactDetail",
    "PeerAsnProperties",
    "PeerAsnDto",
    "PeerAsnListResult",
]
