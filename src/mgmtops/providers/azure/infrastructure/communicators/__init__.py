"""Thin transport wrappers: one call per method, no retries."""

from .import_export_communicator import ImportExportDatabaseCommunicator
from .peering_communicator import PeerAsnCommunicator
from .resource_communicator import (
    ApplicationGatewayCommunicator,
    ResourceCommunicator,
    ServiceFabricClusterCommunicator,
)

__all__ = [
    "ImportExportDatabaseCommunicator",
    "PeerAsnCommunicator",
    "ResourceCommunicator",
    "ApplicationGatewayCommunicator",
    "ServiceFabricClusterCommunicator",
]
