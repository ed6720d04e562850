"""Operation adapters: builder -> communicator -> mapper per action."""

from .application_gateway_adapter import ApplicationGatewayAdapter
from .base_adapter import BaseManagementAdapter
from .import_export_adapter import ImportExportDatabaseAdapter
from .peering_adapter import PeerAsnAdapter
from .service_fabric_adapter import ServiceFabricClusterAdapter

__all__ = [
    "BaseManagementAdapter",
    "ImportExportDatabaseAdapter",
    "PeerAsnAdapter",
    "ApplicationGatewayAdapter",
    "ServiceFabricClusterAdapter",
]
