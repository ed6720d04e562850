"""Communicators for resources mutated as a whole (gateways, clusters)."""

from typing import Any, Dict

from mgmtops.providers.azure.infrastructure.management_client import (
    ManagementClient,
    TransportResponse,
)


class ResourceCommunicator:
    """
    Get/put/patch for one resource type under a resource group.

    Args:
        client: Management client
        provider_path: e.g. "providers/Microsoft.Network/applicationGateways"
        api_version: Resource provider API version
    """

    def __init__(self, client: ManagementClient, provider_path: str, api_version: str):
        self._client = client
        self._provider_path = provider_path
        self._api_version = api_version

    def _path(self, resource_group_name: str, name: str) -> str:
        return self._client.subscription_path(
            "resourceGroups", resource_group_name, self._provider_path, name
        )

    def get(self, resource_group_name: str, name: str) -> TransportResponse:
        return self._client.send("GET", self._path(resource_group_name, name), self._api_version)

    def create_or_update(
        self, resource_group_name: str, name: str, body: Dict[str, Any]
    ) -> TransportResponse:
        return self._client.send("PUT", self._path(resource_group_name, name), self._api_version, body)

    def update(self, resource_group_name: str, name: str, body: Dict[str, Any]) -> TransportResponse:
        return self._client.send(
            "PATCH", self._path(resource_group_name, name), self._api_version, body
        )

    def get_status(self, operation_status_link: str) -> TransportResponse:
        return self._client.poll(operation_status_link)


class ApplicationGatewayCommunicator(ResourceCommunicator):
    def __init__(self, client: ManagementClient, api_version: str):
        super().__init__(client, "providers/Microsoft.Network/applicationGateways", api_version)


class ServiceFabricClusterCommunicator(ResourceCommunicator):
    def __init__(self, client: ManagementClient, api_version: str):
        super().__init__(client, "providers/Microsoft.ServiceFabric/clusters", api_version)
