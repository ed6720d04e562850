"""Communicator for database import/export calls."""

from mgmtops.providers.azure.infrastructure.dto import ImportExportDatabaseDefinition
from mgmtops.providers.azure.infrastructure.management_client import (
    ManagementClient,
    TransportResponse,
)

SQL_PROVIDER = "providers/Microsoft.Sql"


class ImportExportDatabaseCommunicator:
    """One management call per method; no retries, faults propagate as TransportError."""

    def __init__(self, client: ManagementClient, api_version: str):
        self._client = client
        self._api_version = api_version

    def export(
        self,
        resource_group_name: str,
        server_name: str,
        database_name: str,
        definition: ImportExportDatabaseDefinition,
    ) -> TransportResponse:
        path = self._client.subscription_path(
            "resourceGroups",
            resource_group_name,
            SQL_PROVIDER,
            "servers",
            server_name,
            "databases",
            database_name,
            "export",
        )
        return self._client.send("POST", path, self._api_version, definition.to_wire())

    def import_database(
        self,
        resource_group_name: str,
        server_name: str,
        definition: ImportExportDatabaseDefinition,
    ) -> TransportResponse:
        path = self._client.subscription_path(
            "resourceGroups", resource_group_name, SQL_PROVIDER, "servers", server_name, "import"
        )
        return self._client.send("POST", path, self._api_version, definition.to_wire())

    def get_status(self, operation_status_link: str) -> TransportResponse:
        return self._client.poll(operation_status_link)
