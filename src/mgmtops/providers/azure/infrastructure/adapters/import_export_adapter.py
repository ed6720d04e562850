"""
Database import/export adapter.

Builds the wire definition, submits it through the communicator and maps the
answer back onto a copy of the caller's request. Status queries are driven by
the caller with the returned operation link.
"""

from typing import Optional, Union

from mgmtops.domain.base.value_objects import OperationHandle
from mgmtops.domain.operation.models import ImportExportRequest, ImportRequest, StatusModel
from mgmtops.providers.azure.infrastructure.adapters.base_adapter import BaseManagementAdapter
from mgmtops.providers.azure.infrastructure.builders import ImportExportRequestBuilder
from mgmtops.providers.azure.infrastructure.communicators import ImportExportDatabaseCommunicator
from mgmtops.providers.azure.infrastructure.mappers import OperationResponseMapper


class ImportExportDatabaseAdapter(BaseManagementAdapter):
    """Adapter for import/export operations."""

    def __init__(
        self,
        communicator: ImportExportDatabaseCommunicator,
        request_builder: ImportExportRequestBuilder,
        mapper: Optional[OperationResponseMapper] = None,
        logger=None,
    ):
        """
        Initialize the adapter.

        Args:
            communicator: Communicator issuing the management calls
            request_builder: Builder producing wire definitions
            mapper: Response mapper
            logger: Logger for logging messages
        """
        super().__init__(logger)
        self._communicator = communicator
        self._builder = request_builder
        self._mapper = mapper or OperationResponseMapper()

    def export(self, export_request: ImportExportRequest) -> ImportExportRequest:
        """
        Submit a new export request.

        Args:
            export_request: Export request parameters

        Returns:
            Copy of the request carrying status, error message and the
            operation status link
        """
        definition = self._builder.build_export(export_request)
        self._logger.info(
            "Submitting export of %s/%s/%s to %s",
            export_request.resource_group_name,
            export_request.server_name,
            export_request.database_name,
            export_request.storage_uri,
        )
        response = self._invoke(
            "export",
            self._communicator.export,
            export_request.resource_group_name,
            export_request.server_name,
            export_request.database_name,
            definition,
        )
        return self._mapper.to_import_export_model(response, export_request)

    def import_database(self, import_request: ImportRequest) -> ImportRequest:
        """
        Submit a new import request.

        Args:
            import_request: Import request parameters

        Returns:
            Copy of the request carrying status, error message and the
            operation status link
        """
        definition = self._builder.build_import(import_request)
        self._logger.info(
            "Submitting import of %s into %s/%s/%s",
            import_request.storage_uri,
            import_request.resource_group_name,
            import_request.server_name,
            import_request.database_name,
        )
        response = self._invoke(
            "import",
            self._communicator.import_database,
            import_request.resource_group_name,
            import_request.server_name,
            definition,
        )
        return self._mapper.to_import_export_model(response, import_request)

    def get_status(self, handle: Union[OperationHandle, str]) -> StatusModel:
        """
        Get the status of an import/export operation.

        Args:
            handle: The operation status link

        Returns:
            Operation status, echoing the link
        """
        if isinstance(handle, str):
            handle = OperationHandle(link=handle)
        self._logger.debug("Polling import/export operation %s", handle.link)
        response = self._invoke("get_status", self._communicator.get_status, handle.link)
        return self._mapper.to_status_model(response, handle)
