"""Builds import/export transport requests from user-facing models."""

from mgmtops.domain.operation.models import ImportExportRequest, ImportRequest
from mgmtops.domain.operation.value_objects import AuthenticationType, DatabaseEdition
from mgmtops.infrastructure.secrets import SecretCipher
from mgmtops.providers.azure.infrastructure.dto import (
    ImportExportDatabaseDefinition,
    NetworkIsolationSettings,
)


class ImportExportRequestBuilder:
    """
    Pure transform from ImportExportRequest/ImportRequest to the wire definition.

    The stored administrator password is decrypted here and nowhere else.
    """

    def __init__(self, cipher: SecretCipher):
        self._cipher = cipher

    def build_export(self, request: ImportExportRequest) -> ImportExportDatabaseDefinition:
        """
        Build the export definition.

        Raises:
            CredentialError: If the stored password cannot be decrypted
        """
        return ImportExportDatabaseDefinition(**self._common_fields(request))

    def build_import(self, request: ImportRequest) -> ImportExportDatabaseDefinition:
        """
        Build the import definition: the export fields plus size, edition,
        service objective and the target database name.

        Raises:
            CredentialError: If the stored password cannot be decrypted
        """
        fields = self._common_fields(request)
        fields.update(
            max_size_bytes=str(request.database_max_size_bytes),
            edition=request.edition.value if request.edition is not DatabaseEdition.NONE else "",
            service_objective_name=request.service_objective_name,
            database_name=request.database_name,
        )
        return ImportExportDatabaseDefinition(**fields)

    def _common_fields(self, request: ImportExportRequest) -> dict:
        fields = {
            "administrator_login": request.administrator_login,
            "administrator_login_password": self._cipher.decrypt(request.administrator_login_password),
            "storage_key": request.storage_key,
            "storage_key_type": request.storage_key_type.value,
            "storage_uri": request.storage_uri,
            "network_isolation": NetworkIsolationSettings(
                sql_server_resource_id=request.sql_server_resource_id,
                storage_account_resource_id=request.storage_account_resource_id,
            ),
        }
        # Absent, never empty, when no authentication type is requested
        if request.authentication_type is not AuthenticationType.NONE:
            fields["authentication_type"] = request.authentication_type.to_wire()
        return fields
