"""Tests for the database import/export adapter, end to end over a mocked session."""

from datetime import datetime
from unittest.mock import Mock

import pytest

from mgmtops.domain.base.value_objects import OperationHandle
from mgmtops.domain.operation.models import ImportExportRequest, ImportRequest
from mgmtops.domain.operation.value_objects import (
    AuthenticationType,
    OperationStatus,
    StorageKeyType,
)
from mgmtops.infrastructure.exceptions import OperationError, TransportError
from mgmtops.providers.azure.infrastructure.adapters import ImportExportDatabaseAdapter
from mgmtops.providers.azure.infrastructure.builders import ImportExportRequestBuilder
from mgmtops.providers.azure.infrastructure.communicators import ImportExportDatabaseCommunicator


@pytest.mark.unit
@pytest.mark.sql
class TestImportExportDatabaseAdapter:
    """Test export, import and status queries."""

    @pytest.fixture(autouse=True)
    def _adapter(self, management_client, mock_session, cipher, http_response, operation_link):
        self.session = mock_session
        self.cipher = cipher
        self.http_response = http_response
        self.operation_link = operation_link
        self.adapter = ImportExportDatabaseAdapter(
            ImportExportDatabaseCommunicator(management_client, "2021-11-01"),
            ImportExportRequestBuilder(cipher),
        )

    def _export_request(self, **overrides) -> ImportExportRequest:
        fields = dict(
            resource_group_name="rg",
            server_name="srv",
            database_name="db",
            storage_uri="https://acct.blob.core.windows.net/c/db.bacpac",
            storage_key="storage-key",
            storage_key_type=StorageKeyType.STORAGE_ACCESS_KEY,
            administrator_login="admin",
            administrator_login_password=self.cipher.encrypt("P@ssw0rd"),
            authentication_type=AuthenticationType.SQL,
        )
        fields.update(overrides)
        return ImportExportRequest(**fields)

    def _sent_body(self):
        return self.session.request.call_args.kwargs["json"]

    def test_export_submits_definition_and_returns_overlay(self):
        self.session.request.return_value = self.http_response(
            202,
            {"properties": {"status": "InProgress", "requestType": "Export"}},
            {"Azure-AsyncOperation": self.operation_link},
        )
        request = self._export_request()

        result = self.adapter.export(request)

        method, url = self.session.request.call_args.args
        assert method == "POST"
        assert url.endswith("/resourceGroups/rg/providers/Microsoft.Sql/servers/srv/databases/db/export")
        body = self._sent_body()
        assert body["administratorLoginPassword"] == "P@ssw0rd"
        assert body["authenticationType"] == "sql"
        assert result.status is OperationStatus.IN_PROGRESS
        assert result.error_message is None
        assert result.operation_status_link == self.operation_link
        assert result.database_name == "db"
        assert request.status is None

    def test_export_with_unknown_status_returns_it_with_link(self):
        self.session.request.return_value = self.http_response(
            202,
            {"properties": {"status": "Cancelling"}},
            {"Azure-AsyncOperation": self.operation_link},
        )

        result = self.adapter.export(self._export_request())

        assert result.status == "Cancelling"
        assert result.operation_status_link == self.operation_link

    def test_export_without_status_is_pending(self):
        self.session.request.return_value = self.http_response(
            202, None, {"Location": self.operation_link}
        )

        result = self.adapter.export(self._export_request())

        assert result.status is OperationStatus.PENDING
        assert result.operation_status_link == self.operation_link

    def test_export_reports_transport_error_message(self):
        self.session.request.return_value = self.http_response(
            200, {"status": "Failed", "errorMessage": "Storage unreachable"}
        )

        result = self.adapter.export(self._export_request())

        assert result.status is OperationStatus.FAILED
        assert result.error_message == "Storage unreachable"

    def test_import_posts_to_server_import(self):
        self.session.request.return_value = self.http_response(
            202, {"status": "Pending"}, {"Azure-AsyncOperation": self.operation_link}
        )
        base = self._export_request()
        request = ImportRequest(
            **base.model_dump(exclude={"administrator_login_password"}),
            administrator_login_password=base.administrator_login_password,
            database_max_size_bytes=1024,
        )

        result = self.adapter.import_database(request)

        assert self.session.request.call_args.args[1].endswith("/servers/srv/import")
        assert self._sent_body()["maxSizeBytes"] == "1024"
        assert isinstance(result, ImportRequest)
        assert result.status is OperationStatus.PENDING

    def test_nested_error_envelope_becomes_operation_error(self):
        self.session.request.return_value = self.http_response(
            400, {"error": {"foo": {"code": "X", "message": "Y"}}}
        )

        with pytest.raises(OperationError) as exc_info:
            self.adapter.export(self._export_request())

        assert str(exc_info.value) == "Error Code: X\nError Message: Y"
        assert exc_info.value.status_code == 400
        assert isinstance(exc_info.value.__cause__, TransportError)

    def test_flat_error_envelope_becomes_operation_error(self):
        self.session.request.return_value = self.http_response(
            409, {"code": "Conflict", "message": "Busy"}
        )

        with pytest.raises(OperationError) as exc_info:
            self.adapter.export(self._export_request())

        assert exc_info.value.code == "Conflict"

    def test_unparsed_fault_reraises_original_transport_error(self):
        fault = TransportError(502, "<html>Bad Gateway</html>")
        communicator = Mock(spec=ImportExportDatabaseCommunicator)
        communicator.export.side_effect = fault
        adapter = ImportExportDatabaseAdapter(communicator, ImportExportRequestBuilder(self.cipher))

        with pytest.raises(TransportError) as exc_info:
            adapter.export(self._export_request())

        assert exc_info.value is fault

    def test_no_retry_on_fault(self):
        self.session.request.return_value = self.http_response(500, "oops")

        with pytest.raises(TransportError):
            self.adapter.export(self._export_request())

        assert self.session.request.call_count == 1

    def test_get_status_echoes_link(self):
        self.session.request.return_value = self.http_response(
            200,
            {
                "status": "InProgress",
                "queuedTime": "2024-01-01T10:00:00Z",
                "lastModifiedTime": "2024-01-01T10:05:00Z",
            },
        )

        status = self.adapter.get_status(OperationHandle(link=self.operation_link))

        assert status.status == "InProgress"
        assert status.operation_status_link == self.operation_link
        assert status.queued_time.year == 2024
        assert self.session.request.call_args.args == ("GET", self.operation_link)

    def test_get_status_reads_service_timestamp_format(self):
        self.session.request.return_value = self.http_response(
            200,
            {
                "status": "InProgress",
                "queuedTime": "3/30/2021 7:09:54 PM",
                "lastModifiedTime": "sometime later",
            },
        )

        status = self.adapter.get_status(self.operation_link)

        assert status.queued_time == datetime(2021, 3, 30, 19, 9, 54)
        assert status.last_modified_time == "sometime later"

    def test_get_status_with_unknown_status_is_kept(self):
        self.session.request.return_value = self.http_response(200, {"status": "Cancelling"})

        status = self.adapter.get_status(self.operation_link)

        assert status.status == "Cancelling"
        assert status.operation_status_link == self.operation_link

    def test_get_status_is_idempotent(self):
        self.session.request.return_value = self.http_response(
            200, {"status": "Succeeded", "statusMessage": "done"}
        )

        first = self.adapter.get_status(self.operation_link)
        second = self.adapter.get_status(self.operation_link)

        assert first == second
        assert first.status == "Succeeded"
        assert first.status_message == "done"

    def test_get_status_maps_error_object(self):
        self.session.request.return_value = self.http_response(
            200, {"status": "Failed", "error": {"code": "X", "message": "Import failed"}}
        )

        status = self.adapter.get_status(self.operation_link)

        assert status.status == "Failed"
        assert status.error_message == "Import failed"

    def test_secrets_are_not_logged(self, caplog):
        self.session.request.return_value = self.http_response(202, {"status": "Pending"})

        with caplog.at_level("DEBUG"):
            self.adapter.export(self._export_request())

        assert "P@ssw0rd" not in caplog.text
        assert "storage-key" not in caplog.text
