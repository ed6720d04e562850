"""Tests for the import/export request builder."""

import pytest
from pydantic import SecretStr

from mgmtops.domain.operation.models import ImportExportRequest, ImportRequest
from mgmtops.domain.operation.value_objects import (
    AuthenticationType,
    DatabaseEdition,
    StorageKeyType,
)
from mgmtops.infrastructure.exceptions import CredentialError
from mgmtops.providers.azure.infrastructure.builders import ImportExportRequestBuilder


@pytest.mark.unit
@pytest.mark.sql
class TestImportExportRequestBuilder:
    """Test building wire definitions from user-facing requests."""

    @pytest.fixture(autouse=True)
    def _builder(self, cipher):
        self.cipher = cipher
        self.builder = ImportExportRequestBuilder(cipher)

    def _request(self, **overrides) -> ImportExportRequest:
        fields = dict(
            resource_group_name="rg",
            server_name="srv",
            database_name="db",
            storage_uri="https://acct.blob.core.windows.net/c/db.bacpac",
            storage_key="storage-key",
            storage_key_type=StorageKeyType.STORAGE_ACCESS_KEY,
            administrator_login="admin",
            administrator_login_password=self.cipher.encrypt("P@ssw0rd"),
        )
        fields.update(overrides)
        return ImportExportRequest(**fields)

    def test_authentication_type_absent_when_none(self):
        wire = self.builder.build_export(self._request()).to_wire()

        assert "authenticationType" not in wire

    @pytest.mark.parametrize(
        "auth_type, expected",
        [
            (AuthenticationType.SQL, "sql"),
            (AuthenticationType.AD_PASSWORD, "adpassword"),
            (AuthenticationType.MANAGED_IDENTITY, "managedidentity"),
        ],
    )
    def test_authentication_type_is_lowercased(self, auth_type, expected):
        wire = self.builder.build_export(self._request(authentication_type=auth_type)).to_wire()

        assert wire["authenticationType"] == expected

    def test_export_fields(self):
        wire = self.builder.build_export(self._request()).to_wire()

        assert wire["storageUri"] == "https://acct.blob.core.windows.net/c/db.bacpac"
        assert wire["storageKey"] == "storage-key"
        assert wire["storageKeyType"] == "StorageAccessKey"
        assert wire["administratorLogin"] == "admin"
        assert wire["administratorLoginPassword"] == "P@ssw0rd"
        assert "databaseName" not in wire
        assert "maxSizeBytes" not in wire

    def test_network_isolation_block_always_present(self):
        wire = self.builder.build_export(self._request()).to_wire()

        assert wire["networkIsolation"] == {}

    def test_network_isolation_ids_copied(self):
        request = self._request(
            sql_server_resource_id="/sql/id", storage_account_resource_id="/storage/id"
        )

        wire = self.builder.build_export(request).to_wire()

        assert wire["networkIsolation"] == {
            "sqlServerResourceId": "/sql/id",
            "storageAccountResourceId": "/storage/id",
        }

    def test_import_fields(self):
        base = self._request()
        request = ImportRequest(
            **base.model_dump(exclude={"administrator_login_password"}),
            administrator_login_password=base.administrator_login_password,
            edition=DatabaseEdition.STANDARD,
            service_objective_name="S0",
            database_max_size_bytes=2147483648,
        )

        wire = self.builder.build_import(request).to_wire()

        assert wire["maxSizeBytes"] == "2147483648"
        assert wire["edition"] == "Standard"
        assert wire["serviceObjectiveName"] == "S0"
        assert wire["databaseName"] == "db"

    def test_import_edition_none_is_empty_string(self):
        wire = self.builder.build_import(ImportRequest(database_name="db")).to_wire()

        assert wire["edition"] == ""

    def test_undecryptable_password_raises_credential_error(self):
        request = self._request(administrator_login_password=SecretStr("not-a-token"))

        with pytest.raises(CredentialError):
            self.builder.build_export(request)

    def test_builder_does_not_modify_request(self):
        request = self._request()
        before = request.model_dump()

        self.builder.build_export(request)

        assert request.model_dump() == before

    def test_definition_repr_hides_secrets(self):
        definition = self.builder.build_export(self._request())

        assert "P@ssw0rd" not in repr(definition)
        assert "storage-key" not in repr(definition)
