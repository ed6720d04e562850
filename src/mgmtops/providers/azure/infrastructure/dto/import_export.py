"""Wire DTOs for database import/export operations."""

from datetime import datetime
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Import/export status documents, e.g. "3/30/2021 7:09:54 PM"
SERVICE_TIMESTAMP_FORMAT = "%m/%d/%Y %I:%M:%S %p"


class WireModel(BaseModel):
    """Base for wire DTOs: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_wire(self) -> Dict[str, Any]:
        """Serialize, omitting unset fields entirely."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class NetworkIsolationSettings(WireModel):
    sql_server_resource_id: Optional[str] = Field(None, alias="sqlServerResourceId")
    storage_account_resource_id: Optional[str] = Field(None, alias="storageAccountResourceId")


class ImportExportDatabaseDefinition(WireModel):
    """Request body for export and import submissions."""

    database_name: Optional[str] = Field(None, alias="databaseName")
    edition: Optional[str] = None
    service_objective_name: Optional[str] = Field(None, alias="serviceObjectiveName")
    max_size_bytes: Optional[str] = Field(None, alias="maxSizeBytes")
    storage_key_type: str = Field(alias="storageKeyType")
    storage_key: Optional[str] = Field(None, alias="storageKey", repr=False)
    storage_uri: str = Field(alias="storageUri")
    administrator_login: Optional[str] = Field(None, alias="administratorLogin")
    administrator_login_password: Optional[str] = Field(
        None, alias="administratorLoginPassword", repr=False
    )
    authentication_type: Optional[str] = Field(None, alias="authenticationType")
    network_isolation: Optional[NetworkIsolationSettings] = Field(None, alias="networkIsolation")


def _flatten_properties(data: Any) -> Any:
    """Merge an ARM 'properties' envelope into the top level."""
    if isinstance(data, dict) and isinstance(data.get("properties"), dict):
        merged = {k: v for k, v in data.items() if k != "properties"}
        merged.update(data["properties"])
        return merged
    return data


class ImportExportOperationResult(WireModel):
    """Body returned by an export or import submission."""

    request_id: Optional[str] = Field(None, alias="requestId")
    request_type: Optional[str] = Field(None, alias="requestType")
    queued_time: Optional[str] = Field(None, alias="queuedTime")
    last_modified_time: Optional[str] = Field(None, alias="lastModifiedTime")
    blob_uri: Optional[str] = Field(None, alias="blobUri")
    server_name: Optional[str] = Field(None, alias="serverName")
    database_name: Optional[str] = Field(None, alias="databaseName")
    status: Optional[str] = None
    error_message: Optional[str] = Field(None, alias="errorMessage")

    @model_validator(mode="before")
    @classmethod
    def flatten(cls, data: Any) -> Any:
        return _flatten_properties(data)


class OperationStatusResponse(WireModel):
    """
    Body returned when polling an operation link.

    Accepts both the import/export status document and the generic
    asynchronous-operation document ({status, startTime, endTime, error}).
    """

    status: Optional[str] = None
    error_message: Optional[str] = Field(None, alias="errorMessage")
    status_message: Optional[str] = Field(None, alias="statusMessage")
    queued_time: Optional[Union[datetime, str]] = Field(None, alias="queuedTime")
    last_modified_time: Optional[Union[datetime, str]] = Field(None, alias="lastModifiedTime")

    @model_validator(mode="before")
    @classmethod
    def normalize(cls, data: Any) -> Any:
        data = _flatten_properties(data)
        if not isinstance(data, dict):
            return data
        data = dict(data)
        error = data.get("error")
        if isinstance(error, dict) and not data.get("errorMessage"):
            data["errorMessage"] = error.get("message")
        data.setdefault("queuedTime", data.get("startTime"))
        data.setdefault("lastModifiedTime", data.get("endTime"))
        return data

    @field_validator("queued_time", "last_modified_time", mode="before")
    @classmethod
    def parse_timestamp(cls, v: Any) -> Any:
        """Timestamps in neither known format are kept as the raw string."""
        if v is None or isinstance(v, datetime):
            return v
        text = str(v)
        try:
            return datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError:
            pass
        try:
            return datetime.strptime(text, SERVICE_TIMESTAMP_FORMAT)
        except ValueError:
            return text
