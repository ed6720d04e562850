"""User-facing models for long-running operations.

Models are frozen; the latest status is merged onto a copy of the caller's
request by overlay_operation_result rather than by mutating it.
"""

from datetime import datetime
from typing import Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from mgmtops.domain.base.value_objects import OperationHandle
from mgmtops.domain.operation.value_objects import (
    AsyncOperationStatus,
    AuthenticationType,
    DatabaseEdition,
    OperationStatus,
    StorageKeyType,
)


class UserFacingModel(BaseModel):
    """Base class for models returned to the caller."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, use_enum_values=False)

    status: Optional[Union[OperationStatus, AsyncOperationStatus, str]] = None
    error_message: Optional[str] = None
    operation_status_link: Optional[str] = None


class ImportExportRequest(UserFacingModel):
    """Parameters of a database export (and the shared part of an import)."""

    resource_group_name: str = ""
    server_name: str = ""
    database_name: str = ""
    storage_uri: str = ""
    storage_key: Optional[str] = Field(default=None, repr=False)
    storage_key_type: StorageKeyType = StorageKeyType.STORAGE_ACCESS_KEY
    administrator_login: str = ""
    administrator_login_password: Optional[SecretStr] = None
    authentication_type: AuthenticationType = AuthenticationType.NONE
    sql_server_resource_id: Optional[str] = None
    storage_account_resource_id: Optional[str] = None


class ImportRequest(ImportExportRequest):
    """Parameters of a database import."""

    edition: DatabaseEdition = DatabaseEdition.NONE
    service_objective_name: Optional[str] = None
    database_max_size_bytes: int = 0


class StatusModel(BaseModel):
    """
    Result of a status query; echoes the handle so callers can re-poll.

    status and the timestamps carry what the service reported, including
    values outside the known statuses and time formats.
    """

    model_config = ConfigDict(frozen=True)

    status: str
    operation_status_link: str
    error_message: Optional[str] = None
    status_message: Optional[str] = None
    queued_time: Optional[Union[datetime, str]] = None
    last_modified_time: Optional[Union[datetime, str]] = None

    @property
    def handle(self) -> OperationHandle:
        return OperationHandle(link=self.operation_status_link)


M = TypeVar("M", bound=UserFacingModel)


def overlay_operation_result(
    base: Optional[M],
    status: Union[OperationStatus, AsyncOperationStatus, str],
    error_message: Optional[str] = None,
    operation_status_link: Optional[str] = None,
    model_type: type = ImportExportRequest,
) -> M:
    """
    Produce a new model carrying the latest status.

    Original fields of base are preserved; status and error_message are
    overwritten. The link is overwritten only when one is supplied.

    Args:
        base: Caller-supplied model, or None for a fresh instance
        status: Latest known status
        error_message: Error reported by the transport layer, if any
        operation_status_link: Link for later polling
        model_type: Type to instantiate when base is None

    Returns:
        New frozen model; base is never modified
    """
    update = {"status": status, "error_message": error_message}
    if operation_status_link is not None:
        update["operation_status_link"] = operation_status_link
    if base is None:
        return model_type(**update)
    return base.model_copy(update=update)
