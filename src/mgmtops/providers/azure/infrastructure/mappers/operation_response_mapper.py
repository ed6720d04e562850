"""Maps operation transport responses back to user-facing models."""

from typing import Callable, Optional, Union

from mgmtops.domain.base.value_objects import OperationHandle
from mgmtops.domain.operation.models import (
    ImportExportRequest,
    M,
    StatusModel,
    overlay_operation_result,
)
from mgmtops.domain.operation.value_objects import (
    AsyncOperationStatus,
    OperationStatus,
    status_value,
)
from mgmtops.providers.azure.infrastructure.dto import (
    ImportExportOperationResult,
    OperationStatusResponse,
)
from mgmtops.providers.azure.infrastructure.management_client import TransportResponse

ParsedStatus = Union[OperationStatus, AsyncOperationStatus, str]
StatusParser = Callable[[str], ParsedStatus]


class OperationResponseMapper:
    """Response mapper for submissions and status polls."""

    def to_import_export_model(
        self, response: TransportResponse, original: Optional[M]
    ) -> M:
        """
        Overlay the submission result onto a copy of the original request.

        A submission answered without a status is reported as Pending.
        """
        result = ImportExportOperationResult.model_validate(response.body)
        status = OperationStatus.from_wire(result.status) if result.status else OperationStatus.PENDING
        return overlay_operation_result(
            original,
            status,
            result.error_message,
            response.operation_link,
            model_type=ImportExportRequest,
        )

    def to_status_model(
        self,
        response: TransportResponse,
        handle: OperationHandle,
        parse_status: StatusParser = OperationStatus.from_wire,
        default_status: ParsedStatus = OperationStatus.IN_PROGRESS,
    ) -> StatusModel:
        """Map a poll response; the handle is echoed back for re-polling."""
        dto = OperationStatusResponse.model_validate(response.body)
        status = parse_status(dto.status) if dto.status else default_status
        return StatusModel(
            status=status_value(status),
            operation_status_link=handle.link,
            error_message=dto.error_message,
            status_message=dto.status_message,
            queued_time=dto.queued_time,
            last_modified_time=dto.last_modified_time,
        )


def resource_submission_status(
    response: TransportResponse, provisioning_state: Optional[str]
) -> ParsedStatus:
    """Status of a PUT/PATCH submission from its provisioning state or HTTP code."""
    if provisioning_state:
        return AsyncOperationStatus.from_wire(provisioning_state)
    if response.status_code in (201, 202):
        return AsyncOperationStatus.IN_PROGRESS
    return AsyncOperationStatus.SUCCEEDED
