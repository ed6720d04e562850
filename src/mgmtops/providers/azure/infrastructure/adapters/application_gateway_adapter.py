"""Application gateway adapter: redirect configuration edits and gateway writes."""

from typing import Union

from mgmtops.domain.base.named_children import add_named_child, remove_named_child
from mgmtops.domain.base.value_objects import OperationHandle
from mgmtops.domain.gateway.models import ApplicationGateway, RedirectConfiguration
from mgmtops.domain.operation.models import StatusModel, overlay_operation_result
from mgmtops.domain.operation.value_objects import AsyncOperationStatus
from mgmtops.providers.azure.infrastructure.adapters.base_adapter import BaseManagementAdapter
from mgmtops.providers.azure.infrastructure.communicators import ApplicationGatewayCommunicator
from mgmtops.providers.azure.infrastructure.mappers import (
    OperationResponseMapper,
    resource_submission_status,
)
from mgmtops.providers.azure.infrastructure.mappers.gateway_mapper import (
    gateway_from_wire,
    gateway_to_wire,
)

REDIRECT_CONFIGURATION = "RedirectConfiguration"


class ApplicationGatewayAdapter(BaseManagementAdapter):
    """
    Redirect configurations are edited on a caller-supplied gateway without
    any network call; set_application_gateway writes the result back.
    """

    def __init__(
        self,
        communicator: ApplicationGatewayCommunicator,
        fail_on_missing_redirect: bool = False,
        mapper: OperationResponseMapper = None,
        logger=None,
    ):
        super().__init__(logger)
        self._communicator = communicator
        self._fail_on_missing_redirect = fail_on_missing_redirect
        self._mapper = mapper or OperationResponseMapper()

    def get_application_gateway(self, resource_group_name: str, name: str) -> ApplicationGateway:
        response = self._invoke(
            "get_application_gateway", self._communicator.get, resource_group_name, name
        )
        return gateway_from_wire(response.body, resource_group_name, name)

    def add_redirect_configuration(
        self, gateway: ApplicationGateway, redirect: RedirectConfiguration
    ) -> ApplicationGateway:
        """
        Add a redirect configuration.

        Raises:
            DuplicateNameError: If the gateway already has one with that name (any case)
        """
        redirects = add_named_child(
            gateway.redirect_configurations, redirect, REDIRECT_CONFIGURATION
        )
        return gateway.model_copy(update={"redirect_configurations": redirects})

    def remove_redirect_configuration(self, gateway: ApplicationGateway, name: str) -> ApplicationGateway:
        redirects = remove_named_child(
            gateway.redirect_configurations,
            name,
            REDIRECT_CONFIGURATION,
            fail_on_missing=self._fail_on_missing_redirect,
        )
        return gateway.model_copy(update={"redirect_configurations": redirects})

    def set_application_gateway(self, gateway: ApplicationGateway) -> ApplicationGateway:
        """
        Write the gateway back. This is a long-running operation.

        Returns:
            The gateway as answered by the service, carrying status and the
            operation status link
        """
        self._logger.info(
            "Updating application gateway %s/%s", gateway.resource_group_name, gateway.name
        )
        response = self._invoke(
            "set_application_gateway",
            self._communicator.create_or_update,
            gateway.resource_group_name,
            gateway.name,
            gateway_to_wire(gateway),
        )
        updated = (
            gateway_from_wire(response.body, gateway.resource_group_name, gateway.name)
            if response.body
            else gateway
        )
        return overlay_operation_result(
            updated,
            resource_submission_status(response, updated.provisioning_state if response.body else None),
            None,
            response.operation_link,
        )

    def get_operation_status(self, handle: Union[OperationHandle, str]) -> StatusModel:
        if isinstance(handle, str):
            handle = OperationHandle(link=handle)
        response = self._invoke("get_operation_status", self._communicator.get_status, handle.link)
        return self._mapper.to_status_model(
            response,
            handle,
            parse_status=AsyncOperationStatus.from_wire,
            default_status=AsyncOperationStatus.IN_PROGRESS,
        )
