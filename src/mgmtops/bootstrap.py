"""Application bootstrap: lazily wires configuration, context, client and adapters."""

from __future__ import annotations

from typing import Optional

import requests
from azure.core.credentials import TokenCredential

from mgmtops.application.operation_poller import OperationPoller
from mgmtops.config.manager import ConfigurationManager, get_config_manager
from mgmtops.config.schemas import AppConfig
from mgmtops.infrastructure.logging.logger import get_logger, setup_logging
from mgmtops.infrastructure.secrets import SecretCipher
from mgmtops.providers.azure.auth.context import AzureContext, create_context
from mgmtops.providers.azure.infrastructure.adapters import (
    ApplicationGatewayAdapter,
    ImportExportDatabaseAdapter,
    PeerAsnAdapter,
    ServiceFabricClusterAdapter,
)
from mgmtops.providers.azure.infrastructure.builders import ImportExportRequestBuilder
from mgmtops.providers.azure.infrastructure.communicators import (
    ApplicationGatewayCommunicator,
    ImportExportDatabaseCommunicator,
    PeerAsnCommunicator,
    ServiceFabricClusterCommunicator,
)
from mgmtops.providers.azure.infrastructure.management_client import ManagementClient


class Application:
    """
    Application context with lazy initialization.

    Nothing touches the network or the credential chain until an adapter is
    first requested, so commands such as `secret encrypt` work without a
    subscription.
    """

    def __init__(
        self,
        config_path: Optional[str] = None,
        config_manager: Optional[ConfigurationManager] = None,
        credential: Optional[TokenCredential] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config_path = config_path
        self._config_manager = config_manager
        self._credential = credential
        self._session = session
        self._context: Optional[AzureContext] = None
        self._client: Optional[ManagementClient] = None
        self._cipher: Optional[SecretCipher] = None
        self._logging_configured = False
        self.logger = get_logger(__name__)

    @property
    def config(self) -> AppConfig:
        if self._config_manager is None:
            self._config_manager = get_config_manager(self.config_path)
        return self._config_manager.app_config

    def setup_logging(self, level: Optional[str] = None) -> None:
        """Apply the configured logging, optionally overriding the level."""
        logging_config = self.config.logging
        if level:
            logging_config = logging_config.model_copy(update={"level": level})
        setup_logging(logging_config)
        self._logging_configured = True

    @property
    def context(self) -> AzureContext:
        if self._context is None:
            self._context = create_context(self.config.azure, self._credential)
            self.logger.debug("Using subscription %s", self._context.subscription_id)
        return self._context

    @property
    def client(self) -> ManagementClient:
        if self._client is None:
            self._client = ManagementClient(
                self.context, timeout=self.config.azure.request_timeout, session=self._session
            )
        return self._client

    @property
    def cipher(self) -> SecretCipher:
        if self._cipher is None:
            self._cipher = SecretCipher.from_environment(self.config.secrets.key_env_var)
        return self._cipher

    def import_export_adapter(self) -> ImportExportDatabaseAdapter:
        communicator = ImportExportDatabaseCommunicator(self.client, self.config.azure.api_versions.sql)
        return ImportExportDatabaseAdapter(communicator, ImportExportRequestBuilder(self.cipher))

    def peer_asn_adapter(self) -> PeerAsnAdapter:
        return PeerAsnAdapter(
            PeerAsnCommunicator(self.client, self.config.azure.api_versions.peering)
        )

    def application_gateway_adapter(self) -> ApplicationGatewayAdapter:
        mutation = self.config.mutation
        return ApplicationGatewayAdapter(
            ApplicationGatewayCommunicator(self.client, self.config.azure.api_versions.network),
            fail_on_missing_redirect=mutation.redirect_configurations.fail_on_missing,
        )

    def service_fabric_adapter(self) -> ServiceFabricClusterAdapter:
        mutation = self.config.mutation
        return ServiceFabricClusterAdapter(
            ServiceFabricClusterCommunicator(
                self.client, self.config.azure.api_versions.service_fabric
            ),
            fail_on_missing_node_type=mutation.node_types.fail_on_missing,
            fail_on_missing_certificate=mutation.client_certificates.fail_on_missing,
        )

    def poller(self, get_status, timeout: Optional[float] = None) -> OperationPoller:
        polling = self.config.polling
        return OperationPoller(
            get_status,
            interval=polling.interval_seconds,
            timeout=timeout or polling.timeout_seconds,
        )


def create_application(config_path: Optional[str] = None) -> Application:
    """Create the application context."""
    return Application(config_path)
