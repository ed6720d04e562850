"""Active identity and subscription used to build management clients."""

from typing import Any, Optional

from azure.core.credentials import TokenCredential
from azure.identity import ClientSecretCredential, DefaultAzureCredential
from pydantic import BaseModel, ConfigDict, field_validator

from mgmtops.config.schemas.azure_schema import AzureConfig
from mgmtops.infrastructure.exceptions import ConfigurationError
from mgmtops.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class AzureContext(BaseModel):
    """Read-only context shared by every adapter call."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    subscription_id: str
    endpoint: str = "https://management.azure.com"
    scope: str = "https://management.azure.com/.default"
    tenant_id: str = ""
    credential: Any

    @field_validator("subscription_id")
    @classmethod
    def validate_subscription(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Subscription id must not be empty")
        return v.strip()

    def get_access_token(self) -> str:
        return self.credential.get_token(self.scope).token


def create_credential(config: AzureConfig) -> TokenCredential:
    """Service principal credential when fully configured, otherwise the default chain."""
    if config.client_id and config.client_secret and config.tenant_id:
        logger.debug("Using service principal credential for client %s", config.client_id)
        return ClientSecretCredential(
            tenant_id=config.tenant_id,
            client_id=config.client_id,
            client_secret=config.client_secret.get_secret_value(),
        )
    logger.debug("Using default credential chain")
    return DefaultAzureCredential()


def create_context(config: AzureConfig, credential: Optional[TokenCredential] = None) -> AzureContext:
    """
    Build the active context from configuration.

    Raises:
        ConfigurationError: If no subscription is configured
    """
    if not config.subscription_id:
        raise ConfigurationError(
            "No subscription configured; set azure.subscription_id or MGMTOPS_AZURE__SUBSCRIPTION_ID"
        )
    return AzureContext(
        subscription_id=config.subscription_id,
        endpoint=config.endpoint,
        scope=config.get_scope(),
        tenant_id=config.tenant_id or "",
        credential=credential or create_credential(config),
    )
