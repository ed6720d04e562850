"""Service fabric cluster models."""

from enum import Enum
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from mgmtops.domain.operation.models import UserFacingModel


class DurabilityLevel(str, Enum):
    """Node type durability tier."""

    BRONZE = "Bronze"
    SILVER = "Silver"
    GOLD = "Gold"


class NodeType(BaseModel):
    """A node type within a cluster."""

    model_config = ConfigDict(frozen=True)

    name: str
    vm_instance_count: int = Field(5, ge=1)
    is_primary: bool = False
    durability_level: DurabilityLevel = DurabilityLevel.BRONZE
    client_connection_endpoint_port: int = 19000
    http_gateway_endpoint_port: int = 19080
    other_properties: Dict[str, Any] = Field(default_factory=dict)


class ClientCertificate(BaseModel):
    """A client certificate identified by thumbprint or by common name."""

    model_config = ConfigDict(frozen=True)

    thumbprint: Optional[str] = None
    common_name: Optional[str] = None
    issuer_thumbprint: Optional[str] = None
    is_admin: bool = False

    @model_validator(mode="after")
    def require_identity(self) -> "ClientCertificate":
        if bool(self.thumbprint) == bool(self.common_name):
            raise ValueError("Exactly one of thumbprint or common_name must be set")
        return self

    @property
    def name(self) -> str:
        return self.thumbprint or self.common_name


class ServiceFabricCluster(UserFacingModel):
    """A service fabric cluster as seen by the caller."""

    name: str
    resource_group_name: str
    id: Optional[str] = None
    location: Optional[str] = None
    cluster_state: Optional[str] = None
    reliability_level: Optional[str] = None
    provisioning_state: Optional[str] = None
    tags: Dict[str, str] = Field(default_factory=dict)
    node_types: Tuple[NodeType, ...] = ()
    client_certificates: Tuple[ClientCertificate, ...] = ()
