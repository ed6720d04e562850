"""Wire DTOs for peering resources."""

from typing import List, Optional

from pydantic import Field

from mgmtops.providers.azure.infrastructure.dto.import_export import WireModel


class ContactDetail(WireModel):
    role: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None


class PeerAsnProperties(WireModel):
    peer_asn: Optional[int] = Field(None, alias="peerAsn")
    peer_contact_detail: List[ContactDetail] = Field(default_factory=list, alias="peerContactDetail")
    peer_name: Optional[str] = Field(None, alias="peerName")
    validation_state: Optional[str] = Field(None, alias="validationState")


class PeerAsnDto(WireModel):
    name: str
    id: Optional[str] = None
    type: Optional[str] = None
    properties: PeerAsnProperties = Field(default_factory=PeerAsnProperties)


class PeerAsnListResult(WireModel):
    value: List[PeerAsnDto] = Field(default_factory=list)
    next_link: Optional[str] = Field(None, alias="nextLink")
