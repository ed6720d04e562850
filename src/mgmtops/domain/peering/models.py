"""Peering models."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ContactInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    emails: List[str] = Field(default_factory=list)
    phone: List[str] = Field(default_factory=list)


class PeerAsn(BaseModel):
    """A peer autonomous system number registered in the subscription."""

    model_config = ConfigDict(frozen=True)

    name: str
    id: Optional[str] = None
    type: Optional[str] = None
    peer_asn: Optional[int] = None
    peer_name: Optional[str] = None
    validation_state: Optional[str] = None
    peer_contact_info: ContactInfo = Field(default_factory=ContactInfo)
