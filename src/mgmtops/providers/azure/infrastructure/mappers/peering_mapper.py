"""Peering wire mapping."""

from mgmtops.domain.peering.models import ContactInfo, PeerAsn
from mgmtops.providers.azure.infrastructure.dto import PeerAsnDto


def peer_asn_from_wire(dto: PeerAsnDto) -> PeerAsn:
    contacts = dto.properties.peer_contact_detail
    return PeerAsn(
        name=dto.name,
        id=dto.id,
        type=dto.type,
        peer_asn=dto.properties.peer_asn,
        peer_name=dto.properties.peer_name,
        validation_state=dto.properties.validation_state,
        peer_contact_info=ContactInfo(
            emails=[contact.email for contact in contacts if contact.email],
            phone=[contact.phone for contact in contacts if contact.phone],
        ),
    )
