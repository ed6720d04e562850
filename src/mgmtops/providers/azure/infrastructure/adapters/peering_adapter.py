"""Peer ASN adapter."""

from typing import List

from mgmtops.domain.peering.models import PeerAsn
from mgmtops.providers.azure.infrastructure.adapters.base_adapter import BaseManagementAdapter
from mgmtops.providers.azure.infrastructure.communicators import PeerAsnCommunicator
from mgmtops.providers.azure.infrastructure.dto import PeerAsnDto, PeerAsnListResult
from mgmtops.providers.azure.infrastructure.mappers.peering_mapper import peer_asn_from_wire


class PeerAsnAdapter(BaseManagementAdapter):
    """Reads peer ASNs registered in the active subscription."""

    def __init__(self, communicator: PeerAsnCommunicator, logger=None):
        super().__init__(logger)
        self._communicator = communicator

    def get_peer_asn(self, name: str) -> PeerAsn:
        response = self._invoke("get_peer_asn", self._communicator.get, name)
        return peer_asn_from_wire(PeerAsnDto.model_validate(response.body))

    def list_peer_asns(self) -> List[PeerAsn]:
        """List every peer ASN, following next links one page per call."""
        response = self._invoke("list_peer_asns", self._communicator.list_by_subscription)
        page = PeerAsnListResult.model_validate(response.body)
        peer_asns = [peer_asn_from_wire(dto) for dto in page.value]
        while page.next_link:
            response = self._invoke("list_peer_asns", self._communicator.list_next, page.next_link)
            page = PeerAsnListResult.model_validate(response.body)
            peer_asns.extend(peer_asn_from_wire(dto) for dto in page.value)
        return peer_asns
