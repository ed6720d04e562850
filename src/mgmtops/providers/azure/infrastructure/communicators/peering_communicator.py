"""Communicator for peer ASN calls."""

from mgmtops.providers.azure.infrastructure.management_client import (
    ManagementClient,
    TransportResponse,
)

PEER_ASNS = "providers/Microsoft.Peering/peerAsns"


class PeerAsnCommunicator:
    def __init__(self, client: ManagementClient, api_version: str):
        self._client = client
        self._api_version = api_version

    def get(self, peer_asn_name: str) -> TransportResponse:
        path = self._client.subscription_path(PEER_ASNS, peer_asn_name)
        return self._client.send("GET", path, self._api_version)

    def list_by_subscription(self) -> TransportResponse:
        return self._client.send("GET", self._client.subscription_path(PEER_ASNS), self._api_version)

    def list_next(self, next_link: str) -> TransportResponse:
        return self._client.poll(next_link)
