"""Peer ASN command handlers for the interface layer."""

from typing import TYPE_CHECKING, Any, Dict

from mgmtops.infrastructure.error import with_error_handling
from mgmtops.interface.command_handlers import model_to_output

if TYPE_CHECKING:
    import argparse

    from mgmtops.bootstrap import Application


@with_error_handling(context="get_peer_asn")
def handle_get_peer_asn(args: "argparse.Namespace", app: "Application") -> Dict[str, Any]:
    return model_to_output(app.peer_asn_adapter().get_peer_asn(args.name))


@with_error_handling(context="list_peer_asns")
def handle_list_peer_asns(args: "argparse.Namespace", app: "Application") -> Dict[str, Any]:
    peer_asns = app.peer_asn_adapter().list_peer_asns()
    return {"peer_asns": [model_to_output(peer_asn) for peer_asn in peer_asns]}
