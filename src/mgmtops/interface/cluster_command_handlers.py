"""Service fabric cluster command handlers for the interface layer."""

from typing import TYPE_CHECKING, Any, Dict

from mgmtops.domain.cluster.models import ClientCertificate, DurabilityLevel, NodeType
from mgmtops.infrastructure.error import with_error_handling
from mgmtops.interface.command_handlers import model_to_output, wait_if_requested

if TYPE_CHECKING:
    import argparse

    from mgmtops.bootstrap import Application


@with_error_handling(context="add_node_type")
def handle_add_node_type(args: "argparse.Namespace", app: "Application") -> Dict[str, Any]:
    adapter = app.service_fabric_adapter()
    cluster = adapter.get_cluster(args.resource_group, args.cluster)
    node_type = NodeType(
        name=args.name,
        vm_instance_count=args.vm_instance_count,
        is_primary=args.primary,
        durability_level=DurabilityLevel(args.durability_level),
    )
    cluster = adapter.add_node_type(cluster, node_type)
    return wait_if_requested(args, app, adapter.get_operation_status, model_to_output(cluster))


@with_error_handling(context="remove_node_type")
def handle_remove_node_type(args: "argparse.Namespace", app: "Application") -> Dict[str, Any]:
    adapter = app.service_fabric_adapter()
    cluster = adapter.get_cluster(args.resource_group, args.cluster)
    cluster = adapter.remove_node_type(cluster, args.name)
    return wait_if_requested(args, app, adapter.get_operation_status, model_to_output(cluster))


@with_error_handling(context="add_client_certificate")
def handle_add_client_certificate(args: "argparse.Namespace", app: "Application") -> Dict[str, Any]:
    """
    Add a client certificate by thumbprint or common name.

    Returns:
        The cluster as answered by the service, with the operation status link
    """
    adapter = app.service_fabric_adapter()
    cluster = adapter.get_cluster(args.resource_group, args.cluster)
    certificate = ClientCertificate(
        thumbprint=args.thumbprint,
        common_name=args.common_name,
        issuer_thumbprint=args.issuer_thumbprint,
        is_admin=args.admin,
    )
    cluster = adapter.add_client_certificate(cluster, certificate)
    return wait_if_requested(args, app, adapter.get_operation_status, model_to_output(cluster))


@with_error_handling(context="remove_client_certificate")
def handle_remove_client_certificate(
    args: "argparse.Namespace", app: "Application"
) -> Dict[str, Any]:
    adapter = app.service_fabric_adapter()
    cluster = adapter.get_cluster(args.resource_group, args.cluster)
    cluster = adapter.remove_client_certificate(cluster, args.name)
    return wait_if_requested(args, app, adapter.get_operation_status, model_to_output(cluster))


@with_error_handling(context="cluster_operation_status")
def handle_cluster_status(args: "argparse.Namespace", app: "Application") -> Dict[str, Any]:
    adapter = app.service_fabric_adapter()
    if args.wait:
        status = app.poller(adapter.get_operation_status, timeout=args.timeout).wait(
            args.operation_status_link
        )
    else:
        status = adapter.get_operation_status(args.operation_status_link)
    return model_to_output(status)
