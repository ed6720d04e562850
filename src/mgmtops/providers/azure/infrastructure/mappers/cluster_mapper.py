"""Service fabric cluster wire mapping."""

from typing import Any, Dict, List, Optional, Tuple

from mgmtops.domain.cluster.models import ClientCertificate, NodeType, ServiceFabricCluster

_NODE_TYPE_FIELDS = {
    "name": "name",
    "vmInstanceCount": "vm_instance_count",
    "isPrimary": "is_primary",
    "durabilityLevel": "durability_level",
    "clientConnectionEndpointPort": "client_connection_endpoint_port",
    "httpGatewayEndpointPort": "http_gateway_endpoint_port",
}


def node_type_from_wire(data: Dict[str, Any]) -> NodeType:
    fields = {field: data[wire] for wire, field in _NODE_TYPE_FIELDS.items() if data.get(wire) is not None}
    fields["other_properties"] = {k: v for k, v in data.items() if k not in _NODE_TYPE_FIELDS}
    return NodeType(**fields)


def node_type_to_wire(node_type: NodeType) -> Dict[str, Any]:
    data = dict(node_type.other_properties)
    data.update(
        name=node_type.name,
        vmInstanceCount=node_type.vm_instance_count,
        isPrimary=node_type.is_primary,
        durabilityLevel=node_type.durability_level.value,
        clientConnectionEndpointPort=node_type.client_connection_endpoint_port,
        httpGatewayEndpointPort=node_type.http_gateway_endpoint_port,
    )
    return data


def certificates_from_wire(properties: Dict[str, Any]) -> Tuple[ClientCertificate, ...]:
    certificates: List[ClientCertificate] = []
    for item in properties.get("clientCertificateThumbprints") or []:
        certificates.append(
            ClientCertificate(thumbprint=item["certificateThumbprint"], is_admin=item.get("isAdmin", False))
        )
    for item in properties.get("clientCertificateCommonNames") or []:
        certificates.append(
            ClientCertificate(
                common_name=item["certificateCommonName"],
                issuer_thumbprint=item.get("certificateIssuerThumbprint"),
                is_admin=item.get("isAdmin", False),
            )
        )
    return tuple(certificates)


def certificates_to_wire(certificates: Tuple[ClientCertificate, ...]) -> Dict[str, Any]:
    thumbprints = [
        {"isAdmin": cert.is_admin, "certificateThumbprint": cert.thumbprint}
        for cert in certificates
        if cert.thumbprint
    ]
    common_names = []
    for cert in certificates:
        if cert.common_name:
            entry = {"isAdmin": cert.is_admin, "certificateCommonName": cert.common_name}
            if cert.issuer_thumbprint:
                entry["certificateIssuerThumbprint"] = cert.issuer_thumbprint
            common_names.append(entry)
    return {
        "clientCertificateThumbprints": thumbprints,
        "clientCertificateCommonNames": common_names,
    }


def cluster_from_wire(
    data: Dict[str, Any], resource_group_name: str, name: Optional[str] = None
) -> ServiceFabricCluster:
    """Map a cluster document; name is the fallback when the body omits it."""
    properties = data.get("properties") or {}
    return ServiceFabricCluster(
        name=data.get("name") or name,
        resource_group_name=resource_group_name,
        id=data.get("id"),
        location=data.get("location"),
        tags=data.get("tags") or {},
        cluster_state=properties.get("clusterState"),
        reliability_level=properties.get("reliabilityLevel"),
        provisioning_state=properties.get("provisioningState"),
        node_types=tuple(node_type_from_wire(item) for item in properties.get("nodeTypes") or []),
        client_certificates=certificates_from_wire(properties),
    )
