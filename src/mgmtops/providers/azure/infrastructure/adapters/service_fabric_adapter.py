"""Service fabric cluster adapter: node type and client certificate mutations."""

from typing import Any, Dict, Union

from mgmtops.domain.base.exceptions import ValidationError
from mgmtops.domain.base.named_children import add_named_child, find_named_child, remove_named_child
from mgmtops.domain.base.value_objects import OperationHandle
from mgmtops.domain.cluster.models import ClientCertificate, NodeType, ServiceFabricCluster
from mgmtops.domain.operation.models import StatusModel, overlay_operation_result
from mgmtops.domain.operation.value_objects import AsyncOperationStatus
from mgmtops.providers.azure.infrastructure.adapters.base_adapter import BaseManagementAdapter
from mgmtops.providers.azure.infrastructure.communicators import ServiceFabricClusterCommunicator
from mgmtops.providers.azure.infrastructure.mappers import (
    OperationResponseMapper,
    resource_submission_status,
)
from mgmtops.providers.azure.infrastructure.mappers.cluster_mapper import (
    certificates_to_wire,
    cluster_from_wire,
    node_type_to_wire,
)

NODE_TYPE = "NodeType"
CLIENT_CERTIFICATE = "ClientCertificate"


def _certificate_key(certificate: ClientCertificate) -> str:
    return certificate.name


class ServiceFabricClusterAdapter(BaseManagementAdapter):
    """
    Mutates a caller-supplied cluster.

    Every mutation is validated locally first and then sent as one PATCH;
    a rejected mutation never reaches the service.
    """

    def __init__(
        self,
        communicator: ServiceFabricClusterCommunicator,
        fail_on_missing_node_type: bool = True,
        fail_on_missing_certificate: bool = True,
        mapper: OperationResponseMapper = None,
        logger=None,
    ):
        super().__init__(logger)
        self._communicator = communicator
        self._fail_on_missing_node_type = fail_on_missing_node_type
        self._fail_on_missing_certificate = fail_on_missing_certificate
        self._mapper = mapper or OperationResponseMapper()

    def get_cluster(self, resource_group_name: str, name: str) -> ServiceFabricCluster:
        response = self._invoke("get_cluster", self._communicator.get, resource_group_name, name)
        return cluster_from_wire(response.body, resource_group_name, name)

    def add_node_type(self, cluster: ServiceFabricCluster, node_type: NodeType) -> ServiceFabricCluster:
        """
        Add a node type to the cluster.

        Raises:
            DuplicateNameError: If a node type with that name exists (any case)
        """
        node_types = add_named_child(cluster.node_types, node_type, NODE_TYPE)
        self._logger.info("Adding node type %s to cluster %s", node_type.name, cluster.name)
        return self._submit(
            cluster, {"nodeTypes": [node_type_to_wire(item) for item in node_types]}, node_types=node_types
        )

    def remove_node_type(self, cluster: ServiceFabricCluster, name: str) -> ServiceFabricCluster:
        """
        Remove a node type from the cluster.

        Raises:
            NotFoundError: If absent and the family is configured to fail on missing
            ValidationError: If the node type is the cluster's only primary node type
        """
        existing = find_named_child(cluster.node_types, name)
        node_types = remove_named_child(
            cluster.node_types, name, NODE_TYPE, fail_on_missing=self._fail_on_missing_node_type
        )
        if existing is None:
            return cluster.model_copy()
        if existing.is_primary and not any(item.is_primary for item in node_types):
            raise ValidationError(
                f"Cannot remove the only primary node type: {existing.name}",
                "PRIMARY_NODE_TYPE_REQUIRED",
                {"node_type": existing.name},
            )
        self._logger.info("Removing node type %s from cluster %s", existing.name, cluster.name)
        return self._submit(
            cluster, {"nodeTypes": [node_type_to_wire(item) for item in node_types]}, node_types=node_types
        )

    def add_client_certificate(
        self, cluster: ServiceFabricCluster, certificate: ClientCertificate
    ) -> ServiceFabricCluster:
        """
        Add a client certificate, keyed by thumbprint or common name.

        Raises:
            DuplicateNameError: If the certificate is already registered (any case)
        """
        certificates = add_named_child(
            cluster.client_certificates, certificate, CLIENT_CERTIFICATE, key=_certificate_key
        )
        self._logger.info("Adding client certificate %s to cluster %s", certificate.name, cluster.name)
        return self._submit(
            cluster, certificates_to_wire(certificates), client_certificates=certificates
        )

    def remove_client_certificate(self, cluster: ServiceFabricCluster, name: str) -> ServiceFabricCluster:
        """
        Remove a client certificate by thumbprint or common name.

        Raises:
            NotFoundError: If absent and the family is configured to fail on missing
        """
        certificates = remove_named_child(
            cluster.client_certificates,
            name,
            CLIENT_CERTIFICATE,
            fail_on_missing=self._fail_on_missing_certificate,
            key=_certificate_key,
        )
        if len(certificates) == len(cluster.client_certificates):
            return cluster.model_copy()
        self._logger.info("Removing client certificate %s from cluster %s", name, cluster.name)
        return self._submit(
            cluster, certificates_to_wire(certificates), client_certificates=certificates
        )

    def get_operation_status(self, handle: Union[OperationHandle, str]) -> StatusModel:
        if isinstance(handle, str):
            handle = OperationHandle(link=handle)
        response = self._invoke("get_operation_status", self._communicator.get_status, handle.link)
        return self._mapper.to_status_model(
            response,
            handle,
            parse_status=AsyncOperationStatus.from_wire,
            default_status=AsyncOperationStatus.IN_PROGRESS,
        )

    def _submit(
        self, cluster: ServiceFabricCluster, properties: Dict[str, Any], **local_update
    ) -> ServiceFabricCluster:
        response = self._invoke(
            "update_cluster",
            self._communicator.update,
            cluster.resource_group_name,
            cluster.name,
            {"properties": properties},
        )
        if response.body:
            updated = cluster_from_wire(response.body, cluster.resource_group_name, cluster.name)
            provisioning_state = updated.provisioning_state
        else:
            updated = cluster.model_copy(update=local_update)
            provisioning_state = None
        return overlay_operation_result(
            updated,
            resource_submission_status(response, provisioning_state),
            None,
            response.operation_link,
        )
