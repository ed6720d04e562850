"""Service fabric cluster domain."""

from .models import ClientCertificate, DurabilityLevel, NodeType, ServiceFabricCluster

__all__ = ["ClientCertificate", "DurabilityLevel", "NodeType", "ServiceFabricCluster"]
