"""Peering domain."""

from .models import ContactInfo, PeerAsn

__all__ = ["ContactInfo", "PeerAsn"]
