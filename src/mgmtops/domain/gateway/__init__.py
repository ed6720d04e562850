"""Application gateway domain."""

from .models import ApplicationGateway, RedirectConfiguration, RedirectType

__all__ = ["ApplicationGateway", "RedirectConfiguration", "RedirectType"]
