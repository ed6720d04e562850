"""Azure authentication context."""

from .context import AzureContext, create_context, create_credential

__all__ = ["AzureContext", "create_context", "create_credential"]
