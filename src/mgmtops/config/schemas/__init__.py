"""Configuration schemas."""

from .app_schema import AppConfig
from .azure_schema import ApiVersionsConfig, AzureConfig
from .logging_schema import LogDestination, LoggingConfig
from .operation_schema import ChildMutationPolicy, MutationConfig, PollingConfig, SecretsConfig

__all__ = [
    "AppConfig",
    "AzureConfig",
    "ApiVersionsConfig",
    "LoggingConfig",
    "LogDestination",
    "PollingConfig",
    "SecretsConfig",
    "MutationConfig",
    "ChildMutationPolicy",
]
