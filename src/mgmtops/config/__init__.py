"""Configuration package."""

from .schemas import (
    AppConfig,
    AzureConfig,
    LoggingConfig,
    MutationConfig,
    PollingConfig,
    SecretsConfig,
)

__all__ = [
    "AppConfig",
    "AzureConfig",
    "LoggingConfig",
    "PollingConfig",
    "SecretsConfig",
    "MutationConfig",
]
