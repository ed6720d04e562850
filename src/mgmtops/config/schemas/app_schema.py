"""Main application configuration schema."""

from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator

from .azure_schema import AzureConfig
from .logging_schema import LoggingConfig
from .operation_schema import MutationConfig, PollingConfig, SecretsConfig


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    azure: AzureConfig = Field(default_factory=lambda: AzureConfig())
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    polling: PollingConfig = Field(default_factory=lambda: PollingConfig())
    secrets: SecretsConfig = Field(default_factory=lambda: SecretsConfig())
    mutation: MutationConfig = Field(default_factory=lambda: MutationConfig())
    environment: str = Field("development", description="Environment")
    debug: bool = Field(False, description="Debug mode")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        return cls.model_validate(data)

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """
        Validate environment.

        Args:
            v: Value to validate

        Returns:
            Validated value

        Raises:
            ValueError: If environment is invalid
        """
        valid_environments = ["development", "testing", "staging", "production"]
        if v not in valid_environments:
            raise ValueError(f"Environment must be one of {valid_environments}")
        return v
