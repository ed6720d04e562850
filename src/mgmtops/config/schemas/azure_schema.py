"""Management endpoint and credential configuration schema."""

from typing import Optional

from pydantic import BaseModel, Field, SecretStr, field_validator


class ApiVersionsConfig(BaseModel):
    """API version per resource family."""

    sql: str = "2021-11-01"
    network: str = "2023-09-01"
    service_fabric: str = "2021-06-01"
    peering: str = "2022-10-01"


class AzureConfig(BaseModel):
    """Management-plane connection configuration."""

    subscription_id: Optional[str] = Field(None, description="Active subscription")
    tenant_id: Optional[str] = Field(None, description="Tenant for service principal auth")
    client_id: Optional[str] = Field(None, description="Service principal client id")
    client_secret: Optional[SecretStr] = Field(None, description="Service principal secret")
    endpoint: str = Field("https://management.azure.com", description="Resource manager endpoint")
    scope: Optional[str] = Field(None, description="Token scope; derived from endpoint when unset")
    request_timeout: float = Field(60.0, description="Per-request timeout in seconds")
    api_versions: ApiVersionsConfig = Field(default_factory=ApiVersionsConfig)

    @field_validator("endpoint")
    @classmethod
    def validate_endpoint(cls, v: str) -> str:
        if not v.startswith("https://") and not v.startswith("http://"):
            raise ValueError("Endpoint must be an http(s) URL")
        return v.rstrip("/")

    @field_validator("request_timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("Request timeout must be positive")
        return v

    def get_scope(self) -> str:
        return self.scope or f"{self.endpoint}/.default"
