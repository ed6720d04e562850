"""Polling, secret and mutation configuration schemas."""

from pydantic import BaseModel, Field, field_validator


class PollingConfig(BaseModel):
    """Caller-side polling defaults used by the CLI --wait option."""

    interval_seconds: float = Field(10.0, description="Delay between status queries")
    timeout_seconds: float = Field(3600.0, description="Give up after this many seconds")

    @field_validator("interval_seconds", "timeout_seconds")
    @classmethod
    def validate_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("Polling values must be positive")
        return v


class SecretsConfig(BaseModel):
    """Where the secret encryption key is read from."""

    key_env_var: str = Field("MGMTOPS_SECRET_KEY", description="Environment variable holding the Fernet key")


class ChildMutationPolicy(BaseModel):
    """Whether removing an absent named child is an error."""

    fail_on_missing: bool = False


class MutationConfig(BaseModel):
    """Per resource family mutation policies."""

    redirect_configurations: ChildMutationPolicy = Field(
        default_factory=lambda: ChildMutationPolicy(fail_on_missing=False)
    )
    node_types: ChildMutationPolicy = Field(
        default_factory=lambda: ChildMutationPolicy(fail_on_missing=True)
    )
    client_certificates: ChildMutationPolicy = Field(
        default_factory=lambda: ChildMutationPolicy(fail_on_missing=True)
    )
