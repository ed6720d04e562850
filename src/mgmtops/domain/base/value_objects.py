"""Base value objects - immutable building blocks for all resource families."""

from pydantic import BaseModel, ConfigDict, field_validator


class ValueObject(BaseModel):
    """Base class for immutable value objects."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class OperationHandle(ValueObject):
    """
    Opaque link returned by a submission call.

    Used only to query the status of the asynchronous operation later; it is
    unrelated to the target resource's own identifier.
    """

    link: str

    @field_validator("link")
    @classmethod
    def validate_link(cls, v: str) -> str:
        """Reject empty links."""
        if not v or not v.strip():
            raise ValueError("Operation status link must not be empty")
        return v

    def __str__(self) -> str:
        return self.link
