"""
Service error envelope decoding.

Endpoints do not agree on one error document shape, so decoding runs an
ordered list of attempts over a tagged union and falls through to
UnparsedError when none matches:

1. NestedErrorEnvelope   {"error": {"<any key>": {"code": ..., "message": ...}}}
2. WrappedErrorEnvelope  {"error": {"code": ..., "message": ...}}
3. FlatErrorDetail       {"code": ..., "message": ...}

For a nested envelope with several entries the first entry is used.
"""

import json
from typing import Dict, Literal, Optional, Tuple, Type, Union

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import ValidationError as PydanticValidationError

from mgmtops.infrastructure.exceptions import OperationError


class ErrorDetail(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    code: str
    message: str


class NestedErrorEnvelope(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    kind: Literal["nested"] = "nested"
    error: Dict[str, ErrorDetail]

    @field_validator("error")
    @classmethod
    def require_entry(cls, v: Dict[str, ErrorDetail]) -> Dict[str, ErrorDetail]:
        if not v:
            raise ValueError("Nested error envelope has no entries")
        return v

    @property
    def detail(self) -> ErrorDetail:
        return next(iter(self.error.values()))


class WrappedErrorEnvelope(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    kind: Literal["wrapped"] = "wrapped"
    error: ErrorDetail

    @property
    def detail(self) -> ErrorDetail:
        return self.error


class FlatErrorDetail(ErrorDetail):
    kind: Literal["flat"] = "flat"

    @property
    def detail(self) -> ErrorDetail:
        return ErrorDetail(code=self.code, message=self.message)


class UnparsedError(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["unparsed"] = "unparsed"
    body: Optional[str] = None


ErrorShape = Union[NestedErrorEnvelope, WrappedErrorEnvelope, FlatErrorDetail, UnparsedError]

_DECODE_ATTEMPTS: Tuple[Type[BaseModel], ...] = (
    NestedErrorEnvelope,
    WrappedErrorEnvelope,
    FlatErrorDetail,
)


def decode_error_envelope(body: Optional[str]) -> ErrorShape:
    """Decode a fault body into the first error shape that fits."""
    try:
        payload = json.loads(body) if body else None
    except (TypeError, ValueError):
        payload = None

    if isinstance(payload, dict):
        for shape in _DECODE_ATTEMPTS:
            try:
                return shape.model_validate(payload)
            except PydanticValidationError:
                continue

    return UnparsedError(body=body)


def to_operation_error(shape: ErrorShape, status_code: Optional[int] = None) -> Optional[OperationError]:
    """Normalized OperationError for a decoded shape, or None when unparsed."""
    if isinstance(shape, UnparsedError):
        return None
    detail = shape.detail
    return OperationError(detail.code, detail.message, status_code)
