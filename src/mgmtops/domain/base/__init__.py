"""Base domain layer - shared kernel for all resource families."""

from .exceptions import (
    DomainException,
    DuplicateNameError,
    NotFoundError,
    OperationTimeoutError,
    ValidationError,
)
from .named_children import add_named_child, find_named_child, remove_named_child
from .value_objects import OperationHandle, ValueObject

__all__ = [
    # Value Objects
    "ValueObject",
    "OperationHandle",
    # Named child collections
    "add_named_child",
    "remove_named_child",
    "find_named_child",
    # Exceptions
    "DomainException",
    "ValidationError",
    "DuplicateNameError",
    "NotFoundError",
    "OperationTimeoutError",
]
