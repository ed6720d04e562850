"""Named child collection operations.

A named child collection is an ordered tuple of sub-resources identified by
name within a parent resource. Names are unique case-insensitively; the check
happens at add time, before anything is applied.
"""

from typing import Callable, Optional, Tuple, TypeVar

from mgmtops.domain.base.exceptions import DuplicateNameError, NotFoundError


C = TypeVar("C")


def normalize_name(name: str) -> str:
    """Lower-invariant comparison key for child names."""
    return name.lower()


def _default_key(child) -> str:
    return child.name


def find_named_child(
    children: Tuple[C, ...], name: str, key: Callable[[C], str] = _default_key
) -> Optional[C]:
    """Return the child whose name matches case-insensitively, or None."""
    wanted = normalize_name(name)
    for child in children:
        if normalize_name(key(child)) == wanted:
            return child
    return None


def add_named_child(
    children: Tuple[C, ...],
    child: C,
    child_type: str,
    key: Callable[[C], str] = _default_key,
) -> Tuple[C, ...]:
    """
    Append a child to the collection.

    Args:
        children: Existing collection (left untouched)
        child: Child to append
        child_type: Human-readable child type for error messages
        key: Name accessor for the child type

    Returns:
        New collection with the child appended

    Raises:
        DuplicateNameError: If a child with the same name already exists
    """
    name = key(child)
    if find_named_child(children, name, key) is not None:
        raise DuplicateNameError(child_type, name)
    return tuple(children) + (child,)


def remove_named_child(
    children: Tuple[C, ...],
    name: str,
    child_type: str,
    fail_on_missing: bool = False,
    key: Callable[[C], str] = _default_key,
) -> Tuple[C, ...]:
    """
    Remove the child with the given name.

    Absence is a no-op unless fail_on_missing is set.

    Raises:
        NotFoundError: If the child is absent and fail_on_missing is True
    """
    wanted = normalize_name(name)
    remaining = tuple(child for child in children if normalize_name(key(child)) != wanted)
    if fail_on_missing and len(remaining) == len(children):
        raise NotFoundError(child_type, name)
    return remaining
