"""Helpers shared by the CLI command handlers."""

from typing import TYPE_CHECKING, Any, Callable, Dict, Optional

from pydantic import BaseModel

from mgmtops.domain.operation.models import StatusModel

if TYPE_CHECKING:
    import argparse

    from mgmtops.bootstrap import Application

SECRET_FIELDS = frozenset({"administrator_login_password", "storage_key"})


def model_to_output(model: BaseModel) -> Dict[str, Any]:
    """Dump a user-facing model for output, never including secret fields."""
    return model.model_dump(mode="json", exclude=set(SECRET_FIELDS & set(type(model).model_fields)))


def wait_if_requested(
    args: "argparse.Namespace",
    app: "Application",
    get_status: Callable[..., StatusModel],
    result: Dict[str, Any],
) -> Dict[str, Any]:
    """
    Poll the operation in result until it is terminal when --wait was given.

    The final status is added to the result under "operation".
    """
    link: Optional[str] = result.get("operation_status_link")
    if not getattr(args, "wait", False) or not link:
        return result
    final = app.poller(get_status, timeout=getattr(args, "timeout", None)).wait(link)
    return {**result, "operation": model_to_output(final)}
