"""Database import/export command handlers for the interface layer."""

import getpass
import os
from typing import TYPE_CHECKING, Any, Dict, Optional

from pydantic import SecretStr

from mgmtops.domain.operation.models import ImportExportRequest, ImportRequest
from mgmtops.domain.operation.value_objects import (
    AuthenticationType,
    DatabaseEdition,
    StorageKeyType,
)
from mgmtops.infrastructure.error import with_error_handling
from mgmtops.interface.command_handlers import model_to_output, wait_if_requested

if TYPE_CHECKING:
    import argparse

    from mgmtops.bootstrap import Application

PASSWORD_ENV_VAR = "MGMTOPS_SQL_PASSWORD"


def read_password(app: "Application", login: Optional[str]) -> Optional[SecretStr]:
    """
    Read the administrator password and encrypt it at once.

    Taken from MGMTOPS_SQL_PASSWORD when set, otherwise prompted for.
    """
    if not login:
        return None
    password = os.environ.get(PASSWORD_ENV_VAR)
    if password is None:
        password = getpass.getpass(f"Password for {login}: ")
    return app.cipher.encrypt(password)


def _common_fields(args: "argparse.Namespace", app: "Application") -> Dict[str, Any]:
    return {
        "resource_group_name": args.resource_group,
        "server_name": args.server,
        "database_name": args.database,
        "storage_uri": args.storage_uri,
        "storage_key": args.storage_key,
        "storage_key_type": StorageKeyType(args.storage_key_type),
        "administrator_login": args.admin_login or "",
        "administrator_login_password": read_password(app, args.admin_login),
        "authentication_type": AuthenticationType(args.auth_type),
        "sql_server_resource_id": args.sql_server_resource_id,
        "storage_account_resource_id": args.storage_account_resource_id,
    }


@with_error_handling(context="sql_export")
def handle_sql_export(args: "argparse.Namespace", app: "Application") -> Dict[str, Any]:
    """
    Handle database export.

    Args:
        args: Parsed command line arguments
        app: Application context

    Returns:
        The submitted request with its status and operation status link
    """
    adapter = app.import_export_adapter()
    result = adapter.export(ImportExportRequest(**_common_fields(args, app)))
    return wait_if_requested(args, app, adapter.get_status, model_to_output(result))


@with_error_handling(context="sql_import")
def handle_sql_import(args: "argparse.Namespace", app: "Application") -> Dict[str, Any]:
    """Handle database import."""
    adapter = app.import_export_adapter()
    request = ImportRequest(
        **_common_fields(args, app),
        edition=DatabaseEdition(args.edition),
        service_objective_name=args.service_objective,
        database_max_size_bytes=args.max_size_bytes,
    )
    result = adapter.import_database(request)
    return wait_if_requested(args, app, adapter.get_status, model_to_output(result))


@with_error_handling(context="sql_status")
def handle_sql_status(args: "argparse.Namespace", app: "Application") -> Dict[str, Any]:
    adapter = app.import_export_adapter()
    if args.wait:
        status = app.poller(adapter.get_status, timeout=args.timeout).wait(args.operation_status_link)
    else:
        status = adapter.get_status(args.operation_status_link)
    return model_to_output(status)
