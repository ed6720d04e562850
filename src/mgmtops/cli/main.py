"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing (resource / action tree)
- Command routing and execution
- Output formatting and exit codes
"""

import argparse
import os
import sys
from typing import Any, Callable, Dict, List, Optional, Tuple

from mgmtops import __version__
from mgmtops.cli.formatters import format_output
from mgmtops.domain.cluster.models import DurabilityLevel
from mgmtops.domain.gateway.models import RedirectType
from mgmtops.domain.operation.value_objects import (
    AuthenticationType,
    DatabaseEdition,
    StorageKeyType,
)
from mgmtops.infrastructure.error import get_exception_handler, is_error_response
from mgmtops.infrastructure.logging.logger import get_logger

OUTPUT_FORMATS = ["json", "yaml", "table", "list"]


def _add_wait_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--wait", action="store_true", help="Poll until the operation is terminal")
    parser.add_argument("--timeout", type=float, help="Polling timeout in seconds")


def _add_database_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("resource_group", help="Resource group name")
    parser.add_argument("server", help="SQL server name")
    parser.add_argument("database", help="Database name")
    parser.add_argument("--storage-uri", required=True, help="Blob URI of the bacpac file")
    parser.add_argument("--storage-key", required=True, help="Storage access or SAS key")
    parser.add_argument(
        "--storage-key-type",
        choices=[t.value for t in StorageKeyType],
        default=StorageKeyType.STORAGE_ACCESS_KEY.value,
    )
    parser.add_argument("--admin-login", help="Administrator login; the password is prompted for")
    parser.add_argument(
        "--auth-type",
        choices=[t.value for t in AuthenticationType],
        default=AuthenticationType.NONE.value,
        help="Authentication type used to reach the server",
    )
    parser.add_argument("--sql-server-resource-id", help="Network isolation: SQL server resource id")
    parser.add_argument(
        "--storage-account-resource-id", help="Network isolation: storage account resource id"
    )
    _add_wait_options(parser)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with the resource-action structure."""
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) or "mgmtops",
        description="Long-running management operations against cloud resource APIs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s sql export rg srv db --storage-uri URI --storage-key KEY --wait
  %(prog)s sql status https://management.azure.com/...operationResults/... --wait
  %(prog)s peering asn list --format table
  %(prog)s gateway redirect add rg gw --name redirect1 --target-url https://example.com
  %(prog)s cluster node-type add rg cluster --name nt2 --vm-instance-count 5
        """,
    )

    # Global options
    parser.add_argument("--config", help="Configuration file path")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set logging level",
    )
    parser.add_argument("--format", choices=OUTPUT_FORMATS, default="json", help="Output format")
    parser.add_argument("--output", help="Output file (default: stdout)")
    parser.add_argument("--quiet", action="store_true", help="Suppress non-essential output")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose output")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="resource", help="Available resources")

    # sql
    sql_parser = subparsers.add_parser("sql", help="Database import/export operations")
    sql_actions = sql_parser.add_subparsers(dest="action", help="SQL actions")

    sql_export = sql_actions.add_parser("export", help="Export a database to a bacpac file")
    _add_database_arguments(sql_export)

    sql_import = sql_actions.add_parser("import", help="Import a bacpac file into a new database")
    _add_database_arguments(sql_import)
    sql_import.add_argument(
        "--edition", choices=[e.value for e in DatabaseEdition], default=DatabaseEdition.NONE.value
    )
    sql_import.add_argument("--service-objective", help="Service objective name, e.g. S0")
    sql_import.add_argument("--max-size-bytes", type=int, default=0, help="Maximum database size")

    sql_status = sql_actions.add_parser("status", help="Query an import/export operation")
    sql_status.add_argument("operation_status_link", help="Link returned by export or import")
    _add_wait_options(sql_status)

    # peering
    peering_parser = subparsers.add_parser("peering", help="Peering operations")
    peering_resources = peering_parser.add_subparsers(dest="subresource", help="Peering resources")
    asn_parser = peering_resources.add_parser("asn", help="Peer ASNs")
    asn_actions = asn_parser.add_subparsers(dest="action", help="Peer ASN actions")
    asn_actions.add_parser("list", help="List peer ASNs in the subscription")
    asn_get = asn_actions.add_parser("get", help="Show one peer ASN")
    asn_get.add_argument("name", help="Peer ASN name")

    # gateway
    gateway_parser = subparsers.add_parser("gateway", help="Application gateway operations")
    gateway_resources = gateway_parser.add_subparsers(dest="subresource", help="Gateway resources")
    redirect_parser = gateway_resources.add_parser("redirect", help="Redirect configurations")
    redirect_actions = redirect_parser.add_subparsers(dest="action", help="Redirect actions")

    redirect_add = redirect_actions.add_parser("add", help="Add a redirect configuration")
    redirect_add.add_argument("resource_group", help="Resource group name")
    redirect_add.add_argument("gateway", help="Application gateway name")
    redirect_add.add_argument("--name", required=True, help="Redirect configuration name")
    redirect_add.add_argument(
        "--redirect-type",
        choices=[t.value for t in RedirectType],
        default=RedirectType.PERMANENT.value,
    )
    target = redirect_add.add_mutually_exclusive_group(required=True)
    target.add_argument("--target-listener-id", help="Target listener resource id")
    target.add_argument("--target-url", help="Target URL")
    redirect_add.add_argument("--include-path", action="store_true", default=None)
    redirect_add.add_argument("--include-query-string", action="store_true", default=None)
    _add_wait_options(redirect_add)

    redirect_remove = redirect_actions.add_parser("remove", help="Remove a redirect configuration")
    redirect_remove.add_argument("resource_group", help="Resource group name")
    redirect_remove.add_argument("gateway", help="Application gateway name")
    redirect_remove.add_argument("--name", required=True, help="Redirect configuration name")
    _add_wait_options(redirect_remove)

    # cluster
    cluster_parser = subparsers.add_parser("cluster", help="Service fabric cluster operations")
    cluster_resources = cluster_parser.add_subparsers(dest="subresource", help="Cluster resources")

    node_type_parser = cluster_resources.add_parser("node-type", help="Node types")
    node_type_actions = node_type_parser.add_subparsers(dest="action", help="Node type actions")
    node_type_add = node_type_actions.add_parser("add", help="Add a node type")
    node_type_add.add_argument("resource_group", help="Resource group name")
    node_type_add.add_argument("cluster", help="Cluster name")
    node_type_add.add_argument("--name", required=True, help="Node type name")
    node_type_add.add_argument("--vm-instance-count", type=int, default=5)
    node_type_add.add_argument("--primary", action="store_true", help="Mark as primary node type")
    node_type_add.add_argument(
        "--durability-level",
        choices=[d.value for d in DurabilityLevel],
        default=DurabilityLevel.BRONZE.value,
    )
    _add_wait_options(node_type_add)
    node_type_remove = node_type_actions.add_parser("remove", help="Remove a node type")
    node_type_remove.add_argument("resource_group", help="Resource group name")
    node_type_remove.add_argument("cluster", help="Cluster name")
    node_type_remove.add_argument("--name", required=True, help="Node type name")
    _add_wait_options(node_type_remove)

    cert_parser = cluster_resources.add_parser("client-cert", help="Client certificates")
    cert_actions = cert_parser.add_subparsers(dest="action", help="Client certificate actions")
    cert_add = cert_actions.add_parser("add", help="Add a client certificate")
    cert_add.add_argument("resource_group", help="Resource group name")
    cert_add.add_argument("cluster", help="Cluster name")
    identity = cert_add.add_mutually_exclusive_group(required=True)
    identity.add_argument("--thumbprint", help="Certificate thumbprint")
    identity.add_argument("--common-name", help="Certificate common name")
    cert_add.add_argument("--issuer-thumbprint", help="Issuer thumbprint (common name only)")
    cert_add.add_argument("--admin", action="store_true", help="Grant admin access")
    _add_wait_options(cert_add)
    cert_remove = cert_actions.add_parser("remove", help="Remove a client certificate")
    cert_remove.add_argument("resource_group", help="Resource group name")
    cert_remove.add_argument("cluster", help="Cluster name")
    cert_remove.add_argument("--name", required=True, help="Thumbprint or common name")
    _add_wait_options(cert_remove)

    # `cluster status` has no sub-resource; the action is fixed
    cluster_status = cluster_resources.add_parser("status", help="Query a cluster operation")
    cluster_status.add_argument("operation_status_link", help="Link returned by a mutation")
    cluster_status.set_defaults(action="status")
    _add_wait_options(cluster_status)

    # secret
    secret_parser = subparsers.add_parser("secret", help="Secret helpers")
    secret_actions = secret_parser.add_subparsers(dest="action", help="Secret actions")
    secret_actions.add_parser("encrypt", help="Encrypt a value read from stdin or a prompt")

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)


def command_key(args: argparse.Namespace) -> Tuple[str, ...]:
    """Routing key: (resource, [sub-resource,] action)."""
    subresource = getattr(args, "subresource", None)
    if args.resource == "cluster" and subresource == "status":
        return ("cluster", "status")
    if subresource:
        return (args.resource, subresource, args.action)
    return (args.resource, getattr(args, "action", None))


def get_command_handlers() -> Dict[Tuple[str, ...], Callable]:
    """Command handler mapping."""
    # Imported here so parsing and --help stay light
    from mgmtops.interface.cluster_command_handlers import (
        handle_add_client_certificate,
        handle_add_node_type,
        handle_cluster_status,
        handle_remove_client_certificate,
        handle_remove_node_type,
    )
    from mgmtops.interface.gateway_command_handlers import (
        handle_add_redirect,
        handle_remove_redirect,
    )
    from mgmtops.interface.peering_command_handlers import (
        handle_get_peer_asn,
        handle_list_peer_asns,
    )
    from mgmtops.interface.secret_command_handlers import handle_encrypt_secret
    from mgmtops.interface.sql_command_handlers import (
        handle_sql_export,
        handle_sql_import,
        handle_sql_status,
    )

    return {
        ("sql", "export"): handle_sql_export,
        ("sql", "import"): handle_sql_import,
        ("sql", "status"): handle_sql_status,
        ("peering", "asn", "list"): handle_list_peer_asns,
        ("peering", "asn", "get"): handle_get_peer_asn,
        ("gateway", "redirect", "add"): handle_add_redirect,
        ("gateway", "redirect", "remove"): handle_remove_redirect,
        ("cluster", "node-type", "add"): handle_add_node_type,
        ("cluster", "node-type", "remove"): handle_remove_node_type,
        ("cluster", "client-cert", "add"): handle_add_client_certificate,
        ("cluster", "client-cert", "remove"): handle_remove_client_certificate,
        ("cluster", "status"): handle_cluster_status,
        ("secret", "encrypt"): handle_encrypt_secret,
    }


def execute_command(args: argparse.Namespace, app) -> Dict[str, Any]:
    """Execute the appropriate command handler."""
    key = command_key(args)
    handler = get_command_handlers().get(key)
    if handler is None:
        raise ValueError(f"Unknown command: {' '.join(part for part in key if part)}")
    return handler(args, app)


def write_output(args: argparse.Namespace, result: Dict[str, Any]) -> None:
    formatted_output = format_output(result, args.format)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(formatted_output)
        if not args.quiet:
            print(f"Output written to {args.output}")
    else:
        print(formatted_output)


def main(argv: Optional[List[str]] = None, app=None) -> int:
    """
    Main CLI entry point.

    Returns:
        Process exit code: 0 on success, 1 on an error response, 130 on interrupt
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    logger = get_logger(__name__)

    if not args.resource or not getattr(args, "action", None):
        parser.print_help()
        return 1

    try:
        if app is None:
            from mgmtops.bootstrap import create_application

            app = create_application(args.config)
        app.setup_logging("DEBUG" if args.verbose else args.log_level)

        result = execute_command(args, app)
        write_output(args, result)
        return 1 if is_error_response(result) else 0

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        return 130
    except Exception as e:
        # Configuration and routing failures happen outside the handlers
        error = get_exception_handler().handle_error(e, context="cli").to_dict()
        if args.verbose:
            logger.exception("Command failed")
        if not args.quiet:
            print(format_output(error, args.format), file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
