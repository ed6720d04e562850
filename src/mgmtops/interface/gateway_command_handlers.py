"""Application gateway command handlers for the interface layer."""

from typing import TYPE_CHECKING, Any, Dict

from mgmtops.domain.gateway.models import RedirectConfiguration, RedirectType
from mgmtops.infrastructure.error import with_error_handling
from mgmtops.interface.command_handlers import model_to_output, wait_if_requested

if TYPE_CHECKING:
    import argparse

    from mgmtops.bootstrap import Application


@with_error_handling(context="add_redirect_configuration")
def handle_add_redirect(args: "argparse.Namespace", app: "Application") -> Dict[str, Any]:
    """
    Add a redirect configuration to a gateway and write the gateway back.

    The duplicate check runs on the fetched gateway before anything is sent.
    """
    adapter = app.application_gateway_adapter()
    gateway = adapter.get_application_gateway(args.resource_group, args.gateway)
    redirect = RedirectConfiguration(
        name=args.name,
        redirect_type=RedirectType(args.redirect_type),
        target_listener_id=args.target_listener_id,
        target_url=args.target_url,
        include_path=args.include_path,
        include_query_string=args.include_query_string,
    )
    gateway = adapter.set_application_gateway(adapter.add_redirect_configuration(gateway, redirect))
    return wait_if_requested(args, app, adapter.get_operation_status, model_to_output(gateway))


@with_error_handling(context="remove_redirect_configuration")
def handle_remove_redirect(args: "argparse.Namespace", app: "Application") -> Dict[str, Any]:
    adapter = app.application_gateway_adapter()
    gateway = adapter.get_application_gateway(args.resource_group, args.gateway)
    updated = adapter.remove_redirect_configuration(gateway, args.name)
    if len(updated.redirect_configurations) == len(gateway.redirect_configurations):
        return model_to_output(updated)
    updated = adapter.set_application_gateway(updated)
    return wait_if_requested(args, app, adapter.get_operation_status, model_to_output(updated))
