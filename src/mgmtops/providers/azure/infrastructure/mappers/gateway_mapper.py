"""Application gateway wire mapping."""

from typing import Any, Dict, Optional

from mgmtops.domain.gateway.models import ApplicationGateway, RedirectConfiguration

_REDIRECT_FIELDS = {
    "redirectType": "redirect_type",
    "targetUrl": "target_url",
    "includePath": "include_path",
    "includeQueryString": "include_query_string",
}
_GATEWAY_MANAGED = ("redirectConfigurations", "provisioningState")


def redirect_from_wire(data: Dict[str, Any]) -> RedirectConfiguration:
    properties = dict(data.get("properties") or {})
    fields: Dict[str, Any] = {"name": data["name"], "id": data.get("id")}
    for wire_name, field_name in _REDIRECT_FIELDS.items():
        if properties.get(wire_name) is not None:
            fields[field_name] = properties.pop(wire_name)
        else:
            properties.pop(wire_name, None)
    target_listener = properties.pop("targetListener", None)
    if isinstance(target_listener, dict):
        fields["target_listener_id"] = target_listener.get("id")
    fields["other_properties"] = properties
    return RedirectConfiguration(**fields)


def redirect_to_wire(redirect: RedirectConfiguration) -> Dict[str, Any]:
    properties: Dict[str, Any] = dict(redirect.other_properties)
    properties["redirectType"] = redirect.redirect_type.value
    if redirect.target_listener_id:
        properties["targetListener"] = {"id": redirect.target_listener_id}
    if redirect.target_url:
        properties["targetUrl"] = redirect.target_url
    if redirect.include_path is not None:
        properties["includePath"] = redirect.include_path
    if redirect.include_query_string is not None:
        properties["includeQueryString"] = redirect.include_query_string
    data: Dict[str, Any] = {"name": redirect.name, "properties": properties}
    if redirect.id:
        data["id"] = redirect.id
    return data


def gateway_from_wire(
    data: Dict[str, Any], resource_group_name: str, name: Optional[str] = None
) -> ApplicationGateway:
    """Map a gateway document; name is the fallback when the body omits it."""
    properties = data.get("properties") or {}
    return ApplicationGateway(
        name=data.get("name") or name,
        resource_group_name=resource_group_name,
        id=data.get("id"),
        location=data.get("location"),
        tags=data.get("tags") or {},
        provisioning_state=properties.get("provisioningState"),
        redirect_configurations=tuple(
            redirect_from_wire(item) for item in properties.get("redirectConfigurations") or []
        ),
        other_properties={k: v for k, v in properties.items() if k not in _GATEWAY_MANAGED},
    )


def gateway_to_wire(gateway: ApplicationGateway) -> Dict[str, Any]:
    properties = dict(gateway.other_properties)
    properties["redirectConfigurations"] = [
        redirect_to_wire(redirect) for redirect in gateway.redirect_configurations
    ]
    data: Dict[str, Any] = {"name": gateway.name, "properties": properties}
    if gateway.id:
        data["id"] = gateway.id
    if gateway.location:
        data["location"] = gateway.location
    if gateway.tags:
        data["tags"] = dict(gateway.tags)
    return data
