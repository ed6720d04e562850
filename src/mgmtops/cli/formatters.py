"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- JSON and YAML dumps of command results
- Rich tables for collections (peer ASNs, node types, redirect configurations)
- Detailed list views
"""

import json
from typing import Any, Dict, List, Sequence, Tuple

import yaml
from rich.console import Console
from rich.table import Table

# Collections rendered as their own table: result key -> (title, columns)
COLLECTION_COLUMNS: Dict[str, Tuple[str, Sequence[str]]] = {
    "peer_asns": ("Peer ASNs", ("name", "peer_asn", "peer_name", "validation_state")),
    "node_types": (
        "Node Types",
        ("name", "is_primary", "vm_instance_count", "durability_level"),
    ),
    "client_certificates": (
        "Client Certificates",
        ("thumbprint", "common_name", "issuer_thumbprint", "is_admin"),
    ),
    "redirect_configurations": (
        "Redirect Configurations",
        ("name", "redirect_type", "target_listener_id", "target_url"),
    ),
}


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    elif format_type == "table":
        return format_table_output(data)
    elif format_type == "list":
        return format_list_output(data)
    return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any) -> str:
    """Format a command result as one or more tables."""
    if not isinstance(data, dict):
        return json.dumps(data, indent=2, default=str)

    tables: List[Table] = []
    scalars = {k: v for k, v in data.items() if k not in COLLECTION_COLUMNS}
    if scalars:
        tables.append(_properties_table(scalars))
    for key, (title, columns) in COLLECTION_COLUMNS.items():
        if key in data:
            tables.append(_collection_table(title, columns, data[key] or []))
    return _render(tables)


def format_list_output(data: Any) -> str:
    """Format a command result as an indented detailed list."""
    if not isinstance(data, dict):
        return json.dumps(data, indent=2, default=str)

    lines = []
    for key, value in data.items():
        if isinstance(value, list):
            lines.append(f"{_label(key)}:")
            if not value:
                lines.append("  (none)")
            for item in value:
                if isinstance(item, dict):
                    first, *rest = list(item.items()) or [("", "")]
                    lines.append(f"  - {_label(first[0])}: {_cell(first[1])}")
                    lines.extend(f"    {_label(k)}: {_cell(v)}" for k, v in rest)
                else:
                    lines.append(f"  - {_cell(item)}")
        else:
            lines.append(f"{_label(key)}: {_cell(value)}")
    return "\n".join(lines)


def _properties_table(values: Dict[str, Any]) -> Table:
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="green")
    for key, value in values.items():
        table.add_row(_label(key), _cell(value))
    return table


def _collection_table(title: str, columns: Sequence[str], rows: List[Dict[str, Any]]) -> Table:
    table = Table(title=title, show_header=True, header_style="bold magenta", show_lines=True)
    for column in columns:
        table.add_column(_label(column), style="cyan" if column == columns[0] else None)
    for row in rows:
        table.add_row(*(_cell(row.get(column)) for column in columns))
    return table


def _render(tables: List[Table]) -> str:
    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        for table in tables:
            console.print(table)
    return capture.get()


def _label(key: str) -> str:
    return key.replace("_", " ").title()


def _cell(value: Any) -> str:
    if value is None:
        return "N/A"
    if isinstance(value, (dict, list)):
        return json.dumps(value, default=str)
    return str(value)
