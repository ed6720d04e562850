"""Tests for CLI output formatting."""

import json

import pytest
import yaml

from mgmtops.cli.formatters import format_output

RESULT = {
    "name": "sfcluster",
    "status": "InProgress",
    "node_types": [
        {"name": "nt1vm", "is_primary": True, "vm_instance_count": 5, "durability_level": "Bronze"}
    ],
}


@pytest.mark.unit
class TestFormatOutput:
    def test_json(self):
        assert json.loads(format_output(RESULT, "json")) == RESULT

    def test_yaml_keeps_key_order(self):
        output = format_output(RESULT, "yaml")

        assert yaml.safe_load(output) == RESULT
        assert output.startswith("name: sfcluster")

    def test_table_renders_properties_and_collections(self):
        output = format_output(RESULT, "table")

        assert "sfcluster" in output
        assert "Node Types" in output
        assert "nt1vm" in output

    def test_table_empty_collection(self):
        output = format_output({"peer_asns": []}, "table")

        assert "Peer ASNs" in output

    def test_list(self):
        output = format_output(RESULT, "list")

        assert "Name: sfcluster" in output
        assert "  - Name: nt1vm" in output
        assert "    Is Primary: True" in output

    def test_unknown_format_falls_back_to_json(self):
        assert json.loads(format_output({"a": 1}, "xml")) == {"a": 1}
