"""Tests for CLI parsing, routing and exit codes."""

import json
from unittest.mock import Mock, patch

import pytest

from mgmtops.cli.main import command_key, main, parse_args


@pytest.mark.unit
class TestParseArgs:
    def test_sql_export(self):
        args = parse_args(
            [
                "sql", "export", "rg", "srv", "db",
                "--storage-uri", "https://u", "--storage-key", "k",
                "--auth-type", "AdPassword", "--wait",
            ]
        )

        assert command_key(args) == ("sql", "export")
        assert args.auth_type == "AdPassword"
        assert args.wait is True
        assert args.format == "json"

    def test_nested_resources(self):
        assert command_key(parse_args(["peering", "asn", "list"])) == ("peering", "asn", "list")
        assert command_key(
            parse_args(["gateway", "redirect", "remove", "rg", "gw", "--name", "cfg1"])
        ) == ("gateway", "redirect", "remove")
        assert command_key(
            parse_args(["cluster", "client-cert", "add", "rg", "c", "--thumbprint", "AAAA"])
        ) == ("cluster", "client-cert", "add")

    def test_cluster_status(self):
        args = parse_args(["cluster", "status", "https://async/op"])

        assert command_key(args) == ("cluster", "status")
        assert args.operation_status_link == "https://async/op"

    def test_redirect_requires_exactly_one_target(self):
        with pytest.raises(SystemExit):
            parse_args(
                [
                    "gateway", "redirect", "add", "rg", "gw", "--name", "r",
                    "--target-url", "https://a", "--target-listener-id", "/l",
                ]
            )


@pytest.mark.unit
class TestMain:
    def setup_method(self):
        self.app = Mock()

    def test_success_prints_json_and_returns_zero(self, capsys):
        handler = Mock(return_value={"name": "contoso"})
        with patch("mgmtops.cli.main.get_command_handlers", return_value={("peering", "asn", "get"): handler}):
            code = main(["peering", "asn", "get", "contoso"], app=self.app)

        assert code == 0
        assert json.loads(capsys.readouterr().out) == {"name": "contoso"}
        self.app.setup_logging.assert_called_once_with(None)

    def test_error_response_returns_nonzero(self, capsys):
        error = {"error": "NOT_FOUND", "message": "m", "category": "not_found", "details": {}}
        handler = Mock(return_value=error)
        with patch("mgmtops.cli.main.get_command_handlers", return_value={("sql", "status"): handler}):
            code = main(["sql", "status", "https://async/op"], app=self.app)

        assert code == 1
        assert json.loads(capsys.readouterr().out)["error"] == "NOT_FOUND"

    def test_setup_failure_is_reported(self, capsys):
        self.app.setup_logging.side_effect = RuntimeError("broken config")

        code = main(["peering", "asn", "list"], app=self.app)

        assert code == 1
        assert "INTERNAL_ERROR" in capsys.readouterr().err

    def test_missing_action_prints_help(self, capsys):
        assert main(["sql"], app=self.app) == 1

    def test_output_file(self, tmp_path, capsys):
        handler = Mock(return_value={"encrypted": "token"})
        target = tmp_path / "out.yaml"
        with patch("mgmtops.cli.main.get_command_handlers", return_value={("secret", "encrypt"): handler}):
            code = main(["--format", "yaml", "--output", str(target), "secret", "encrypt"], app=self.app)

        assert code == 0
        assert target.read_text() == "encrypted: token\n"
        assert "Output written to" in capsys.readouterr().out
