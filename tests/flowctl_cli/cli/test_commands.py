"""Tests for flowctl command groups run through the root app."""

from __future__ import annotations

import json
from unittest.mock import patch

from typer.testing import CliRunner

from flowctl_cli import app
from flowctl_cli.context import MissingContextFieldError

runner = CliRunner()


def _invoke(config_dir, *args: str):
    return runner.invoke(app, ["--config-dir", str(config_dir), *args])


def test_help_lists_command_groups():
    result = runner.invoke(app, ["--help"])

    assert result.exit_code == 0
    for name in ("context", "session", "config"):
        assert name in result.output


class TestOutputTypeSelection:
    """Commands render through the writer the context resolves."""

    def test_batch_default_is_json(self, config_dir):
        result = _invoke(config_dir, "--batch", "config", "show")

        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert payload["flow_url"] == "http://localhost:8080"

    def test_interactive_default_is_simple(self, config_dir):
        result = _invoke(config_dir, "--interactive", "config", "show")

        assert result.exit_code == 0
        assert "flow_url: http://localhost:8080" in result.output

    def test_explicit_output_type_wins(self, config_dir):
        result = _invoke(config_dir, "--batch", "-o", "simple", "config", "show")

        assert result.exit_code == 0
        assert "registry_url: http://localhost:18080" in result.output


class TestSessionCommands:
    def test_set_get_remove(self, config_dir, tmp_path):
        props = tmp_path / "flow.toml"
        assert _invoke(config_dir, "session", "set", "flow.props", str(props)).exit_code == 0

        result = _invoke(config_dir, "session", "get", "flow.props")
        assert result.exit_code == 0
        assert json.loads(result.output) == {"flow.props": str(props.resolve())}

        assert _invoke(config_dir, "session", "remove", "flow.props").exit_code == 0
        result = _invoke(config_dir, "session", "keys")
        assert json.loads(result.output) == {"variables": []}

    def test_get_unset_variable_fails(self, config_dir):
        result = _invoke(config_dir, "session", "get", "registry.props")

        assert result.exit_code == 1
        assert "is not set" in result.output

    def test_unknown_variable_fails(self, config_dir):
        result = _invoke(config_dir, "session", "set", "bogus", "value")

        assert result.exit_code == 1
        assert "Unknown session variable" in result.output

    def test_clear(self, config_dir):
        _invoke(config_dir, "session", "set", "registry.props", "/tmp/r.toml")

        assert _invoke(config_dir, "session", "clear").exit_code == 0
        assert json.loads(_invoke(config_dir, "session", "show").output) == {}


class TestContextShow:
    def test_reports_clients_and_defaults(self, config_dir, tmp_path):
        props = tmp_path / "registry.toml"
        props.write_text('baseUrl = "https://registry.example.com"\n', encoding="utf-8")
        _invoke(config_dir, "session", "set", "registry.props", str(props))

        result = _invoke(config_dir, "--batch", "context", "show")

        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert payload["interactive"] is False
        assert payload["output_type"] == "json"
        assert payload["flow_url"] == "http://localhost:8080/flow-api"
        assert payload["registry_url"] == "https://registry.example.com/registry-api"
        assert payload["session"] == {"registry.props": str(props.resolve())}

    def test_relative_session_path_survives_directory_change(self, config_dir, tmp_path, monkeypatch):
        first_dir = tmp_path / "first"
        other_dir = tmp_path / "other"
        first_dir.mkdir()
        other_dir.mkdir()
        (first_dir / "flow.toml").write_text('baseUrl = "https://flow.example.com"\n', encoding="utf-8")

        monkeypatch.chdir(first_dir)
        result = _invoke(config_dir, "--batch", "session", "set", "flow.props", "flow.toml")
        assert result.exit_code == 0
        assert json.loads(result.output) == {"flow.props": str((first_dir / "flow.toml").resolve())}

        monkeypatch.chdir(other_dir)
        result = _invoke(config_dir, "--batch", "context", "show")

        assert result.exit_code == 0
        assert json.loads(result.output)["flow_url"] == "https://flow.example.com/flow-api"

    def test_bad_properties_file_fails(self, config_dir, tmp_path):
        _invoke(config_dir, "session", "set", "flow.props", str(tmp_path / "missing.toml"))

        result = _invoke(config_dir, "context", "show")

        assert result.exit_code == 1
        assert "not found" in result.output


class TestConfigCommands:
    def test_set_url(self, config_dir):
        result = _invoke(config_dir, "config", "set-url", "registry", "https://registry.example.com")

        assert result.exit_code == 0
        shown = json.loads(_invoke(config_dir, "config", "show").output)
        assert shown["registry_url"] == "https://registry.example.com"

    def test_set_url_unknown_service(self, config_dir):
        result = _invoke(config_dir, "config", "set-url", "cache", "http://x")

        assert result.exit_code == 1
        assert "Unknown service" in result.output


def test_invalid_context_aborts_before_command(config_dir):
    with patch(
        "flowctl_cli.build_execution_context",
        side_effect=MissingContextFieldError("session"),
    ):
        result = _invoke(config_dir, "session", "keys")

    assert result.exit_code == 1
    assert "Invalid flowctl configuration" in result.output
    assert "'session'" in result.output
