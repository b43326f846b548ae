"""Tests for the root Typer app: global options and error reporting."""

import json
import logging

import pytest

from pacicli.cli.app import app


class TestGlobalOptions:
    """Tests for options handled by the root callback."""

    def test_version(self, runner) -> None:
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert result.stdout.startswith("pacicli ")

    def test_help_lists_commands(self, runner) -> None:
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        for name in ("list", "create", "fwlist", "backup-list", "autoscale-history", "lbdetach"):
            assert name in result.output

    def test_short_names_are_hidden(self, runner) -> None:
        result = runner.invoke(app, ["--help"])

        assert " ls " not in result.output
        assert " fwls " not in result.output

    def test_command_help(self, runner) -> None:
        result = runner.invoke(app, ["history", "--help"])

        assert result.exit_code == 0
        assert "--num-records" in result.output
        assert "--from" in result.output

    def test_debug_flag_enables_debug_logging(self, cli, api) -> None:
        api.add("GET", "/ve", body=b"<ve-list/>")

        result = cli("--debug", "list")

        assert result.exit_code == 0
        assert logging.getLogger("pacicli").level == logging.DEBUG

    def test_default_logging_is_quiet(self, cli, api) -> None:
        api.add("GET", "/ve", body=b"<ve-list/>")

        result = cli("list")

        assert result.exit_code == 0
        assert logging.getLogger("pacicli").level == logging.WARNING
        assert "Request Method" not in result.output

    def test_config_from_environment(self, runner, api, config_path) -> None:
        api.add("GET", "/ve", body=b'<ve-list><ve-info id="1" name="web"/></ve-list>')

        result = runner.invoke(app, ["list"], env={"PACICLI_CONFIG": str(config_path)})

        assert result.exit_code == 0
        assert "web" in result.stdout


class TestConfigErrors:
    """Tests for reporting configuration problems."""

    def test_missing_config_file(self, runner, tmp_path) -> None:
        missing = tmp_path / "nope"

        result = runner.invoke(app, ["--config", str(missing), "list"])

        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "Cannot read configuration file" in result.output

    def test_empty_config_path(self, runner) -> None:
        result = runner.invoke(app, ["--config", "", "list"])

        assert result.exit_code == 1
        assert "Config path is empty" in result.output

    def test_incomplete_settings(self, runner, tmp_path) -> None:
        path = tmp_path / "Pacifile"
        path.write_text('base_url = "https://api.example.com"\n')

        result = runner.invoke(app, ["--config", str(path), "list"])

        assert result.exit_code == 1
        assert "base_url, username and password must be correctly specified" in result.output

    def test_json_error_output(self, runner, tmp_path) -> None:
        path = tmp_path / "Pacifile"
        path.write_text("")

        result = runner.invoke(app, ["--config", str(path), "--output", "json", "list"])

        assert result.exit_code == 1
        error = json.loads(result.stdout)
        assert error["status"] == "error"
        assert error["error_code"] == "CONF-MissingSettings"

    @pytest.mark.parametrize("fmt", ["JSON", "Json"])
    def test_output_format_is_case_insensitive(self, runner, api, config_path, fmt) -> None:
        api.add("GET", "/ve", body=b"<ve-list/>")

        result = runner.invoke(app, ["--config", str(config_path), "-o", fmt, "list"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {"ve_info": []}
