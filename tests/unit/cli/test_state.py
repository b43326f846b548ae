"""Tests for CLIState dataclass."""

from dataclasses import FrozenInstanceError

import pytest

from pacicli.cli.state import DEFAULT_CONFIG_PATH, CLIState, OutputFormat


class TestCLIStateDefaults:
    """Tests for CLIState default values."""

    def test_cli_state_defaults(self) -> None:
        state = CLIState()

        assert state.config_path == DEFAULT_CONFIG_PATH == "Pacifile"
        assert state.output_format is OutputFormat.TEXT
        assert state.debug is False

    def test_json_mode_follows_output_format(self) -> None:
        assert CLIState().json_mode is False
        assert CLIState(output_format=OutputFormat.JSON).json_mode is True
        assert CLIState(output_format=OutputFormat.TOML).json_mode is False


class TestCLIStateImmutability:
    """Tests for CLIState immutability (frozen dataclass)."""

    def test_cli_state_is_frozen(self) -> None:
        state = CLIState()

        with pytest.raises(FrozenInstanceError):
            state.config_path = "other"  # type: ignore[misc]


class TestOutputFormat:
    def test_values(self) -> None:
        assert [f.value for f in OutputFormat] == ["text", "json", "toml"]

    def test_from_string(self) -> None:
        assert OutputFormat("json") is OutputFormat.JSON
