"""Tests for the JSON/TOML configuration loader."""

from pathlib import Path

import pytest
from pydantic import BaseModel

from pacicli.config import (
    JsonDecoder,
    PaciConfig,
    TomlDecoder,
    load_config,
    select_decoder,
    sniff_decoder,
)
from pacicli.errors import (
    ConfigurationDecodeError,
    ConfigurationError,
    ConfigurationFileError,
)
from pacicli.models import CreateVe, Firewall


class Endpoint(BaseModel):
    base_url: str


JSON_CONFIG = """
{
    "base_url": "https://api.example.com/paci/v1.0",
    "username": "user@example.com",
    "password": "secret",
    "servers": {
        "web": {
            "spec": {"hostname": "web.example", "ram_size": 512, "cpu": {"number": 2}},
            "firewall": {"rule": [{"name": "ssh", "protocol": "TCP", "local_port": 22,
                                   "remote_net": ["10.0.0.0/8"]}]}
        }
    }
}
"""

TOML_CONFIG = """
base_url = "https://api.example.com/paci/v1.0"
username = "user@example.com"
password = "secret"

[servers.web.spec]
hostname = "web.example"
ram_size = 512

[[servers.web.autoscale_rule]]
metric = "CPU"
"""


def write(tmp_path: Path, name: str, content: str) -> Path:
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return path


class TestSniffDecoder:
    """Tests for picking a decoder from the content."""

    def test_brace_means_json(self):
        assert isinstance(sniff_decoder(b'{"a": 1}'), JsonDecoder)

    def test_leading_whitespace_is_ignored(self):
        assert isinstance(sniff_decoder(b'\n\t  {"a": 1}'), JsonDecoder)

    def test_anything_else_is_toml(self):
        assert isinstance(sniff_decoder(b'a = 1'), TomlDecoder)
        assert isinstance(sniff_decoder(b'[section]\na = 1'), TomlDecoder)


class TestSelectDecoder:
    """Tests for extension-first decoder selection."""

    def test_json_extension(self):
        assert isinstance(select_decoder(Path("cfg.json"), b"a = 1"), JsonDecoder)

    def test_toml_extension(self):
        assert isinstance(select_decoder(Path("cfg.toml"), b"{}"), TomlDecoder)

    def test_extension_is_case_insensitive(self):
        assert isinstance(select_decoder(Path("cfg.JSON"), b"a = 1"), JsonDecoder)

    def test_other_extension_is_sniffed(self):
        assert isinstance(select_decoder(Path("Pacifile"), b"{}"), JsonDecoder)
        assert isinstance(select_decoder(Path("cfg.conf"), b"a = 1"), TomlDecoder)


class TestLoadConfig:
    """Tests for load_config."""

    def test_json_without_extension(self, tmp_path):
        config = load_config(write(tmp_path, "Pacifile", JSON_CONFIG), PaciConfig)

        assert config.base_url == "https://api.example.com/paci/v1.0"
        assert config.username == "user@example.com"
        web = config.servers["web"]
        assert web.spec.ram_size == 512
        assert web.spec.cpu.number == 2
        assert web.firewall.rule[0].remote_net[0].to_text() == "10.0.0.0/8"

    def test_toml_without_extension(self, tmp_path):
        config = load_config(write(tmp_path, "Pacifile", TOML_CONFIG), PaciConfig)

        assert config.password == "secret"
        assert config.servers["web"].spec.hostname == "web.example"
        assert config.servers["web"].autoscale_rule[0].metric == "CPU"
        assert config.servers["web"].firewall.rule == []

    def test_accepts_str_path(self, tmp_path):
        path = write(tmp_path, "cfg.toml", TOML_CONFIG)

        assert load_config(str(path), PaciConfig).username == "user@example.com"

    def test_record_type_setting_file(self, tmp_path):
        path = write(tmp_path, "web.toml", 'hostname = "web.example"\n[cpu]\nnumber = 4\n')

        ve = load_config(path, CreateVe)

        assert isinstance(ve, CreateVe)
        assert ve.cpu.number == 4

    def test_empty_file_gives_defaults(self, tmp_path):
        config = load_config(write(tmp_path, "Pacifile", "  \n"), PaciConfig)

        assert config == PaciConfig()
        assert config.missing_settings() == ["base_url", "username", "password"]

    def test_empty_file_without_defaults_is_decode_error(self, tmp_path):
        """A model with required fields cannot be built from an empty file."""
        path = write(tmp_path, "Pacifile", "")

        with pytest.raises(ConfigurationDecodeError) as exc_info:
            load_config(path, Endpoint)

        assert exc_info.value.error_code == "CONF-ValidationFailed"
        assert exc_info.value.details["path"] == str(path)

    def test_unknown_keys_are_ignored(self, tmp_path):
        config = load_config(write(tmp_path, "cfg.json", '{"colour": "blue"}'), PaciConfig)

        assert config.base_url == ""

    def test_missing_file(self, tmp_path):
        path = tmp_path / "missing.toml"

        with pytest.raises(ConfigurationFileError) as exc_info:
            load_config(path, PaciConfig)

        assert exc_info.value.error_code == "CONF-FileNotReadable"
        assert exc_info.value.details["path"] == str(path)

    def test_invalid_json(self, tmp_path):
        path = write(tmp_path, "Pacifile", '{"base_url": ')

        with pytest.raises(ConfigurationDecodeError) as exc_info:
            load_config(path, PaciConfig)

        assert exc_info.value.error_code == "CONF-InvalidJson"
        assert exc_info.value.details["path"] == str(path)

    def test_json_extension_with_toml_content_fails(self, tmp_path):
        """The extension wins over the content."""
        with pytest.raises(ConfigurationDecodeError) as exc_info:
            load_config(write(tmp_path, "cfg.json", TOML_CONFIG), PaciConfig)

        assert exc_info.value.error_code == "CONF-InvalidJson"

    def test_json_array_is_rejected(self, tmp_path):
        with pytest.raises(ConfigurationDecodeError):
            load_config(write(tmp_path, "cfg.json", "[1, 2]"), PaciConfig)

    def test_invalid_toml(self, tmp_path):
        with pytest.raises(ConfigurationDecodeError) as exc_info:
            load_config(write(tmp_path, "Pacifile", "base_url = "), PaciConfig)

        assert exc_info.value.error_code == "CONF-InvalidToml"

    def test_values_that_do_not_fit_the_model(self, tmp_path):
        path = write(tmp_path, "fw.json", '{"rule": [{"remote_net": ["bogus"]}]}')

        with pytest.raises(ConfigurationDecodeError) as exc_info:
            load_config(path, Firewall)

        assert exc_info.value.error_code == "CONF-ValidationFailed"
        assert exc_info.value.details["validation_errors"]

    def test_errors_share_a_base_class(self, tmp_path):
        with pytest.raises(ConfigurationError):
            load_config(tmp_path / "nope", PaciConfig)


class TestPaciConfig:
    def test_missing_settings(self):
        config = PaciConfig(base_url="https://api.example.com", password="x")

        assert config.missing_settings() == ["username"]

    def test_complete_settings(self):
        config = PaciConfig(base_url="https://api.example.com", username="u", password="p")

        assert config.missing_settings() == []
