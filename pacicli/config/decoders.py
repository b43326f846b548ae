"""
Structured-text decoders for setting files.

Each decoder turns the raw bytes of a file into a plain mapping; the
loader validates that mapping against the caller's model.
"""

import json
from typing import Any, Protocol

import tomli

from pacicli.errors import ConfigurationDecodeError


class Decoder(Protocol):
    name: str

    def decode(self, data: bytes) -> dict[str, Any]: ...


class JsonDecoder:
    name = "json"

    def decode(self, data: bytes) -> dict[str, Any]:
        try:
            decoded = json.loads(data)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ConfigurationDecodeError(
                message=f"Invalid JSON: {e}",
                error_code="CONF-InvalidJson",
                details={"decoder": self.name, "error": str(e)},
            ) from e
        if not isinstance(decoded, dict):
            raise ConfigurationDecodeError(
                message=f"Invalid JSON: expected an object, got {type(decoded).__name__}",
                error_code="CONF-InvalidJson",
                details={"decoder": self.name},
            )
        return decoded


class TomlDecoder:
    name = "toml"

    def decode(self, data: bytes) -> dict[str, Any]:
        try:
            return tomli.loads(data.decode("utf-8"))
        except (tomli.TOMLDecodeError, UnicodeDecodeError) as e:
            raise ConfigurationDecodeError(
                message=f"Invalid TOML: {e}",
                error_code="CONF-InvalidToml",
                details={"decoder": self.name, "error": str(e)},
            ) from e


DECODERS_BY_EXTENSION: dict[str, Decoder] = {
    ".json": JsonDecoder(),
    ".toml": TomlDecoder(),
}


def sniff_decoder(data: bytes) -> Decoder:
    """Pick a decoder from the first non-whitespace byte: ``{`` means JSON."""
    stripped = data.lstrip()
    if stripped[:1] == b"{":
        return DECODERS_BY_EXTENSION[".json"]
    return DECODERS_BY_EXTENSION[".toml"]
