"""
Configuration management for pacicli.
"""

from pacicli.config.decoders import JsonDecoder, TomlDecoder, sniff_decoder
from pacicli.config.loader import load_config, select_decoder
from pacicli.config.models import PaciConfig, ServerSettings

__all__ = [
    "load_config",
    "select_decoder",
    "sniff_decoder",
    "JsonDecoder",
    "TomlDecoder",
    "PaciConfig",
    "ServerSettings",
]
