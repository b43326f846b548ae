"""
Error handling framework for pacicli.

This module exposes the exception hierarchy shared by the value codecs,
the configuration loader, the XML binding and the command layer.
"""

from pacicli.errors.exceptions import (
    CommandUsageError,
    ConfigurationDecodeError,
    ConfigurationError,
    ConfigurationFileError,
    InvalidAddressError,
    InvalidConfigurationError,
    InvalidTimestampError,
    PaciError,
    PayloadDecodeError,
    ValueFormatError,
)

__all__ = [
    # Base exception
    "PaciError",
    # Value errors
    "ValueFormatError",
    "InvalidAddressError",
    "InvalidTimestampError",
    # Configuration errors
    "ConfigurationError",
    "ConfigurationFileError",
    "ConfigurationDecodeError",
    "InvalidConfigurationError",
    # Command errors
    "CommandUsageError",
    # Payload errors
    "PayloadDecodeError",
]
