"""
Exception hierarchy for pacicli.

Every error raised by the value codecs, the configuration loader and the
payload decoder derives from PaciError, so the command layer can report
any of them with a single except clause.
"""

from typing import Any, Optional


class PaciError(Exception):
    """
    Base exception class for all pacicli errors.

    Attributes:
        message: Human-readable error message
        error_code: Optional error code for reference and documentation
        details: Optional dictionary with additional error details
        suggestion: Optional suggestion text for how to fix the error
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        suggestion: Optional[str] = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.suggestion = suggestion
        super().__init__(message)


# --- Value Errors ---


class ValueFormatError(PaciError, ValueError):
    """
    Base class for wire text that cannot be converted into a typed value.

    Inherits from ValueError so that pydantic validators wrap it into a
    regular ValidationError when it is raised during model validation.
    """

    pass


class InvalidAddressError(ValueFormatError):
    """
    Exception raised when text is not a valid address or address/prefix pair.

    Examples:
        >>> raise InvalidAddressError(
        ...     message="Invalid IP address text: 'not-an-address'",
        ...     error_code="VALUE-InvalidAddress",
        ...     details={"text": "not-an-address"},
        ... )
    """

    pass


class InvalidTimestampError(ValueFormatError):
    """
    Exception raised when text matches none of the accepted timestamp dialects.

    Examples:
        >>> raise InvalidTimestampError(
        ...     message="Can't parse timestamp: 'yesterday'",
        ...     error_code="VALUE-InvalidTimestamp",
        ...     details={"text": "yesterday"},
        ... )
    """

    pass


# --- Configuration Errors ---


class ConfigurationError(PaciError):
    """
    Base class for configuration-related errors.

    The fix typically requires **editing the config file** or pointing
    --config at the right one.
    """

    pass


class ConfigurationFileError(ConfigurationError):
    """Exception raised when a configuration file cannot be read."""

    pass


class ConfigurationDecodeError(ConfigurationError):
    """Exception raised when a configuration file cannot be decoded."""

    pass


class InvalidConfigurationError(ConfigurationError):
    """Exception raised when a decoded configuration lacks required settings."""

    pass


# --- Payload Errors ---


class PayloadDecodeError(PaciError):
    """Exception raised when an API response body is not the expected XML."""

    pass


# --- Command Errors ---


class CommandUsageError(PaciError):
    """Exception raised when a command's options are missing or conflict."""

    pass
