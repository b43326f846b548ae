"""Tests for the pacicli exception hierarchy."""

import pytest

from pacicli.errors import (
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


class TestPaciError:
    def test_attributes(self):
        error = PaciError(
            message="Something failed",
            error_code="TEST-Code",
            details={"key": "value"},
            suggestion="Try again",
        )

        assert str(error) == "Something failed"
        assert error.message == "Something failed"
        assert error.error_code == "TEST-Code"
        assert error.details == {"key": "value"}
        assert error.suggestion == "Try again"

    def test_defaults(self):
        error = PaciError("Something failed")

        assert error.error_code is None
        assert error.details == {}
        assert error.suggestion is None


class TestHierarchy:
    @pytest.mark.parametrize(
        "error_type",
        [
            ValueFormatError,
            InvalidAddressError,
            InvalidTimestampError,
            ConfigurationError,
            ConfigurationFileError,
            ConfigurationDecodeError,
            InvalidConfigurationError,
            PayloadDecodeError,
            CommandUsageError,
        ],
    )
    def test_all_errors_are_paci_errors(self, error_type):
        assert issubclass(error_type, PaciError)

    @pytest.mark.parametrize("error_type", [InvalidAddressError, InvalidTimestampError])
    def test_value_errors_are_value_errors(self, error_type):
        assert issubclass(error_type, ValueError)

    @pytest.mark.parametrize(
        "error_type",
        [ConfigurationFileError, ConfigurationDecodeError, InvalidConfigurationError],
    )
    def test_configuration_errors(self, error_type):
        assert issubclass(error_type, ConfigurationError)
