"""API client module.

Provides the HTTP client used by every command, its response value and
the error hierarchy for transport and status failures.
"""

from pacicli.cli.client.core import (
    ClientConfig,
    Response,
    expect_status,
    parse_response,
)
from pacicli.cli.client.errors import (
    APIError,
    CLIClientError,
    ConnectionError,
    TimeoutError,
)
from pacicli.cli.client.sync_client import PaciClient

__all__ = [
    "PaciClient",
    "ClientConfig",
    "Response",
    "expect_status",
    "parse_response",
    "CLIClientError",
    "ConnectionError",
    "TimeoutError",
    "APIError",
]
