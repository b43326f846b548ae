"""API session setup for commands.

Loads the configuration named by --config, checks that it can reach the
API and opens a PaciClient for the duration of one command. The
``api_command`` decorator reports any pacicli or client error the way the
output format asks and exits with status 1.
"""

import functools
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, TypeVar, cast

import typer

from pacicli.cli.client import CLIClientError, PaciClient
from pacicli.cli.output import print_error
from pacicli.cli.state import CLIState
from pacicli.config import PaciConfig, load_config
from pacicli.errors import InvalidConfigurationError, PaciError
from pacicli.logging import get_logger

logger = get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


@dataclass(frozen=True)
class Session:
    """Everything a command needs to talk to the API."""

    state: CLIState
    config: PaciConfig
    client: PaciClient


def load_settings(state: CLIState) -> PaciConfig:
    """Load and check the configuration file named by --config.

    Raises:
        InvalidConfigurationError: If no path is given or the connection
            settings are incomplete
        ConfigurationFileError: If the file cannot be read
        ConfigurationDecodeError: If the file cannot be decoded
    """
    if not state.config_path:
        raise InvalidConfigurationError(
            message="Config path is empty. It must be specified to use this command.",
            error_code="CONF-PathEmpty",
            suggestion="Pass --config or set PACICLI_CONFIG",
        )

    config = load_config(state.config_path, PaciConfig)
    missing = config.missing_settings()
    if missing:
        raise InvalidConfigurationError(
            message=(
                "Invalid config data. base_url, username and password must be "
                "correctly specified in a config file"
            ),
            error_code="CONF-MissingSettings",
            details={"path": state.config_path, "missing": missing},
        )
    return config


def create_client(config: PaciConfig) -> PaciClient:
    return PaciClient(config.base_url, config.username, config.password)


@contextmanager
def api_session(ctx: typer.Context) -> Iterator[Session]:
    """Open an API session from the global options in ``ctx.obj``."""
    state: CLIState = ctx.obj
    config = load_settings(state)
    with create_client(config) as client:
        yield Session(state=state, config=config, client=client)


def api_command(func: F) -> F:
    """Decorator turning pacicli and client errors into a clean exit.

    The wrapped command must take the Typer context as its first argument.
    """

    @functools.wraps(func)
    def wrapper(ctx: typer.Context, *args: Any, **kwargs: Any) -> Any:
        state: CLIState = ctx.obj
        logger.debug(f"Running command {ctx.info_name}")
        try:
            return func(ctx, *args, **kwargs)
        except (PaciError, CLIClientError) as e:
            logger.debug(f"Command {ctx.info_name} failed: {e!r}")
            print_error(e.message, state, e)
            raise typer.Exit(1) from None

    return cast(F, wrapper)


def backup_id(text: str) -> str:
    """Wrap a backup ID in braces unless it already has them."""
    if not text.startswith("{"):
        text = "{" + text
    if not text.endswith("}"):
        text += "}"
    return text
