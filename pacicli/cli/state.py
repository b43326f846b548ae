"""CLI state management.

Provides a typed, immutable state object that holds the global options.
The root Typer callback stores it in ``ctx.obj`` for commands to read.
"""

from dataclasses import dataclass
from enum import Enum


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"
    TOML = "toml"


DEFAULT_CONFIG_PATH = "Pacifile"


@dataclass(frozen=True)
class CLIState:
    """Immutable state object for CLI-wide configuration.

    Attributes:
        config_path: Configuration file holding the API URL, credentials
            and server settings. Empty means none was given.
        output_format: How command results are printed.
        debug: If True, log every API exchange to stderr.
    """

    config_path: str = DEFAULT_CONFIG_PATH
    output_format: OutputFormat = OutputFormat.TEXT
    debug: bool = False

    @property
    def json_mode(self) -> bool:
        return self.output_format is OutputFormat.JSON
