"""
pacicli - command line client for the Parallels Cloud Infrastructure API.
"""

from dotenv import load_dotenv

from pacicli.logging import (
    configure_logging,
    get_logger,
    is_debug_mode,
    log_entry_exit,
    set_debug_mode,
)
from pacicli.version import __version__

# Load environment variables (PACICLI_CONFIG, DEBUG) from a .env file
load_dotenv()

__all__ = [
    "__version__",
    "configure_logging",
    "get_logger",
    "is_debug_mode",
    "set_debug_mode",
    "log_entry_exit",
]
