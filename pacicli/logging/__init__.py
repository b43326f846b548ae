"""
Logging system for pacicli.

This module provides a centralized logging configuration and helper
decorators for common logging patterns.
"""

from pacicli.logging.config import (
    configure_logging,
    get_logger,
    is_debug_mode,
    set_debug_mode,
)
from pacicli.logging.helpers import log_entry_exit

__all__ = [
    # Configuration
    "configure_logging",
    "get_logger",
    "set_debug_mode",
    "is_debug_mode",
    # Helper methods
    "log_entry_exit",
]
