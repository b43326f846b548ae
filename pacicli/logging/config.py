"""
Logging configuration for pacicli.

This module handles the centralized logging configuration including:
- Console output handler on stderr (stdout carries command output)
- Global debug flag mechanism, also switched on by the DEBUG env var
- Logger retrieval with consistent formatting
"""

import logging
import os
import sys
from typing import Any, Dict, Optional

# Global debug flag
_DEBUG_MODE = False

# Simplified format for console
_CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

# Detailed format used in debug mode
_DEBUG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(module)s.%(funcName)s:%(lineno)d | %(message)s"

# Color formatting for console output
_LOG_COLORS = {
    "DEBUG": "\033[94m",  # Blue
    "INFO": "\033[92m",  # Green
    "WARNING": "\033[93m",  # Yellow
    "ERROR": "\033[91m",  # Red
    "CRITICAL": "\033[91m\033[1m",  # Bold Red
    "RESET": "\033[0m",  # Reset
}


class ColorFormatter(logging.Formatter):
    """Formatter that adds colors to log levels for console output."""

    def __init__(self, fmt: Optional[str] = None, use_color: bool = True) -> None:
        super().__init__(fmt)
        self.use_color = use_color

    def format(self, record):
        if not self.use_color:
            return super().format(record)

        levelname = record.levelname
        if levelname in _LOG_COLORS:
            record = logging.makeLogRecord(record.__dict__)
            record.levelname = (
                f"{_LOG_COLORS[levelname]}{levelname}{_LOG_COLORS['RESET']}"
            )
        return super().format(record)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the specified name.

    Args:
        name: Logger name, typically __name__ of the calling module

    Returns:
        A configured logger instance
    """
    return logging.getLogger(name)


def set_debug_mode(enabled: bool) -> None:
    """
    Set the global debug mode flag.

    Args:
        enabled: True to enable debug mode, False to disable
    """
    global _DEBUG_MODE
    _DEBUG_MODE = enabled

    root_logger = logging.getLogger("pacicli")
    root_logger.setLevel(logging.DEBUG if enabled else logging.WARNING)


def is_debug_mode() -> bool:
    """
    Check if debug mode is currently enabled.

    Returns:
        True if debug mode is enabled, False otherwise
    """
    return _DEBUG_MODE


def debug_requested() -> bool:
    """Return True when the DEBUG environment variable is set to anything."""
    return os.environ.get("DEBUG", "") != ""


def configure_logging(
    console_level: int = logging.WARNING,
    config: Optional[Dict[str, Any]] = None,
) -> None:
    """
    Configure the central logging system with a console output on stderr.

    Args:
        console_level: Logging level for console output
        config: Additional configuration options (console_format, debug_mode, color)
    """
    if config is None:
        config = {}

    debug_mode = config.get("debug_mode", is_debug_mode() or debug_requested())
    if debug_mode:
        console_level = logging.DEBUG

    pacicli_logger = logging.getLogger("pacicli")

    # Clear any existing handlers to avoid duplicates if reconfigured
    for handler in pacicli_logger.handlers[:]:
        pacicli_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    default_format = _DEBUG_FORMAT if debug_mode else _CONSOLE_FORMAT
    console_format = config.get("console_format", default_format)
    use_color = config.get("color", sys.stderr.isatty())
    console_handler.setFormatter(ColorFormatter(console_format, use_color=use_color))
    pacicli_logger.addHandler(console_handler)
    pacicli_logger.propagate = False

    set_debug_mode(debug_mode)
    pacicli_logger.setLevel(min(console_level, pacicli_logger.level))

    if debug_mode:
        pacicli_logger.debug(
            f"pacicli logging initialized (console: {logging.getLevelName(console_level)})"
        )

