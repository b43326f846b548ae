"""
Helper methods for common logging patterns.

This module provides the entry/exit decorator used around I/O-bound
operations such as configuration loading.
"""

import functools
import logging
import time
from typing import Any, Callable, Optional, TypeVar, cast

from pacicli.logging.config import get_logger

# Type variables for function decorators
F = TypeVar("F", bound=Callable[..., Any])


def _short_repr(value: Any) -> Any:
    if isinstance(value, (int, float, str, bool)):
        return value
    result = repr(value)
    # Truncate very long representations
    if len(result) > 1000:
        result = result[:997] + "..."
    return result


def log_entry_exit(
    logger: Optional[logging.Logger] = None,
    log_args: bool = False,
    log_result: bool = False,
    entry_level: int = logging.DEBUG,
    exit_level: int = logging.DEBUG,
    error_level: int = logging.DEBUG,
) -> Callable[[F], F]:
    """
    Decorator to log function entry and exit.

    Errors are logged at error_level and re-raised unchanged; the command
    layer decides how to report them.

    Args:
        logger: Logger to use (if None, get logger based on module name)
        log_args: Whether to log function arguments
        log_result: Whether to log function return value
        entry_level: Log level for entry messages
        exit_level: Log level for exit messages
        error_level: Log level for error messages

    Returns:
        Decorated function with entry/exit logging
    """

    def decorator(func: F) -> F:
        log = logger or get_logger(func.__module__)

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            func_name = func.__qualname__

            entry_msg = f"Entering {func_name}"
            if log_args and (args or kwargs):
                arg_strs = [f"{_short_repr(arg)}" for arg in args]
                arg_strs.extend(
                    f"{name}={_short_repr(value)}" for name, value in kwargs.items()
                )
                entry_msg += f" with args: {', '.join(arg_strs)}"
            log.log(entry_level, entry_msg)

            start_time = time.time()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                elapsed = time.time() - start_time
                log.log(error_level, f"Error in {func_name} after {elapsed:.3f}s: {e}")
                raise

            elapsed = time.time() - start_time
            exit_msg = f"Exiting {func_name} after {elapsed:.3f}s"
            if log_result:
                exit_msg += f" with result: {_short_repr(result)}"
            log.log(exit_level, exit_msg)
            return result

        return cast(F, wrapper)

    return decorator
