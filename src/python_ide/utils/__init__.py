"""Utility functions and helpers.

This module provides various utilities for Python IDE:
- async_helpers: Custom exceptions, simulated latency
- logging: Structured logging configuration
"""

from python_ide.utils.async_helpers import (
    ConfigError,
    ExecutionError,
    ExecutionInProgressError,
    IDEError,
    RunBlockedError,
    simulate_latency,
)
from python_ide.utils.logging import (
    LogEventNames,
    LogFormat,
    LogLevel,
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
    unbind_context,
)

__all__ = [
    # Exceptions
    "ConfigError",
    "ExecutionError",
    "ExecutionInProgressError",
    "IDEError",
    # Logging
    "LogEventNames",
    "LogFormat",
    "LogLevel",
    "RunBlockedError",
    "bind_context",
    "clear_context",
    "configure_logging",
    "get_logger",
    "simulate_latency",
    "unbind_context",
]
