"""Configuration loading and validation."""

from .loader import load_config
from .schema import (
    ExecutorConfig,
    FileLoggingConfig,
    IDEConfig,
    LoggingConfig,
    SessionConfig,
)

__all__ = [
    # Loader
    "load_config",
    # Root config
    "IDEConfig",
    # Section configs
    "ExecutorConfig",
    "SessionConfig",
    "LoggingConfig",
    "FileLoggingConfig",
]
