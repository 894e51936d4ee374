"""Async utility functions and custom exceptions.

This module provides:
- Custom exceptions for the editor core
- Simulated latency for mock operations

See DESIGN.md for the error handling strategy.
"""

from __future__ import annotations

import asyncio
import random
from collections.abc import Callable

import structlog

log = structlog.get_logger()


# =============================================================================
# Custom Exceptions
# =============================================================================


class IDEError(Exception):
    """Base exception for all editor core errors."""


class ExecutionError(IDEError):
    """Running the submitted program failed unexpectedly."""


class RunBlockedError(IDEError):
    """A run was requested while detected errors are outstanding.

    Attributes:
        error_count: Number of detected errors gating the run.
    """

    def __init__(self, message: str, error_count: int = 0) -> None:
        super().__init__(message)
        self.error_count = error_count


class ExecutionInProgressError(IDEError):
    """A run was requested while another run is still in flight."""


class ConfigError(IDEError):
    """Configuration is inconsistent."""


# =============================================================================
# Simulated Latency
# =============================================================================


async def simulate_latency(
    min_delay: float,
    max_delay: float,
    rng: Callable[[float, float], float] = random.uniform,
) -> float:
    """Sleep for a uniformly random duration.

    Args:
        min_delay: Lower bound in seconds.
        max_delay: Upper bound in seconds.
        rng: Source of the duration, called as ``rng(min_delay, max_delay)``.

    Returns:
        The number of seconds slept.

    Raises:
        ValueError: If the bounds are negative or inverted.
    """
    if min_delay < 0 or max_delay < min_delay:
        msg = f"Invalid delay bounds: {min_delay}..{max_delay}"
        raise ValueError(msg)

    delay = rng(min_delay, max_delay)
    log.debug("simulating_latency", delay=delay)
    await asyncio.sleep(delay)
    return delay
