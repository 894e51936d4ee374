"""Data models for editor run actions."""

from dataclasses import dataclass
from enum import Enum


class RunStatus(Enum):
    """Outcome of a run request."""

    COMPLETED = "completed"
    BLOCKED = "blocked"  # Detected errors gate the run
    BUSY = "busy"  # Another run is still in flight
    FAILED = "failed"


@dataclass(frozen=True)
class RunResult:
    """Result of a run request made through the editor session."""

    status: RunStatus
    output: str = ""
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        """Whether the program ran and produced output text."""
        return self.status is RunStatus.COMPLETED
