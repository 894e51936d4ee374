"""Data models and transfer objects."""

from .detection import DetectedError, SourceBuffer
from .knowledge import ErrorKindInfo
from .session import RunResult, RunStatus

__all__ = [
    # Knowledge base models
    "ErrorKindInfo",
    # Detection models
    "DetectedError",
    "SourceBuffer",
    # Session models
    "RunResult",
    "RunStatus",
]
