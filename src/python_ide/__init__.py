"""Python IDE teaching core: heuristic error detection, explanations and mock runs."""

from python_ide.core import EditorSession, detect, execute, lookup
from python_ide.models import DetectedError, ErrorKindInfo

__all__ = [
    "DetectedError",
    "EditorSession",
    "ErrorKindInfo",
    "detect",
    "execute",
    "lookup",
]
