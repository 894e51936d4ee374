"""Data models for the error knowledge base."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ErrorKindInfo:
    """Explanation of one Python error kind, shown in the editor tooltip."""

    definition: str
    cause: str
    solution: str
    example_before: str  # Code that triggers the error
    example_after: str  # The same code, fixed
