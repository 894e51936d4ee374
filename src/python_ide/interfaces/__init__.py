"""Protocol definitions for pluggable components."""

from .executor import CodeExecutor

__all__ = ["CodeExecutor"]
