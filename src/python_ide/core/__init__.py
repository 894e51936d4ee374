"""Core business logic components.

This module exports the main editor-core components:
- ErrorDetector / detect: Heuristic detection of likely Python mistakes
- lookup: Knowledge-base explanations per error kind
- MockExecutor / execute: Pattern-matched fake program runs
- EditorSession: Caller-side state and run gating
"""

from python_ide.core.error_detector import ErrorDetector, detect
from python_ide.core.executor import MockExecutor, execute
from python_ide.core.knowledge_base import KNOWLEDGE_BASE, kinds, lookup
from python_ide.core.session import EditorSession

__all__ = [
    "KNOWLEDGE_BASE",
    "EditorSession",
    "ErrorDetector",
    "MockExecutor",
    "detect",
    "execute",
    "kinds",
    "lookup",
]
