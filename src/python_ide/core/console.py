"""Plain-text rendering of detector and executor results.

These helpers produce the text the output console and the error tooltip
show: the list of detected errors, the status line, and the explanation
for one error kind.
"""

from __future__ import annotations

from collections.abc import Sequence

from python_ide.models.detection import DetectedError
from python_ide.models.knowledge import ErrorKindInfo

ERRORS_HEADER = "Errors detected in your code:"
OUTPUT_HEADER = "Output:"
IDLE_HINT = "Click 'Run Code' to execute your Python program"
RUNNING_HINT = "Executing your Python code..."


def status_text(errors: Sequence[DetectedError], is_running: bool = False) -> str:
    """Status line shown above the console."""
    if is_running:
        return "Running..."
    if errors:
        count = len(errors)
        return f"{count} error{'s' if count > 1 else ''} found"
    return "Ready"


def format_error_list(errors: Sequence[DetectedError]) -> str:
    """Render detected errors, one 'Line N: Kind: message' row each."""
    if not errors:
        return ""
    rows = [ERRORS_HEADER]
    rows.extend(error.signature for error in errors)
    return "\n".join(rows)


def format_output(output: str, is_running: bool = False) -> str:
    """Render program output, or a hint when there is none yet."""
    if output:
        return f"{OUTPUT_HEADER}\n{output}"
    return RUNNING_HINT if is_running else IDLE_HINT


def _indent(block: str) -> str:
    return "\n".join(f"    {line}" for line in block.split("\n"))


def format_tooltip(kind: str, info: ErrorKindInfo | None) -> str:
    """Render the explanation of an error kind.

    Args:
        kind: Error kind name, e.g. "KeyError"
        info: Knowledge-base entry, or None when the kind is unknown

    Returns:
        Multi-line explanation with before/after examples
    """
    if info is None:
        return f"No information available for {kind}"

    return "\n".join(
        [
            kind,
            f"Definition: {info.definition}",
            f"Common Cause: {info.cause}",
            f"Solution: {info.solution}",
            "Before (Error):",
            _indent(info.example_before),
            "After (Fixed):",
            _indent(info.example_after),
        ]
    )
