"""Abstract interface for program runners."""

from typing import Protocol


class CodeExecutor(Protocol):
    """Abstract interface for anything that can run editor source.

    This protocol defines the contract the editor session relies on. The
    bundled MockExecutor implements it; a real runtime could too.
    """

    async def execute(self, source: str) -> str:
        """
        Run the source and return its textual output.

        Callers only invoke this when detection found no errors.

        Args:
            source: Full editor text

        Returns:
            Program output as text

        Raises:
            Exception: Any unexpected failure propagates to the caller
        """
        ...
