"""Data models for heuristic error detection."""

from dataclasses import dataclass

from .knowledge import ErrorKindInfo


@dataclass(frozen=True)
class DetectedError:
    """A suspected problem at a specific source line."""

    kind: str  # e.g., "SyntaxError"
    message: str  # e.g., "Missing colon"
    line: int  # 1-based
    info: ErrorKindInfo | None = None  # Shared knowledge-base entry

    @property
    def has_info(self) -> bool:
        """Whether an explanation is available for this error kind."""
        return self.info is not None

    @property
    def signature(self) -> str:
        """
        Console form of the error.

        Format: 'Line N: Kind: message'
        """
        return f"Line {self.line}: {self.kind}: {self.message}"


@dataclass(frozen=True)
class SourceBuffer:
    """Editor text split into lines, numbered from 1."""

    text: str

    @property
    def lines(self) -> tuple[str, ...]:
        """Lines in visual order."""
        return tuple(self.text.split("\n"))

    @property
    def line_count(self) -> int:
        """Number of lines in the buffer."""
        return len(self.lines)

    def line(self, number: int) -> str:
        """Return the text of a 1-based line.

        Raises:
            IndexError: If the line number is outside the buffer
        """
        if number < 1 or number > self.line_count:
            raise IndexError(f"Line {number} outside buffer of {self.line_count} lines")
        return self.lines[number - 1]
