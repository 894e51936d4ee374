"""Editor session: the caller side of the detector and executor.

This module implements the EditorSession class that holds what an editor
front end tracks between events and enforces the run contract:
1. Every code change replaces the error list with a fresh detection pass
2. A run is refused while detected errors are outstanding
3. Only one run may be in flight at a time
4. Unexpected executor failures become console text prefixed "Error: "
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from python_ide.config.schema import SessionConfig
from python_ide.core.console import status_text
from python_ide.core.error_detector import ErrorDetector
from python_ide.core.executor import MockExecutor
from python_ide.models.session import RunResult, RunStatus
from python_ide.utils.async_helpers import (
    ExecutionError,
    ExecutionInProgressError,
    RunBlockedError,
)

if TYPE_CHECKING:
    from python_ide.interfaces.executor import CodeExecutor
    from python_ide.models.detection import DetectedError

log = structlog.get_logger()


class EditorSession:
    """State of one editor and its output console.

    Responsibilities:
    - Keep the current code and its error list in sync
    - Gate run requests on a clean detection pass
    - Guard against overlapping runs
    - Turn executor failures into console output

    Example:
        session = EditorSession()
        session.update_code('print("hi")')
        result = await session.run()
        print(result.output)
    """

    def __init__(
        self,
        detector: ErrorDetector | None = None,
        executor: CodeExecutor | None = None,
        config: SessionConfig | None = None,
    ) -> None:
        """Initialize the EditorSession.

        Args:
            detector: Error detector (defaults to a new ErrorDetector)
            executor: Program runner (defaults to a new MockExecutor)
            config: Session configuration
        """
        self._detector = detector or ErrorDetector()
        self._executor: CodeExecutor = executor or MockExecutor()
        self._config = config or SessionConfig()

        self._code = ""
        self._errors: list[DetectedError] = []
        self._output = ""
        self._is_running = False

        self.update_code(self._config.default_code)

    @property
    def code(self) -> str:
        return self._code

    @property
    def errors(self) -> tuple[DetectedError, ...]:
        """Errors from the latest detection pass."""
        return tuple(self._errors)

    @property
    def output(self) -> str:
        return self._output

    @property
    def is_running(self) -> bool:
        return self._is_running

    @property
    def has_errors(self) -> bool:
        return bool(self._errors)

    @property
    def status_text(self) -> str:
        """Status line: "Running...", "N errors found" or "Ready"."""
        return status_text(self._errors, self._is_running)

    def update_code(self, code: str) -> tuple[DetectedError, ...]:
        """Store new editor text and re-run detection.

        Args:
            code: Full editor text

        Returns:
            The replacement error list
        """
        self._code = code
        self._errors = self._detector.detect(code)
        log.debug("code_updated", error_count=len(self._errors))
        return self.errors

    def new_file(self) -> None:
        """Start over with the new-file template."""
        self._code = self._config.new_file_template
        self._output = ""
        self._errors = []
        log.info("new_file_created")

    def errors_on_line(self, line: int) -> tuple[DetectedError, ...]:
        """Errors reported for one 1-based line."""
        return tuple(error for error in self._errors if error.line == line)

    async def run(self) -> RunResult:
        """Run the current code if nothing gates it.

        Returns:
            RunResult describing what happened; never raises for executor failures
        """
        if self._config.gate_on_errors and self._errors:
            log.info("run_blocked", error_count=len(self._errors))
            return RunResult(status=RunStatus.BLOCKED)

        if self._is_running:
            log.warning("run_busy")
            return RunResult(status=RunStatus.BUSY)

        self._is_running = True
        self._output = ""

        try:
            output = await self._executor.execute(self._code)
        except Exception as e:
            message = str(e) or "Unknown error"
            self._output = f"Error: {message}"
            log.error("run_failed", error=message, exception_type=type(e).__name__)
            return RunResult(status=RunStatus.FAILED, output=self._output, error=message)
        finally:
            self._is_running = False

        self._output = output
        log.info("run_completed", output_length=len(output))
        return RunResult(status=RunStatus.COMPLETED, output=output)

    async def run_or_raise(self) -> str:
        """Strict variant of run().

        Returns:
            Program output

        Raises:
            RunBlockedError: If detected errors gate the run
            ExecutionInProgressError: If a run is already in flight
            ExecutionError: If the executor failed
        """
        result = await self.run()

        if result.status is RunStatus.BLOCKED:
            count = len(self._errors)
            raise RunBlockedError(f"{count} error(s) must be fixed before running", count)
        if result.status is RunStatus.BUSY:
            raise ExecutionInProgressError("A run is already in progress")
        if result.status is RunStatus.FAILED:
            raise ExecutionError(result.error or "Unknown error")

        return result.output
