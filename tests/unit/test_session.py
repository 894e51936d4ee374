"""Tests for EditorSession functionality."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from python_ide.config.schema import DEFAULT_CODE, SessionConfig
from python_ide.core.executor import MockExecutor
from python_ide.core.session import EditorSession
from python_ide.models.session import RunStatus
from python_ide.utils.async_helpers import (
    ExecutionError,
    ExecutionInProgressError,
    RunBlockedError,
)


@pytest.fixture
def mock_executor() -> AsyncMock:
    """Create a mock executor."""
    executor = AsyncMock()
    executor.execute.return_value = "program output"
    return executor


@pytest.fixture
def session(mock_executor: AsyncMock, blank_session_config: SessionConfig) -> EditorSession:
    """Create an EditorSession with an empty editor."""
    return EditorSession(executor=mock_executor, config=blank_session_config)


class TestEditing:
    """Tests for code updates and detection."""

    def test_starts_with_default_code(self) -> None:
        """Test that a default session opens the welcome program."""
        session = EditorSession()
        assert session.code == DEFAULT_CODE

    def test_blank_start(self, session: EditorSession) -> None:
        """Test the initial state of an empty editor."""
        assert session.code == ""
        assert session.errors == ()
        assert session.output == ""
        assert session.is_running is False
        assert session.status_text == "Ready"

    def test_update_code_detects(self, session: EditorSession) -> None:
        """Test that updating code runs a detection pass."""
        errors = session.update_code("x = 10 / 0")

        assert session.code == "x = 10 / 0"
        assert [error.kind for error in errors] == ["NameError", "ZeroDivisionError"]
        assert session.errors == errors
        assert session.has_errors is True
        assert session.status_text == "2 errors found"

    def test_update_code_replaces_errors(self, session: EditorSession) -> None:
        """Test that the error list is replaced, not merged."""
        session.update_code("x = 10 / 0")
        session.update_code('print("fixed")')

        assert session.errors == ()
        assert session.status_text == "Ready"

    def test_single_error_status(self, session: EditorSession) -> None:
        """Test singular wording in the status line."""
        session.update_code("print((1)")
        assert session.status_text == "1 error found"

    def test_errors_on_line(self, session: EditorSession) -> None:
        """Test filtering errors for one editor line."""
        session.update_code("print('ok')\nprint(1 / 0)")

        assert session.errors_on_line(1) == ()
        assert [error.kind for error in session.errors_on_line(2)] == ["ZeroDivisionError"]

    def test_new_file(self, session: EditorSession) -> None:
        """Test that a new file resets code, output and errors."""
        session.update_code("x = 10 / 0")
        session.new_file()

        assert session.code == "# New Python file\n\n"
        assert session.errors == ()
        assert session.output == ""

    def test_custom_new_file_template(self, mock_executor: AsyncMock) -> None:
        """Test a configured new-file template."""
        config = SessionConfig(default_code="", new_file_template="# scratch\n")
        session = EditorSession(executor=mock_executor, config=config)
        session.new_file()

        assert session.code == "# scratch\n"


class TestRun:
    """Tests for gated runs."""

    @pytest.mark.asyncio
    async def test_run_clean_code(self, session: EditorSession, mock_executor: AsyncMock) -> None:
        """Test a run of code without detected errors."""
        session.update_code('print("hi")')
        result = await session.run()

        assert result.status is RunStatus.COMPLETED
        assert result.succeeded is True
        assert result.output == "program output"
        assert session.output == "program output"
        assert session.is_running is False
        mock_executor.execute.assert_awaited_once_with('print("hi")')

    @pytest.mark.asyncio
    async def test_run_blocked_by_errors(
        self, session: EditorSession, mock_executor: AsyncMock
    ) -> None:
        """Test that detected errors gate the run."""
        session.update_code("x = 10 / 0")
        result = await session.run()

        assert result.status is RunStatus.BLOCKED
        assert result.output == ""
        mock_executor.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_gating_disabled(self, mock_executor: AsyncMock) -> None:
        """Test that gating can be switched off."""
        config = SessionConfig(default_code="", gate_on_errors=False)
        session = EditorSession(executor=mock_executor, config=config)
        session.update_code("x = 10 / 0")

        result = await session.run()

        assert result.status is RunStatus.COMPLETED
        mock_executor.execute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_executor_failure(self, session: EditorSession, mock_executor: AsyncMock) -> None:
        """Test that executor failures become console text."""
        mock_executor.execute.side_effect = RuntimeError("boom")
        session.update_code('print("hi")')

        result = await session.run()

        assert result.status is RunStatus.FAILED
        assert result.error == "boom"
        assert session.output == "Error: boom"
        assert session.is_running is False

    @pytest.mark.asyncio
    async def test_executor_failure_without_message(
        self, session: EditorSession, mock_executor: AsyncMock
    ) -> None:
        """Test the fallback text for an exception without a message."""
        mock_executor.execute.side_effect = RuntimeError()
        session.update_code('print("hi")')

        result = await session.run()

        assert session.output == "Error: Unknown error"
        assert result.error == "Unknown error"

    @pytest.mark.asyncio
    async def test_overlapping_run_refused(self, blank_session_config: SessionConfig) -> None:
        """Test that a second run while one is in flight is refused."""
        started = asyncio.Event()
        release = asyncio.Event()

        async def slow_execute(source: str) -> str:
            started.set()
            await release.wait()
            return "done"

        executor = MagicMock()
        executor.execute = slow_execute
        session = EditorSession(executor=executor, config=blank_session_config)
        session.update_code('print("hi")')

        task = asyncio.create_task(session.run())
        await started.wait()

        assert session.is_running is True
        assert session.status_text == "Running..."
        second = await session.run()
        assert second.status is RunStatus.BUSY

        release.set()
        first = await task

        assert first.status is RunStatus.COMPLETED
        assert session.output == "done"
        assert session.is_running is False

    @pytest.mark.asyncio
    async def test_run_with_mock_executor(
        self, instant_executor: MockExecutor, blank_session_config: SessionConfig
    ) -> None:
        """Test the session end to end with the bundled executor."""
        session = EditorSession(executor=instant_executor, config=blank_session_config)
        session.update_code('print("Hello, World!")')

        result = await session.run()

        assert result.output == "Hello, World!"


class TestRunOrRaise:
    """Tests for the strict run variant."""

    @pytest.mark.asyncio
    async def test_returns_output(self, session: EditorSession) -> None:
        """Test the successful path."""
        session.update_code('print("hi")')
        assert await session.run_or_raise() == "program output"

    @pytest.mark.asyncio
    async def test_raises_when_blocked(self, session: EditorSession) -> None:
        """Test that gating raises RunBlockedError."""
        session.update_code("x = 10 / 0")

        with pytest.raises(RunBlockedError) as exc_info:
            await session.run_or_raise()

        assert exc_info.value.error_count == 2

    @pytest.mark.asyncio
    async def test_raises_on_failure(
        self, session: EditorSession, mock_executor: AsyncMock
    ) -> None:
        """Test that executor failures raise ExecutionError."""
        mock_executor.execute.side_effect = RuntimeError("boom")
        session.update_code('print("hi")')

        with pytest.raises(ExecutionError, match="boom"):
            await session.run_or_raise()

    @pytest.mark.asyncio
    async def test_raises_when_busy(self, blank_session_config: SessionConfig) -> None:
        """Test that an overlapping strict run raises."""
        release = asyncio.Event()

        async def slow_execute(source: str) -> str:
            await release.wait()
            return "done"

        executor = MagicMock()
        executor.execute = slow_execute
        session = EditorSession(executor=executor, config=blank_session_config)
        session.update_code('print("hi")')

        task = asyncio.create_task(session.run())
        await asyncio.sleep(0)

        with pytest.raises(ExecutionInProgressError):
            await session.run_or_raise()

        release.set()
        await task
