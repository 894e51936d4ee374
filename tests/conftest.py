"""Shared test fixtures for Python IDE."""

from pathlib import Path

import pytest

from python_ide.config.schema import ExecutorConfig, SessionConfig
from python_ide.core.error_detector import ErrorDetector
from python_ide.core.executor import MockExecutor


@pytest.fixture
def detector() -> ErrorDetector:
    """Create an ErrorDetector instance."""
    return ErrorDetector()


@pytest.fixture
def instant_config() -> ExecutorConfig:
    """Executor configuration without any simulated delay."""
    return ExecutorConfig(min_delay=0.0, max_delay=0.0)


@pytest.fixture
def instant_executor(instant_config: ExecutorConfig) -> MockExecutor:
    """A MockExecutor that returns immediately."""
    return MockExecutor(instant_config)


@pytest.fixture
def blank_session_config() -> SessionConfig:
    """Session configuration starting from an empty editor."""
    return SessionConfig(default_code="")


@pytest.fixture
def clean_source() -> str:
    """Source with no detectable problems."""
    return 'print("Hello, World!")\n'


@pytest.fixture
def broken_source() -> str:
    """Source with a missing colon and a missing indent."""
    return "if x > 5\n    print(x)\ndef hello():\nprint('hi')\n"


@pytest.fixture
def source_file(tmp_path: Path, clean_source: str) -> Path:
    """A clean source file on disk."""
    path = tmp_path / "hello.py"
    path.write_text(clean_source)
    return path


@pytest.fixture
def broken_file(tmp_path: Path, broken_source: str) -> Path:
    """A source file with detectable problems on disk."""
    path = tmp_path / "broken.py"
    path.write_text(broken_source)
    return path
