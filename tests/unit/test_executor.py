"""Tests for MockExecutor functionality."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from python_ide.config.schema import ExecutorConfig
from python_ide.core.executor import (
    CALCULATION_ERROR,
    NO_OUTPUT,
    MockExecutor,
    execute,
    format_number,
)


@pytest.fixture
def executor() -> MockExecutor:
    """Create a MockExecutor with default settings."""
    return MockExecutor()


class TestRenderOutput:
    """Tests for the pattern-matched output."""

    def test_print_double_quoted(self, executor: MockExecutor) -> None:
        """Test a double-quoted literal."""
        assert executor.render_output('print("Hello, World!")') == "Hello, World!"

    def test_print_single_quoted(self, executor: MockExecutor) -> None:
        """Test a single-quoted literal."""
        assert executor.render_output("print('hi there')") == "hi there"

    def test_no_print(self, executor: MockExecutor) -> None:
        """Test source without any print call."""
        assert executor.render_output("x = 1\n") == NO_OUTPUT

    def test_empty_source(self, executor: MockExecutor) -> None:
        """Test that an empty program reports no output."""
        assert executor.render_output("") == NO_OUTPUT

    def test_multiple_lines_joined(self, executor: MockExecutor) -> None:
        """Test that each print contributes one line."""
        source = "print('a')\n\n    print(\"b\")\nx = 2\nprint('c')"
        assert executor.render_output(source) == "a\nb\nc"

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("print(2 + 3)", "5"),
            ("print(3 - 10)", "-7"),
            ("print(7 * 6)", "42"),
            ("print(10 / 4)", "2.5"),
            ("print(10 / 2)", "5"),
            ("print(1/3)", "0.3333333333333333"),
        ],
    )
    def test_arithmetic(self, executor: MockExecutor, source: str, expected: str) -> None:
        """Test integer arithmetic on two literals."""
        assert executor.render_output(source) == expected

    def test_division_by_zero(self, executor: MockExecutor) -> None:
        """Test that a failed calculation is reported, not raised."""
        assert executor.render_output("print(1 / 0)") == CALCULATION_ERROR

    def test_result_too_long_to_print(self, executor: MockExecutor) -> None:
        """Test that a result past the int digit limit is a calculation error."""
        source = "print(" + "9" * 3000 + " * " + "9" * 3000 + ")"
        assert executor.render_output(source) == CALCULATION_ERROR

    def test_operand_too_long_to_convert(self, executor: MockExecutor) -> None:
        """Test that an operand past the int digit limit is a calculation error."""
        assert executor.render_output("print(" + "9" * 5000 + " + 1)") == CALCULATION_ERROR

    def test_float_overflow(self, executor: MockExecutor) -> None:
        """Test that true division of huge integers is a calculation error."""
        source = "print(" + "9" * 400 + " / 3)"
        assert executor.render_output(source) == CALCULATION_ERROR

    @pytest.mark.parametrize(
        "source",
        [
            "print(",
            "print(" + "9" * 5000 + " - " + "9" * 5000 + ")",
            "print(x)\r\nx = 5\r\n",
            "print(٣ + ٤)",
            '"""never closed\nprint("hi")',
            "\x00\t\r\n ",
        ],
        ids=[
            "lone-print",
            "long-operands",
            "crlf",
            "arabic-digits",
            "open-triple-quote",
            "control-chars",
        ],
    )
    def test_never_raises(self, executor: MockExecutor, source: str) -> None:
        """Test that unusual text produces output text instead of exceptions."""
        output = executor.render_output(source)

        assert isinstance(output, str)
        assert output

    @pytest.mark.asyncio
    async def test_failed_calculation_resolves(self, instant_executor: MockExecutor) -> None:
        """Test that the async path resolves with the calculation error."""
        source = "print(" + "9" * 3000 + " * " + "9" * 3000 + ")"
        assert await instant_executor.execute(source) == CALCULATION_ERROR

    def test_variable_string(self, executor: MockExecutor) -> None:
        """Test a name bound to a string literal."""
        assert executor.render_output('name = "Ada"\nprint(name)') == "Ada"

    def test_variable_number(self, executor: MockExecutor) -> None:
        """Test a name bound to an integer literal."""
        assert executor.render_output("age = 25\nprint(age)") == "25"

    def test_variable_unknown(self, executor: MockExecutor) -> None:
        """Test a name with no literal assignment."""
        assert executor.render_output("print(score)") == "score = <variable value>"

    def test_variable_last_assignment_wins(self, executor: MockExecutor) -> None:
        """Test that the most recent assignment is used."""
        assert executor.render_output('x = "a"\nx = "b"\nprint(x)') == "b"

    def test_variable_string_preferred_over_number(self, executor: MockExecutor) -> None:
        """Test that string assignments are searched before numbers."""
        assert executor.render_output('x = 5\nx = "five"\nprint(x)') == "five"

    def test_variable_searched_in_whole_source(self, executor: MockExecutor) -> None:
        """Test that assignments after the print are found too."""
        assert executor.render_output("print(x)\nx = 3") == "3"

    def test_f_string_ignored(self, executor: MockExecutor) -> None:
        """Test that unsupported print shapes produce nothing."""
        assert executor.render_output('print(f"Hi {name}")') == NO_OUTPUT

    def test_expression_ignored(self, executor: MockExecutor) -> None:
        """Test that longer expressions are not evaluated."""
        assert executor.render_output("print(1 + 2 + 3)") == NO_OUTPUT


class TestFormatNumber:
    """Tests for numeric result rendering."""

    def test_integer(self) -> None:
        assert format_number(4) == "4"

    def test_integral_float(self) -> None:
        assert format_number(4.0) == "4"

    def test_fraction(self) -> None:
        assert format_number(0.25) == "0.25"


class TestExecute:
    """Tests for the asynchronous run with simulated latency."""

    @pytest.mark.asyncio
    async def test_hello_world_delay_in_range(self) -> None:
        """Test output and delay bounds with a simulated clock."""
        rng = MagicMock(return_value=1.5)
        executor = MockExecutor(rng=rng)

        with patch("python_ide.utils.async_helpers.asyncio.sleep", new=AsyncMock()) as sleep:
            output = await executor.execute('print("Hello, World!")')

        assert output == "Hello, World!"
        rng.assert_called_once_with(1.0, 2.0)
        sleep.assert_awaited_once_with(1.5)

    @pytest.mark.asyncio
    async def test_default_random_delay(self) -> None:
        """Test that the default delay is drawn from 1 to 2 seconds."""
        executor = MockExecutor()

        with patch("python_ide.utils.async_helpers.asyncio.sleep", new=AsyncMock()) as sleep:
            await executor.execute("x = 1\n")

        (delay,) = sleep.await_args.args
        assert 1.0 <= delay <= 2.0

    @pytest.mark.asyncio
    async def test_no_output_message(self, instant_executor: MockExecutor) -> None:
        """Test the no-output notice through the async path."""
        assert await instant_executor.execute("x = 1\n") == NO_OUTPUT

    @pytest.mark.asyncio
    async def test_configured_bounds(self) -> None:
        """Test that configured bounds reach the random source."""
        rng = MagicMock(return_value=0.2)
        executor = MockExecutor(ExecutorConfig(min_delay=0.1, max_delay=0.3), rng=rng)

        with patch("python_ide.utils.async_helpers.asyncio.sleep", new=AsyncMock()):
            await executor.execute("print('x')")

        rng.assert_called_once_with(0.1, 0.3)

    @pytest.mark.asyncio
    async def test_module_level_execute(self, instant_config: ExecutorConfig) -> None:
        """Test the module-level convenience coroutine."""
        assert await execute("print(6 * 7)", instant_config) == "42"
