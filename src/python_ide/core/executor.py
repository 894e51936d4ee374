"""Mock execution of submitted Python source.

This module implements the MockExecutor class, a stand-in for a real Python
runtime. It does not interpret anything: after an artificial delay it
recognizes three print-statement shapes and produces plausible output:
- print("text") prints the literal text
- print(<int> <op> <int>) prints the arithmetic result
- print(name) prints the last literal assigned to name anywhere in the source

Every other line produces no output.
"""

from __future__ import annotations

import operator
import random
import re
from collections.abc import Callable

import structlog

from python_ide.config.schema import ExecutorConfig
from python_ide.utils.async_helpers import simulate_latency

log = structlog.get_logger()

NO_OUTPUT = "Program executed successfully (no output)"
CALCULATION_ERROR = "Error in calculation"

_OPERATORS: dict[str, Callable[[int, int], int | float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}


def format_number(value: int | float) -> str:
    """Render a numeric result, dropping a zero fractional part."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class MockExecutor:
    """Pattern-matched fake of running a Python program.

    Responsibilities:
    - Wait a randomized delay to model execution latency
    - Translate recognized print statements into output lines
    - Report "no output" when nothing was recognized

    The executor is not cancellable and keeps no state between runs.

    Example:
        executor = MockExecutor()
        output = await executor.execute('print("Hello, World!")')
    """

    PRINT_LITERAL = re.compile(r"print\s*\(\s*(['\"])(.*?)\1\s*\)")
    PRINT_ARITHMETIC = re.compile(r"print\s*\(\s*(\d+)\s*([+\-*/])\s*(\d+)\s*\)")
    PRINT_NAME = re.compile(r"print\s*\(\s*(\w+)\s*\)")

    def __init__(
        self,
        config: ExecutorConfig | None = None,
        rng: Callable[[float, float], float] = random.uniform,
    ) -> None:
        """Initialize the MockExecutor.

        Args:
            config: Delay bounds (defaults to 1-2 seconds)
            rng: Source of the delay, called as ``rng(min_delay, max_delay)``
        """
        self._config = config or ExecutorConfig()
        self._rng = rng

    async def execute(self, source: str) -> str:
        """Pretend to run the source and return its output.

        Args:
            source: Full editor text

        Returns:
            Output lines joined with newlines, or the no-output notice
        """
        log.info("execution_started", line_count=source.count("\n") + 1)

        delay = await simulate_latency(
            self._config.min_delay,
            self._config.max_delay,
            rng=self._rng,
        )
        output = self.render_output(source)

        log.info("execution_complete", delay=round(delay, 3), output_length=len(output))
        return output

    def render_output(self, source: str) -> str:
        """Compute the mock output of the source without any delay.

        Args:
            source: Full editor text

        Returns:
            Output lines joined with newlines, or the no-output notice
        """
        outputs: list[str] = []

        for line in source.split("\n"):
            stripped = line.strip()
            if not stripped:
                continue
            result = self._output_for_line(stripped, source)
            if result is not None:
                outputs.append(result)

        return "\n".join(outputs) if outputs else NO_OUTPUT

    def _output_for_line(self, line: str, source: str) -> str | None:
        literal_match = self.PRINT_LITERAL.search(line)
        if literal_match:
            return literal_match.group(2)

        arithmetic_match = self.PRINT_ARITHMETIC.search(line)
        if arithmetic_match:
            left, op, right = arithmetic_match.groups()
            return self._calculate(left, op, right)

        name_match = self.PRINT_NAME.search(line)
        if name_match:
            return self._resolve_variable(name_match.group(1), source)

        return None

    def _calculate(self, left: str, op: str, right: str) -> str:
        # Conversion in either direction fails past the int digit limit
        try:
            return format_number(_OPERATORS[op](int(left), int(right)))
        except (ArithmeticError, ValueError) as e:
            log.debug("calculation_failed", op=op, error=str(e))
            return CALCULATION_ERROR

    def _resolve_variable(self, name: str, source: str) -> str:
        """Find the last literal assigned to a name anywhere in the source."""
        escaped = re.escape(name)

        strings = re.findall(rf"{escaped}\s*=\s*(['\"])(.*?)\1", source)
        if strings:
            return str(strings[-1][1])

        numbers = re.findall(rf"{escaped}\s*=\s*(\d+)", source)
        if numbers:
            return str(numbers[-1])

        return f"{name} = <variable value>"


async def execute(source: str, config: ExecutorConfig | None = None) -> str:
    """Mock-run source text with a fresh executor.

    Callers should only run source whose detection pass came back empty.

    Args:
        source: Full editor text
        config: Delay bounds (defaults to 1-2 seconds)

    Returns:
        Mock program output
    """
    return await MockExecutor(config).execute(source)
