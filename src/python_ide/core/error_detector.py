"""Heuristic detector for likely Python mistakes.

This module implements the ErrorDetector class that scans source text line
by line and flags patterns that usually lead to a Python error. It covers:
- Syntax slips (missing colons, unbalanced brackets)
- Missing indentation after a block header
- Names used before any visible definition
- Common runtime traps (str + int, int('abc'), x / 0, ...)
- Print-before-assignment inside a function body

The checks are regular expressions over raw line text. They are not a
tokenizer: string literals are not masked and false positives are expected.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

import structlog

from python_ide.core.knowledge_base import lookup
from python_ide.models.detection import DetectedError, SourceBuffer

log = structlog.get_logger()


@dataclass(frozen=True)
class LineContext:
    """One line under inspection plus the buffer it came from."""

    text: str
    number: int  # 1-based
    lines: tuple[str, ...]
    defined_names: frozenset[str]  # Names defined on earlier lines

    @property
    def index(self) -> int:
        """0-based position of the line in the buffer."""
        return self.number - 1

    @property
    def stripped(self) -> str:
        return self.text.strip()


Check = Callable[[LineContext], list[DetectedError]]


def _indent_width(line: str) -> int:
    return len(line) - len(line.lstrip())


def _is_code(line: str) -> bool:
    stripped = line.strip()
    return bool(stripped) and not stripped.startswith("#")


def _to_int(digits: str) -> int | None:
    """Parse a digit run, or None when it is too long to convert."""
    try:
        return int(digits)
    except ValueError:
        return None


class ErrorDetector:
    """Heuristic detector for Python error patterns.

    Responsibilities:
    - Split source text into lines, skipping blanks and comments
    - Run every check on every remaining line, in a fixed order
    - Attach the knowledge-base entry for each detected error kind

    The detector keeps no state between calls; the names defined on earlier
    lines are recomputed on every pass.

    Example:
        detector = ErrorDetector()
        for error in detector.detect(source):
            print(f"Line {error.line}: {error.kind}: {error.message}")
    """

    BUILTINS = frozenset(
        {
            "print",
            "len",
            "str",
            "int",
            "float",
            "list",
            "dict",
            "range",
            "input",
            "open",
            "type",
            "isinstance",
            "hasattr",
            "getattr",
            "setattr",
        }
    )
    COMMON_MODULES = ("math", "os", "sys", "json", "datetime", "random", "time")
    MAX_LITERAL_INDEX = 10

    # Regex patterns for the checks
    MISSING_COLON = re.compile(
        r"^(\s*)(if|for|while|def|class|try|except|finally|with|elif|else)\s+.*[^:]\s*$"
    )
    OPEN_BRACKETS = re.compile(r"[(\[{]")
    CLOSE_BRACKETS = re.compile(r"[)\]}]")
    NAME_USAGE = re.compile(r"\b([a-zA-Z_][a-zA-Z0-9_]*)\s*(?=[(\[.]|\s|$)")
    ASSIGNMENT = re.compile(r"([a-zA-Z_][a-zA-Z0-9_]*)\s*=")
    FUNCTION_DEF = re.compile(r"def\s+([a-zA-Z_][a-zA-Z0-9_]*)")
    IMPORTED_NAME = re.compile(r"(?:from\s+\w+\s+)?import\s+([a-zA-Z_][a-zA-Z0-9_]*)")
    LEADING_DIGIT = re.compile(r"^\d")
    STRING_PLUS_INT = re.compile(r"['\"][^'\"]*['\"]\s*\+\s*\d+")
    INT_PLUS_STRING = re.compile(r"\d+\s*\+\s*['\"][^'\"]*['\"]")
    INT_CALL = re.compile(r"int\s*\(\s*['\"]([^'\"]*)['\"]\s*\)")
    DIGITS = re.compile(r"[0-9]+")
    LITERAL_INDEX = re.compile(r"\[\s*(\d+)\s*\]")
    STRING_KEY = re.compile(r"\w+\s*\[\s*['\"][^'\"]*['\"]\s*\]")
    DIVIDE_BY_ZERO = re.compile(r"/\s*0\s*(?:$|[^\d])")
    INT_APPEND = re.compile(r"\d+\s*\.\s*append\s*\(")
    IMPORT_MODULE = re.compile(r"(?:from\s+(\w+)\s+import|import\s+(\w+))")
    SELF_RECURSION = re.compile(r"def\s+(\w+).*:\s*\1\s*\(")
    FALSE_SUM_ASSERT = re.compile(r"assert\s+(\d+)\s*\+\s*(\d+)\s*==\s*(\d+)")
    PRINT_NAME = re.compile(r"print\s*\(\s*(\w+)\s*\)")

    def __init__(self) -> None:
        """Initialize the ErrorDetector with its ordered battery of checks."""
        self._checks: tuple[Check, ...] = (
            self._check_missing_colon,
            self._check_brackets,
            self._check_indentation,
            self._check_undefined_names,
            self._check_string_int_concat,
            self._check_int_literal,
            self._check_index,
            self._check_dict_key,
            self._check_zero_division,
            self._check_int_attribute,
            self._check_import_typo,
            self._check_self_recursion,
            self._check_false_assertion,
            self._check_unbound_local,
        )

    def detect(self, source: str) -> list[DetectedError]:
        """Run one detection pass over the source text.

        Args:
            source: Full editor text

        Returns:
            Detected errors, ordered by line and then by check
        """
        lines = SourceBuffer(source).lines
        errors: list[DetectedError] = []
        defined: set[str] = set()

        for index, line in enumerate(lines):
            if _is_code(line):
                context = LineContext(
                    text=line,
                    number=index + 1,
                    lines=lines,
                    defined_names=frozenset(defined),
                )
                for check in self._checks:
                    errors.extend(check(context))

            defined.update(self._names_defined_by(line))

        log.debug("detection_pass_complete", line_count=len(lines), error_count=len(errors))
        return errors

    def _error(self, kind: str, message: str, context: LineContext) -> DetectedError:
        return DetectedError(kind=kind, message=message, line=context.number, info=lookup(kind))

    def _names_defined_by(self, line: str) -> set[str]:
        """Names a line introduces by assignment, def or import."""
        names = {match.group(1) for match in self.ASSIGNMENT.finditer(line)}
        names.update(match.group(1) for match in self.FUNCTION_DEF.finditer(line))
        names.update(match.group(1) for match in self.IMPORTED_NAME.finditer(line))
        return names

    # ------------------------------------------------------------------
    # Syntax
    # ------------------------------------------------------------------

    def _check_missing_colon(self, context: LineContext) -> list[DetectedError]:
        if self.MISSING_COLON.search(context.text) and "#" not in context.text:
            return [self._error("SyntaxError", "Missing colon", context)]
        return []

    def _check_brackets(self, context: LineContext) -> list[DetectedError]:
        opened = len(self.OPEN_BRACKETS.findall(context.text))
        closed = len(self.CLOSE_BRACKETS.findall(context.text))
        if opened != closed:
            return [self._error("SyntaxError", "Unmatched brackets", context)]
        return []

    def _check_indentation(self, context: LineContext) -> list[DetectedError]:
        previous = next(
            (line.strip() for line in reversed(context.lines[: context.index]) if line.strip()),
            None,
        )
        if previous is None or not previous.endswith(":"):
            return []
        if context.text.startswith((" ", "\t")):
            return []
        return [self._error("IndentationError", "Expected an indented block", context)]

    # ------------------------------------------------------------------
    # Names
    # ------------------------------------------------------------------

    def _check_undefined_names(self, context: LineContext) -> list[DetectedError]:
        errors: list[DetectedError] = []
        for match in self.NAME_USAGE.finditer(context.text):
            name = match.group(1)
            if name in context.defined_names or name in self.BUILTINS:
                continue
            if self.LEADING_DIGIT.match(name):
                continue
            errors.append(self._error("NameError", f"name '{name}' is not defined", context))
        return errors

    # ------------------------------------------------------------------
    # Runtime traps
    # ------------------------------------------------------------------

    def _check_string_int_concat(self, context: LineContext) -> list[DetectedError]:
        text = context.text
        if self.STRING_PLUS_INT.search(text) or self.INT_PLUS_STRING.search(text):
            return [
                self._error(
                    "TypeError",
                    "unsupported operand type(s) for +: string and int",
                    context,
                )
            ]
        return []

    def _check_int_literal(self, context: LineContext) -> list[DetectedError]:
        match = self.INT_CALL.search(context.text)
        if not match:
            return []
        literal = match.group(1)
        # int('') is left alone, only non-empty non-numeric literals count
        if not literal or self.DIGITS.fullmatch(literal):
            return []
        return [
            self._error(
                "ValueError",
                f"invalid literal for int() with base 10: '{literal}'",
                context,
            )
        ]

    def _check_index(self, context: LineContext) -> list[DetectedError]:
        match = self.LITERAL_INDEX.search(context.text)
        if not match:
            return []
        index = _to_int(match.group(1))
        # Too many digits to convert is still far past the limit
        if index is None or index > self.MAX_LITERAL_INDEX:
            return [self._error("IndexError", "list index out of range", context)]
        return []

    def _check_dict_key(self, context: LineContext) -> list[DetectedError]:
        if self.STRING_KEY.search(context.text) and ".get(" not in context.text:
            return [self._error("KeyError", "dictionary key not found", context)]
        return []

    def _check_zero_division(self, context: LineContext) -> list[DetectedError]:
        if self.DIVIDE_BY_ZERO.search(context.text):
            return [self._error("ZeroDivisionError", "division by zero", context)]
        return []

    def _check_int_attribute(self, context: LineContext) -> list[DetectedError]:
        if self.INT_APPEND.search(context.text):
            return [
                self._error("AttributeError", "'int' object has no attribute 'append'", context)
            ]
        return []

    def _check_import_typo(self, context: LineContext) -> list[DetectedError]:
        match = self.IMPORT_MODULE.search(context.text)
        if not match:
            return []
        module = match.group(1) or match.group(2)
        if "z" in module and module not in self.COMMON_MODULES:
            return [self._error("ModuleNotFoundError", f"No module named '{module}'", context)]
        return []

    def _check_self_recursion(self, context: LineContext) -> list[DetectedError]:
        if self.SELF_RECURSION.search(context.text):
            return [self._error("RecursionError", "maximum recursion depth exceeded", context)]
        return []

    def _check_false_assertion(self, context: LineContext) -> list[DetectedError]:
        match = self.FALSE_SUM_ASSERT.search(context.text)
        if not match:
            return []
        left, right, expected = (_to_int(group) for group in match.groups())
        if left is None or right is None or expected is None:
            return []
        if left + right != expected:
            return [self._error("AssertionError", "assertion failed", context)]
        return []

    # ------------------------------------------------------------------
    # Function bodies
    # ------------------------------------------------------------------

    def _check_unbound_local(self, context: LineContext) -> list[DetectedError]:
        stripped = context.stripped
        if "print(" not in stripped:
            return []
        match = self.PRINT_NAME.search(stripped)
        if not match:
            return []

        def_indent = self._enclosing_def_indent(context)
        if def_indent is None:
            return []

        name = match.group(1)
        for later in context.lines[context.index + 1 :]:
            if not _is_code(later):
                continue
            later_stripped = later.strip()
            if _indent_width(later) <= def_indent or later_stripped.startswith("def "):
                break
            if f"{name} =" in later_stripped:
                return [
                    self._error(
                        "UnboundLocalError",
                        f"local variable '{name}' referenced before assignment",
                        context,
                    )
                ]
        return []

    def _enclosing_def_indent(self, context: LineContext) -> int | None:
        """Indentation of the ``def`` whose body holds the line, if any.

        Walks upwards through block headers with decreasing indentation.
        """
        current = _indent_width(context.text)
        for earlier in reversed(context.lines[: context.index]):
            if current == 0:
                return None
            if not _is_code(earlier):
                continue
            width = _indent_width(earlier)
            if width >= current:
                continue
            if earlier.strip().startswith("def "):
                return width
            current = width
        return None


_default_detector = ErrorDetector()


def detect(source: str) -> list[DetectedError]:
    """Detect likely Python errors in source text.

    Args:
        source: Full editor text

    Returns:
        Detected errors, ordered by line and then by check
    """
    return _default_detector.detect(source)
