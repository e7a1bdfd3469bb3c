"""
Error types for exprcalc scanning, parsing, evaluation, and configuration.
"""

from enum import StrEnum


class ErrorKind(StrEnum):
    """Kinds of expression errors, valued by their human-readable message."""

    INVALID_EXPRESSION = "Invalid expression format"
    UNMATCHED_PARENTHESES = "Unmatched parentheses"
    INVALID_OPERATOR = "Invalid operator usage"
    INVALID_NUMBER = "Invalid number format"
    DIVISION_BY_ZERO = "Division by zero"
    INVALID_POWER = "Invalid power operation"
    EMPTY_EXPRESSION = "Empty expression"
    NESTING_TOO_DEEP = "Expression nested too deeply"


_HINTS: dict[ErrorKind, str] = {
    ErrorKind.UNMATCHED_PARENTHESES: "Check that all parentheses are properly matched.",
    ErrorKind.INVALID_NUMBER: "Make sure all numbers are valid.",
    ErrorKind.DIVISION_BY_ZERO: "Division by zero is not allowed.",
    ErrorKind.INVALID_POWER: "Zero cannot be raised to a negative power.",
    ErrorKind.EMPTY_EXPRESSION: "Enter an expression such as 2 + 3 * 4.",
    ErrorKind.INVALID_EXPRESSION: "Check for missing operands or stray operators.",
    ErrorKind.INVALID_OPERATOR: "Only + - * / ^ and unary minus are supported.",
    ErrorKind.NESTING_TOO_DEEP: "Reduce the nesting of parentheses or negations.",
}


class CalcError(Exception):
    """Base exception for all exprcalc errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ExpressionError(CalcError):
    """
    Raised when an expression cannot be scanned, parsed, or evaluated.

    Attributes:
        kind: What went wrong
        pos: Zero-based character offset where the fault was detected
        text: Optional offending source text (a lexeme or character)
    """

    def __init__(self, kind: ErrorKind, pos: int = 0, text: str | None = None):
        self.kind = kind
        self.pos = pos
        self.text = text
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format like: "Invalid number format at position 3: 1..2"."""
        message = f"{self.kind.value} at position {self.pos}"
        if self.text is not None:
            return f"{message}: {self.text}"
        return message

    @property
    def hint(self) -> str | None:
        return hint_for(self.kind)


class ExpressionParseError(ExpressionError):
    """
    Raised when source text or its tokens are malformed.

    Examples:
    - Empty input
    - Unmatched parentheses
    - Numbers with more than one decimal point
    - Unexpected or trailing tokens
    """

    pass


class ExpressionEvalError(ExpressionError):
    """
    Raised when a well-formed tree cannot be evaluated.

    Examples:
    - Division by zero
    - Zero raised to a negative power
    - Unsupported operator in a hand-built tree
    """

    pass


class ConfigError(CalcError):
    """Raised when exprcalc.toml is missing or holds invalid values."""

    pass


def hint_for(kind: ErrorKind) -> str | None:
    """Return a short suggestion for fixing an error of the given kind."""
    return _HINTS.get(kind)
