"""
exprcalc - arithmetic expression evaluator.

Scans, parses, and evaluates expressions over numbers, ``+ - * / ^``,
unary minus, and parentheses, reporting malformed input with positioned
errors.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.calculator import CalcOptions, calculate
from .core.errors import (
    CalcError,
    ConfigError,
    ErrorKind,
    ExpressionError,
    ExpressionEvalError,
    ExpressionParseError,
)

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "CalcError",
    "CalcOptions",
    "ConfigError",
    "ErrorKind",
    "ExpressionError",
    "ExpressionEvalError",
    "ExpressionParseError",
    "calculate",
]
