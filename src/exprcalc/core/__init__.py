"""Core exprcalc functionality: IR, tokenizer, parser, evaluator, configuration."""

from . import ir
from .calculator import CalcOptions, calculate
from .errors import (
    CalcError,
    ConfigError,
    ErrorKind,
    ExpressionError,
    ExpressionEvalError,
    ExpressionParseError,
    hint_for,
)
from .manifest import CalcManifest, find_manifest, load_manifest

__all__ = [
    "ir",
    "CalcError",
    "CalcManifest",
    "CalcOptions",
    "ConfigError",
    "ErrorKind",
    "ExpressionError",
    "ExpressionEvalError",
    "ExpressionParseError",
    "calculate",
    "find_manifest",
    "hint_for",
    "load_manifest",
]
