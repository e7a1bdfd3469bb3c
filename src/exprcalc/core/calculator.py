"""
Expression pipeline: tokenize, parse, evaluate.

Each call is self-contained; nothing is cached or shared between calls.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from exprcalc.core.expression_lang.evaluator import evaluate
from exprcalc.core.expression_lang.parser import DEFAULT_MAX_DEPTH, parse_tokens
from exprcalc.core.expression_lang.tokenizer import tokenize
from exprcalc.core.manifest import CalcManifest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalcOptions:
    """Limits and switches passed into the pipeline stages."""

    strict: bool = False
    max_depth: int = DEFAULT_MAX_DEPTH

    @classmethod
    def from_manifest(cls, manifest: CalcManifest) -> CalcOptions:
        return cls(strict=manifest.lexer.strict, max_depth=manifest.parser.max_depth)


def calculate(source: str, options: CalcOptions | None = None) -> float:
    """Evaluate an arithmetic expression given as text.

    Args:
        source: Expression string (e.g., "(2 + 3) * 4")
        options: Lexer and parser settings; defaults when omitted.

    Returns:
        The value of the expression, possibly infinite or NaN.

    Raises:
        ExpressionParseError: If the text is not a well-formed expression.
        ExpressionEvalError: If evaluation hits an arithmetic fault.
    """
    opts = options or CalcOptions()
    tokens = tokenize(source, strict=opts.strict)
    logger.debug("Tokens: %s", tokens)
    expr = parse_tokens(tokens, max_depth=opts.max_depth)
    result = evaluate(expr)
    logger.debug("Result of %r: %r", source, result)
    return result
