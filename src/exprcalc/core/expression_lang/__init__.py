"""
exprcalc arithmetic expression language.

Tokenizer, parser, and evaluator for expressions over numbers, the binary
operators ``+ - * / ^``, unary minus, and parentheses.

Usage:
    from exprcalc.core.expression_lang import parse_expr, evaluate

    expr = parse_expr("2 + 3 * 4")
    result = evaluate(expr)
    # result == 14.0
"""

from exprcalc.core.expression_lang.evaluator import evaluate
from exprcalc.core.expression_lang.parser import DEFAULT_MAX_DEPTH, parse_expr, parse_tokens
from exprcalc.core.expression_lang.tokenizer import Token, TokenKind, tokenize

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "Token",
    "TokenKind",
    "evaluate",
    "parse_expr",
    "parse_tokens",
    "tokenize",
]
