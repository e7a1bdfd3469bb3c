"""
Expression evaluator for exprcalc arithmetic expressions.

Evaluates expression AST nodes to a float. Pure evaluation: no I/O, no side
effects, and no use of Python's eval(). Results follow IEEE-754 double
semantics, so overflow yields infinity and domain errors yield NaN, except
for the faults checked explicitly below.
"""

from __future__ import annotations

import math

from exprcalc.core.errors import ErrorKind, ExpressionEvalError
from exprcalc.core.ir.expressions import (
    BinaryExpr,
    BinaryOp,
    Expr,
    Literal,
    UnaryExpr,
    UnaryOp,
)


def evaluate(expr: Expr) -> float:
    """Evaluate an expression tree.

    This is a safe tree-walking interpreter; it does NOT use Python's
    eval(). Only the closed set of AST node types is handled.

    Args:
        expr: Parsed expression AST.

    Returns:
        The computed value, possibly infinite or NaN.

    Raises:
        ExpressionEvalError: On division by zero, zero raised to a negative
            power, an unsupported operator, or a tree too deep to walk.
    """
    try:
        return _interpret(expr)
    except RecursionError as e:
        raise ExpressionEvalError(ErrorKind.NESTING_TOO_DEEP, getattr(expr, "pos", 0)) from e


def _interpret(expr: Expr) -> float:
    """Dispatch evaluation to the appropriate handler."""
    if isinstance(expr, Literal):
        return expr.value

    if isinstance(expr, BinaryExpr):
        return _interpret_binary(expr)

    if isinstance(expr, UnaryExpr):
        return _interpret_unary(expr)

    raise ExpressionEvalError(ErrorKind.INVALID_EXPRESSION, 0, type(expr).__name__)


def _interpret_unary(expr: UnaryExpr) -> float:
    """Evaluate a unary expression."""
    val = _interpret(expr.operand)
    if expr.op == UnaryOp.NEG:
        return -val
    raise ExpressionEvalError(ErrorKind.INVALID_OPERATOR, expr.pos, str(expr.op))


def _interpret_binary(expr: BinaryExpr) -> float:
    """Evaluate a binary expression. Both operands are always evaluated."""
    left = _interpret(expr.left)
    right = _interpret(expr.right)

    if expr.op == BinaryOp.ADD:
        return left + right
    if expr.op == BinaryOp.SUB:
        return left - right
    if expr.op == BinaryOp.MUL:
        return left * right
    if expr.op == BinaryOp.DIV:
        if right == 0:
            raise ExpressionEvalError(ErrorKind.DIVISION_BY_ZERO, expr.pos)
        return left / right
    if expr.op == BinaryOp.POW:
        if left == 0 and right < 0:
            raise ExpressionEvalError(ErrorKind.INVALID_POWER, expr.pos)
        return _pow(left, right)

    raise ExpressionEvalError(ErrorKind.INVALID_OPERATOR, expr.pos, str(expr.op))


def _pow(base: float, exponent: float) -> float:
    """Real exponentiation with IEEE results instead of exceptions."""
    try:
        return math.pow(base, exponent)
    except ValueError:
        # Negative base with a non-integral exponent
        return math.nan
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf


def _is_odd_integer(value: float) -> bool:
    return value.is_integer() and value % 2 == 1
