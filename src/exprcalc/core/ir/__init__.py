"""
exprcalc Intermediate Representation (IR) types.

All expression node types are re-exported from this package.
"""

from .expressions import (
    BinaryExpr,
    BinaryOp,
    Expr,
    Literal,
    UnaryExpr,
    UnaryOp,
)

__all__ = [
    "BinaryExpr",
    "BinaryOp",
    "Expr",
    "Literal",
    "UnaryExpr",
    "UnaryOp",
]
