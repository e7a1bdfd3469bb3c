"""
Precedence-climbing parser for exprcalc arithmetic expressions.

Grammar (precedence low to high):
    expr     → term (("+"|"-") term)*
    term     → factor (("*"|"/") factor)*
    factor   → power
    power    → unary ("^" power)?
    unary    → "-" unary | primary
    primary  → NUMBER | "(" expr ")"

Binary operators are folded by precedence climbing: ``^`` binds tightest and
groups to the right, ``*`` and ``/`` come next, ``+`` and ``-`` bind loosest.
All but ``^`` group to the left.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from exprcalc.core.errors import ErrorKind, ExpressionParseError
from exprcalc.core.expression_lang.tokenizer import Token, TokenKind, tokenize
from exprcalc.core.ir.expressions import (
    BinaryExpr,
    BinaryOp,
    Expr,
    Literal,
    UnaryExpr,
    UnaryOp,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 256

# token kind -> (operator, precedence, right-associative)
_BINARY_OPS: dict[TokenKind, tuple[BinaryOp, int, bool]] = {
    TokenKind.ADD: (BinaryOp.ADD, 1, False),
    TokenKind.SUB: (BinaryOp.SUB, 1, False),
    TokenKind.MUL: (BinaryOp.MUL, 2, False),
    TokenKind.DIV: (BinaryOp.DIV, 2, False),
    TokenKind.POW: (BinaryOp.POW, 3, True),
}

_LOWEST_PRECEDENCE = 1


class _Parser:
    """Recursive descent parser over a token list."""

    def __init__(self, tokens: list[Token], max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        self.tokens = tokens
        self.pos = 0
        self.depth = 0
        self.max_depth = max_depth

    @property
    def current(self) -> Token | None:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    @property
    def offset(self) -> int:
        """Character offset of the cursor, or the end of the last token."""
        tok = self.current
        if tok is not None:
            return tok.pos
        if self.tokens:
            return self.tokens[-1].end
        return 0

    def advance(self) -> Token:
        tok = self.tokens[self.pos]
        self.pos += 1
        return tok

    def match(self, kind: TokenKind) -> Token | None:
        tok = self.current
        if tok is not None and tok.kind == kind:
            return self.advance()
        return None

    @contextmanager
    def nested(self) -> Iterator[None]:
        """Track recursion depth, failing once it passes max_depth."""
        if self.depth >= self.max_depth:
            raise ExpressionParseError(
                ErrorKind.NESTING_TOO_DEEP, self.offset, f"limit is {self.max_depth}"
            )
        self.depth += 1
        try:
            yield
        finally:
            self.depth -= 1

    # -- Grammar rules --

    def parse_expr(self) -> Expr:
        """Top-level: the loosest-binding binary expression."""
        return self.parse_binary(_LOWEST_PRECEDENCE)

    def parse_binary(self, min_precedence: int) -> Expr:
        """unary (binop binary)* for operators at or above min_precedence."""
        with self.nested():
            left = self.parse_unary()

            while True:
                tok = self.current
                if tok is None or tok.kind not in _BINARY_OPS:
                    return left
                op, precedence, right_assoc = _BINARY_OPS[tok.kind]
                if precedence < min_precedence:
                    return left
                self.advance()
                next_min = precedence if right_assoc else precedence + 1
                right = self.parse_binary(next_min)
                left = BinaryExpr(op=op, left=left, right=right, pos=tok.pos)

    def parse_unary(self) -> Expr:
        """'-' unary | primary"""
        with self.nested():
            minus = self.match(TokenKind.SUB)
            if minus is not None:
                operand = self.parse_unary()
                return UnaryExpr(op=UnaryOp.NEG, operand=operand, pos=minus.pos)
            return self.parse_primary()

    def parse_primary(self) -> Expr:
        """NUMBER | '(' expr ')'"""
        tok = self.current

        if tok is None:
            raise ExpressionParseError(ErrorKind.INVALID_EXPRESSION, self.offset)

        # Parenthesized expression
        if tok.kind == TokenKind.LPAREN:
            self.advance()
            expr = self.parse_expr()
            if self.match(TokenKind.RPAREN) is None:
                raise ExpressionParseError(ErrorKind.UNMATCHED_PARENTHESES, self.offset)
            return expr

        if tok.kind == TokenKind.NUMBER:
            self.advance()
            return _parse_number(tok)

        raise ExpressionParseError(ErrorKind.INVALID_EXPRESSION, tok.pos, tok.value)


def _parse_number(tok: Token) -> Literal:
    """Parse a NUMBER token's lexeme as a float."""
    try:
        value = float(tok.value)
    except ValueError as e:
        raise ExpressionParseError(ErrorKind.INVALID_NUMBER, tok.pos, tok.value) from e
    return Literal(value=value)


def parse_tokens(tokens: list[Token], *, max_depth: int = DEFAULT_MAX_DEPTH) -> Expr:
    """Parse a token list into an AST.

    Args:
        tokens: Output of :func:`tokenize`.
        max_depth: Maximum parser recursion depth. Each parenthesis level
            costs two, as does each negation or exponent in a chain.

    Returns:
        Root of the parsed expression tree.

    Raises:
        ExpressionParseError: If the tokens do not form one expression.
    """
    if not tokens:
        raise ExpressionParseError(ErrorKind.EMPTY_EXPRESSION, 0)

    parser = _Parser(tokens, max_depth=max_depth)
    expr = parser.parse_expr()

    # Ensure all tokens consumed
    trailing = parser.current
    if trailing is not None:
        kind = (
            ErrorKind.UNMATCHED_PARENTHESES
            if trailing.kind == TokenKind.RPAREN
            else ErrorKind.INVALID_EXPRESSION
        )
        raise ExpressionParseError(kind, trailing.pos, trailing.value)

    logger.debug("Parsed %d tokens into a %s tree", len(tokens), type(expr).__name__)
    return expr


def parse_expr(source: str, *, strict: bool = False, max_depth: int = DEFAULT_MAX_DEPTH) -> Expr:
    """Parse an expression string into an AST.

    Args:
        source: Expression string (e.g., "2 + 3 * 4")
        strict: Reject unrecognized characters instead of skipping them.
        max_depth: Maximum nesting depth, see :func:`parse_tokens`.

    Returns:
        Parsed expression AST.

    Raises:
        ExpressionParseError: If the expression is invalid.
    """
    return parse_tokens(tokenize(source, strict=strict), max_depth=max_depth)
