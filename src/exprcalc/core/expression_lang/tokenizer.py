"""
Tokenizer for exprcalc arithmetic expressions.

Converts an expression string into a sequence of typed tokens.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

from exprcalc.core.errors import ErrorKind, ExpressionParseError


class TokenKind(StrEnum):
    """Token types for arithmetic expressions."""

    # Operators
    ADD = auto()
    SUB = auto()
    MUL = auto()
    DIV = auto()
    POW = auto()

    # Punctuation
    LPAREN = auto()
    RPAREN = auto()

    # Literals
    NUMBER = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """A single token from the expression tokenizer."""

    kind: TokenKind
    value: str
    pos: int

    @property
    def end(self) -> int:
        """Offset just past the last character of the lexeme."""
        return self.pos + len(self.value)

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.value!r}, pos={self.pos})"


_SINGLE_MAP: dict[str, TokenKind] = {
    "+": TokenKind.ADD,
    "-": TokenKind.SUB,
    "*": TokenKind.MUL,
    "/": TokenKind.DIV,
    "^": TokenKind.POW,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}

_NUMBER_CHARS = frozenset("0123456789.")


def tokenize(source: str, *, strict: bool = False) -> list[Token]:
    """Tokenize an expression string into a list of tokens.

    A run of digits and decimal points becomes one NUMBER token holding the
    exact run; it is not validated here, so ``"1..2"`` is a single token.

    Args:
        source: Expression text (e.g., "2 + 3 * 4")
        strict: Reject characters that are not digits, ``.``, operators,
            parentheses, or whitespace. When false they are skipped.

    Returns:
        Tokens in source order. No end-of-input token is appended.

    Raises:
        ExpressionParseError: Only in strict mode, on the first
            unrecognized character.
    """
    tokens: list[Token] = []
    i = 0
    n = len(source)

    while i < n:
        c = source[i]

        # Numbers: digits and dots, validated by the parser
        if c in _NUMBER_CHARS:
            start = i
            while i < n and source[i] in _NUMBER_CHARS:
                i += 1
            tokens.append(Token(TokenKind.NUMBER, source[start:i], start))
            continue

        if c in _SINGLE_MAP:
            tokens.append(Token(_SINGLE_MAP[c], c, i))
            i += 1
            continue

        if not c.isspace() and strict:
            raise ExpressionParseError(ErrorKind.INVALID_EXPRESSION, i, c)

        i += 1

    return tokens
