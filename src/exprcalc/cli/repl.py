"""
Interactive read-evaluate-print loop.

Reads one expression per line and prints its result, or the error and a
hint. Typing ``exit`` (any case), end of input, or Ctrl-C ends the loop.
Each line is evaluated independently; a failed line never ends the session.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import typer

from exprcalc.cli.utils import format_result, print_expression_error
from exprcalc.core.calculator import CalcOptions, calculate
from exprcalc.core.errors import ExpressionError
from exprcalc.core.expression_lang.tokenizer import tokenize
from exprcalc.core.manifest import ReplConfig

logger = logging.getLogger(__name__)

BANNER = "Enter your mathematical expression (or 'exit' to quit):"
GOODBYE = "Goodbye!"


def run_repl(
    options: CalcOptions,
    config: ReplConfig,
    read_line: Callable[[str], str] = input,
) -> int:
    """Run the loop until exit; return the number of expressions evaluated."""
    typer.echo(BANNER)
    evaluated = 0

    while True:
        try:
            line = read_line(config.prompt).strip()
        except (EOFError, KeyboardInterrupt):
            typer.echo("")
            typer.echo(GOODBYE)
            break

        if line.lower() == "exit":
            typer.echo(GOODBYE)
            break

        if not line:
            typer.echo("Please enter an expression.")
            continue

        try:
            if config.show_tokens:
                typer.echo(f"Tokens: {tokenize(line, strict=options.strict)}")
            result = calculate(line, options)
        except ExpressionError as e:
            logger.debug("Expression %r failed: %s", line, e)
            print_expression_error(e, show_hint=config.show_hints)
            continue

        evaluated += 1
        typer.echo(f"Result: {format_result(result)}")

    return evaluated
