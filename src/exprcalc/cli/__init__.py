"""
exprcalc CLI Package.

- repl.py: interactive read-evaluate-print loop
- utils.py: shared utilities (logging, config, error output)

Commands:
    exprcalc eval EXPRESSION    evaluate one expression
    exprcalc tokens EXPRESSION  show the token list
    exprcalc ast EXPRESSION     show the parsed tree
    exprcalc repl               interactive loop

Expressions starting with ``-`` must follow ``--``: ``exprcalc eval -- -5``.
"""

from __future__ import annotations

from pathlib import Path

import typer

from exprcalc._version import get_version
from exprcalc.cli.repl import run_repl
from exprcalc.cli.utils import (
    build_options,
    configure_logging,
    format_result,
    load_cli_manifest,
    print_expression_error,
    version_callback,
)
from exprcalc.core.calculator import calculate
from exprcalc.core.errors import ErrorKind, ExpressionError, ExpressionParseError
from exprcalc.core.expression_lang.parser import parse_expr
from exprcalc.core.expression_lang.tokenizer import tokenize

__version__ = get_version()

app = typer.Typer(
    help="exprcalc - evaluate arithmetic expressions with + - * / ^ and parentheses.",
    no_args_is_help=True,
)

_CONFIG_OPTION = typer.Option(
    None, "--config", "-c", help="Path to exprcalc.toml (default: ./exprcalc.toml if present)"
)
_STRICT_OPTION = typer.Option(
    None, "--strict/--lenient", help="Reject or skip unrecognized characters"
)
_MAX_DEPTH_OPTION = typer.Option(
    None, "--max-depth", min=1, help="Maximum parser recursion depth"
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version information",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """exprcalc CLI main callback for global options."""
    configure_logging(verbose)


@app.command("eval")
def eval_command(
    expression: str = typer.Argument(..., help="Expression to evaluate"),
    strict: bool | None = _STRICT_OPTION,
    max_depth: int | None = _MAX_DEPTH_OPTION,
    config: Path | None = _CONFIG_OPTION,
) -> None:
    """Evaluate one expression and print the result."""
    manifest = load_cli_manifest(config)
    options = build_options(manifest, strict, max_depth)
    try:
        result = calculate(expression, options)
    except ExpressionError as e:
        print_expression_error(e, show_hint=manifest.repl.show_hints)
        raise typer.Exit(code=1)
    typer.echo(format_result(result))


@app.command("tokens")
def tokens_command(
    expression: str = typer.Argument(..., help="Expression to scan"),
    strict: bool | None = _STRICT_OPTION,
    config: Path | None = _CONFIG_OPTION,
) -> None:
    """Print the tokens of an expression, one per line."""
    manifest = load_cli_manifest(config)
    options = build_options(manifest, strict, None)
    try:
        tokens = tokenize(expression, strict=options.strict)
    except ExpressionError as e:
        print_expression_error(e, show_hint=manifest.repl.show_hints)
        raise typer.Exit(code=1)
    for tok in tokens:
        typer.echo(f"{tok.pos}\t{tok.kind.name}\t{tok.value}")


@app.command("ast")
def ast_command(
    expression: str = typer.Argument(..., help="Expression to parse"),
    strict: bool | None = _STRICT_OPTION,
    max_depth: int | None = _MAX_DEPTH_OPTION,
    config: Path | None = _CONFIG_OPTION,
) -> None:
    """Print the parsed tree of an expression, fully parenthesized."""
    manifest = load_cli_manifest(config)
    options = build_options(manifest, strict, max_depth)
    try:
        expr = parse_expr(expression, strict=options.strict, max_depth=options.max_depth)
        try:
            rendered = str(expr)
        except RecursionError as e:
            raise ExpressionParseError(
                ErrorKind.NESTING_TOO_DEEP, getattr(expr, "pos", 0)
            ) from e
    except ExpressionError as e:
        print_expression_error(e, show_hint=manifest.repl.show_hints)
        raise typer.Exit(code=1)
    typer.echo(rendered)


@app.command("repl")
def repl_command(
    strict: bool | None = _STRICT_OPTION,
    max_depth: int | None = _MAX_DEPTH_OPTION,
    config: Path | None = _CONFIG_OPTION,
    show_tokens: bool | None = typer.Option(
        None, "--show-tokens/--hide-tokens", help="Echo tokens before each result"
    ),
) -> None:
    """Start the interactive expression loop."""
    manifest = load_cli_manifest(config)
    options = build_options(manifest, strict, max_depth)
    repl_config = manifest.repl
    if show_tokens is not None:
        repl_config.show_tokens = show_tokens
    run_repl(options, repl_config)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)
