"""
exprcalc CLI Utilities.

Shared helpers used across CLI modules: version display, logging setup,
configuration loading, and error reporting.
"""

from __future__ import annotations

import logging
import os
import platform
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from exprcalc._version import get_version
from exprcalc.core.calculator import CalcOptions
from exprcalc.core.errors import ConfigError, ExpressionError
from exprcalc.core.manifest import CalcManifest, find_manifest, load_manifest

err_console = Console(stderr=True, soft_wrap=True)


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"exprcalc version {get_version()}")
        typer.echo(f"Python {platform.python_implementation()} {platform.python_version()}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr at DEBUG when verbose, else at $LOG_LEVEL."""
    if verbose:
        level = logging.DEBUG
    else:
        level_name = os.getenv("LOG_LEVEL", "WARNING").upper()
        level = getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger("exprcalc").setLevel(level)


def load_cli_manifest(config: Path | None) -> CalcManifest:
    """Load the manifest named by --config, or ./exprcalc.toml if present.

    Exits with code 1 on configuration errors.
    """
    path = config if config is not None else find_manifest(Path.cwd())
    if path is None:
        return CalcManifest()
    try:
        return load_manifest(path)
    except ConfigError as e:
        typer.echo(f"Config error: {e}", err=True)
        raise typer.Exit(code=1)


def build_options(
    manifest: CalcManifest, strict: bool | None, max_depth: int | None
) -> CalcOptions:
    """Merge command-line overrides over manifest settings."""
    options = CalcOptions.from_manifest(manifest)
    return CalcOptions(
        strict=options.strict if strict is None else strict,
        max_depth=options.max_depth if max_depth is None else max_depth,
    )


def print_expression_error(error: ExpressionError, *, show_hint: bool = True) -> None:
    """Print an expression error and, optionally, its hint to stderr."""
    err_console.print(f"[red]Error: {escape(error.message)}[/red]")
    hint = error.hint
    if show_hint and hint:
        err_console.print(f"[yellow]Hint: {escape(hint)}[/yellow]")


def format_result(value: float) -> str:
    """Render a result the way Python prints floats (14.0, inf, nan)."""
    return str(value)
