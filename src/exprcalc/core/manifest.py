import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from exprcalc.core.errors import ConfigError
from exprcalc.core.expression_lang.parser import DEFAULT_MAX_DEPTH

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "exprcalc.toml"


@dataclass
class LexerConfig:
    """Tokenizer configuration."""

    strict: bool = False  # Reject unrecognized characters instead of skipping them


@dataclass
class ParserConfig:
    """Parser configuration."""

    max_depth: int = DEFAULT_MAX_DEPTH


@dataclass
class ReplConfig:
    """Interactive loop configuration.

    Examples in exprcalc.toml:

        [repl]
        prompt = "calc> "
        show_tokens = true
        show_hints = false
    """

    prompt: str = "> "
    show_tokens: bool = False  # Echo the token list before each result
    show_hints: bool = True  # Print a hint line under errors


@dataclass
class CalcManifest:
    """
    Configuration loaded from exprcalc.toml.

    Every section is optional; missing sections and keys take defaults.
    """

    lexer: LexerConfig = field(default_factory=LexerConfig)
    parser: ParserConfig = field(default_factory=ParserConfig)
    repl: ReplConfig = field(default_factory=ReplConfig)


def find_manifest(start: Path) -> Path | None:
    """Return the exprcalc.toml in *start*, if there is one."""
    candidate = start / MANIFEST_FILENAME
    if candidate.is_file():
        return candidate
    return None


def load_manifest(path: Path) -> CalcManifest:
    """Load and validate an exprcalc.toml file.

    Raises:
        ConfigError: If the file is missing, is not valid TOML, or holds
            values of the wrong type or range.
    """
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    lexer_data = _section(data, "lexer")
    parser_data = _section(data, "parser")
    repl_data = _section(data, "repl")

    lexer_config = LexerConfig(
        strict=_get(lexer_data, "lexer.strict", "strict", bool, False),
    )

    max_depth = _get(parser_data, "parser.max_depth", "max_depth", int, DEFAULT_MAX_DEPTH)
    if max_depth < 1:
        raise ConfigError(f"parser.max_depth must be at least 1, got {max_depth}")
    parser_config = ParserConfig(max_depth=max_depth)

    repl_config = ReplConfig(
        prompt=_get(repl_data, "repl.prompt", "prompt", str, "> "),
        show_tokens=_get(repl_data, "repl.show_tokens", "show_tokens", bool, False),
        show_hints=_get(repl_data, "repl.show_hints", "show_hints", bool, True),
    )

    logger.debug("Loaded config from %s", path)
    return CalcManifest(lexer=lexer_config, parser=parser_config, repl=repl_config)


def _get(section: dict[str, Any], label: str, key: str, expected: type, default: Any) -> Any:
    """Fetch a typed key from a TOML table."""
    value = section.get(key, default)
    # bool is an int subclass; keep `max_depth = true` out
    if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
        raise ConfigError(
            f"{label} must be of type {expected.__name__}, got {type(value).__name__}"
        )
    return value


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ConfigError(f"[{name}] must be a table")
    return section
