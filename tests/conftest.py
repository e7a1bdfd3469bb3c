"""Shared pytest fixtures for exprcalc tests."""

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def write_manifest(tmp_path: Path) -> Callable[[str], Path]:
    """Return a helper that writes exprcalc.toml into tmp_path."""

    def _write(content: str) -> Path:
        path = tmp_path / "exprcalc.toml"
        path.write_text(content, encoding="utf-8")
        return path

    return _write
