"""Single source of truth for the exprcalc version."""

import tomllib
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path

_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def get_version() -> str:
    """Return [project].version from a source checkout, else the installed metadata."""
    if _PYPROJECT.is_file():
        with _PYPROJECT.open("rb") as f:
            project = tomllib.load(f).get("project", {})
        if isinstance(project.get("version"), str):
            return project["version"]
    try:
        return _metadata_version("exprcalc")
    except PackageNotFoundError:
        return "0.0.0"
