"""Package version lookup."""

from __future__ import annotations

import tomllib
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path

DISTRIBUTION = "stylekit"
FALLBACK_VERSION = "0.0.0"

_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def _checkout_version(pyproject: Path) -> str | None:
    """Return ``[project] version`` when ``pyproject`` belongs to this distribution."""
    if not pyproject.is_file():
        return None
    try:
        project = tomllib.loads(pyproject.read_text(encoding="utf-8")).get("project", {})
    except tomllib.TOMLDecodeError:
        return None
    if project.get("name") != DISTRIBUTION:
        return None
    version = project.get("version")
    return version if isinstance(version, str) else None


def get_version(pyproject: Path = _PYPROJECT) -> str:
    """
    Resolve the stylekit version.

    A source checkout reports the version in its pyproject.toml so editable
    installs never go stale. Otherwise the installed distribution metadata is
    used, and ``FALLBACK_VERSION`` when neither is available.
    """
    if version := _checkout_version(pyproject):
        return version
    try:
        return _metadata_version(DISTRIBUTION)
    except PackageNotFoundError:
        return FALLBACK_VERSION


__version__ = get_version()
