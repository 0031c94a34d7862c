"""
stylekit.toml project manifest.

Example:

    [project]
    style = "saasTech"
    output_dir = "design"

    [tailwind]
    content = ["./src/**/*.{js,ts,jsx,tsx,mdx}"]
    plugins = ["@tailwindcss/typography"]

    [logging]
    level = "INFO"

    [overrides.colors]
    primary = "#FF0000"
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .errors import ConfigError

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "stylekit.toml"
LOG_LEVEL_ENV = "STYLEKIT_LOG_LEVEL"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ProjectConfig:
    """Default style and export location."""

    style: str | None = None
    output_dir: str = "design"


@dataclass
class TailwindOptions:
    """Options forwarded to the generated tailwind.config.js."""

    content: list[str] | None = None  # None = generator defaults
    plugins: list[str] = field(default_factory=list)


@dataclass
class LoggingConfig:
    level: str = "WARNING"


@dataclass
class TokenOverrides:
    """Token values layered over the selected style."""

    colors: dict[str, str] = field(default_factory=dict)
    shadows: list[str] | None = None
    border_radius: list[str] | None = None

    def is_empty(self) -> bool:
        return not self.colors and self.shadows is None and self.border_radius is None


@dataclass
class StylekitManifest:
    project: ProjectConfig = field(default_factory=ProjectConfig)
    tailwind: TailwindOptions = field(default_factory=TailwindOptions)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    overrides: TokenOverrides = field(default_factory=TokenOverrides)
    path: Path | None = None

    @property
    def log_level(self) -> str:
        """Effective log level; the environment wins over the manifest."""
        env_level = os.environ.get(LOG_LEVEL_ENV)
        if env_level:
            return env_level.upper()
        return self.logging.level


def _str_list(value: Any, key: str) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"{key} must be a list of strings")
    return list(value)


def _table(data: dict[str, Any], key: str) -> dict[str, Any]:
    value = data.get(key, {})
    if not isinstance(value, dict):
        raise ConfigError(f"[{key}] must be a table")
    return value


def load_manifest(path: Path) -> StylekitManifest:
    """
    Load a stylekit.toml file.

    A missing file yields the default manifest.

    Raises:
        ConfigError: if the file is not valid TOML or a value has the wrong type.
    """
    if not path.exists():
        logger.debug("No manifest at %s, using defaults", path)
        return StylekitManifest()

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    project = _table(data, "project")
    tailwind = _table(data, "tailwind")
    logging_data = _table(data, "logging")
    overrides = _table(data, "overrides")

    style = project.get("style")
    if style is not None and not isinstance(style, str):
        raise ConfigError("project.style must be a string")

    content = tailwind.get("content")
    level = str(logging_data.get("level", "WARNING")).upper()
    if level not in _LOG_LEVELS:
        raise ConfigError(f"logging.level must be one of {', '.join(_LOG_LEVELS)}")

    colors = overrides.get("colors", {})
    if not isinstance(colors, dict) or not all(isinstance(v, str) for v in colors.values()):
        raise ConfigError("[overrides.colors] must map role names to strings")
    shadows = overrides.get("shadows")
    border_radius = overrides.get("border_radius")

    manifest = StylekitManifest(
        project=ProjectConfig(
            style=style,
            output_dir=str(project.get("output_dir", "design")),
        ),
        tailwind=TailwindOptions(
            content=_str_list(content, "tailwind.content") if content is not None else None,
            plugins=_str_list(tailwind.get("plugins", []), "tailwind.plugins"),
        ),
        logging=LoggingConfig(level=level),
        overrides=TokenOverrides(
            colors=dict(colors),
            shadows=_str_list(shadows, "overrides.shadows") if shadows is not None else None,
            border_radius=(
                _str_list(border_radius, "overrides.border_radius")
                if border_radius is not None
                else None
            ),
        ),
        path=path,
    )
    logger.debug("Loaded manifest from %s", path)
    return manifest


def find_manifest(start: Path | None = None) -> Path | None:
    """Walk up from ``start`` (default: cwd) looking for stylekit.toml."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / MANIFEST_FILENAME
        if candidate.is_file():
            return candidate
    return None
