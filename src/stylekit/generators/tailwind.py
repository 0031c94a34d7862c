"""
Tailwind CSS theme and config generators.

``generate_tailwind_theme`` projects a DesignTokens record onto the keys of
Tailwind's ``theme.extend``; ``generate_tailwind_config_string`` serializes
that into a ``tailwind.config.js`` source file. Compatible with Tailwind v3
config files.
"""

from __future__ import annotations

import json
import re
from functools import cache
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from stylekit.core.ir import DesignTokens, StyleId
from stylekit.core.store import get_style, iter_full_styles

# Index -> Tailwind name; indices past the end use the stringified index
BORDER_RADIUS_NAMES: tuple[str, ...] = (
    "none",
    "sm",
    "DEFAULT",
    "md",
    "lg",
    "xl",
    "2xl",
    "3xl",
    "full",
)
BOX_SHADOW_NAMES: tuple[str, ...] = ("sm", "DEFAULT", "md", "lg", "xl", "2xl")

DEFAULT_CONTENT: tuple[str, ...] = (
    "./src/**/*.{js,ts,jsx,tsx,mdx}",
    "./app/**/*.{js,ts,jsx,tsx,mdx}",
    "./components/**/*.{js,ts,jsx,tsx,mdx}",
)

_CONFIG_HEADER = "/** @type {import('tailwindcss').Config} */"
_QUOTED_IDENT_KEY = re.compile(r'^(\s*)"([A-Za-z_$][\w$]*)":', re.MULTILINE)
_BARE_IDENT_KEY = re.compile(r"^(\s*)([A-Za-z_$][\w$]*):", re.MULTILINE)
_EXTEND_MARKER = "extend: "


# =============================================================================
# Models
# =============================================================================


class TailwindTheme(BaseModel):
    """Tailwind ``theme.extend`` object; dump with ``by_alias=True`` for JS keys."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    colors: dict[str, str]
    font_family: dict[str, list[str]] = Field(alias="fontFamily")
    font_size: dict[str, str] = Field(alias="fontSize")
    spacing: dict[str, str]
    border_radius: dict[str, str] = Field(alias="borderRadius")
    box_shadow: dict[str, str] = Field(alias="boxShadow")


class TailwindThemeSection(BaseModel):
    model_config = ConfigDict(frozen=True)

    extend: TailwindTheme


class TailwindConfig(BaseModel):
    """Structural tailwind config: dark mode strategy plus theme extension."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    dark_mode: Literal["class", "media"] = Field(alias="darkMode")
    theme: TailwindThemeSection


# =============================================================================
# Generators
# =============================================================================


def _split_stack(stack: str) -> list[str]:
    return [family.strip() for family in stack.split(",")]


def _named(values: tuple[str, ...], names: tuple[str, ...]) -> dict[str, str]:
    return {
        names[index] if index < len(names) else str(index): value
        for index, value in enumerate(values)
    }


def generate_tailwind_theme(tokens: DesignTokens) -> TailwindTheme:
    """
    Generate a Tailwind theme extension from design tokens.

    Font sizes and spacing are keyed by their index in the token scales;
    radii and shadows use Tailwind's size names.
    """
    font_family = {
        "display": _split_stack(tokens.typography.font_family.display),
        "body": _split_stack(tokens.typography.font_family.body),
    }
    if tokens.typography.font_family.mono:
        font_family["mono"] = _split_stack(tokens.typography.font_family.mono)

    return TailwindTheme(
        colors=dict(tokens.color_items()),
        font_family=font_family,
        font_size={str(i): size for i, size in enumerate(tokens.typography.font_sizes)},
        spacing={str(i): f"{value}px" for i, value in enumerate(tokens.spacing.scale)},
        border_radius=_named(tokens.border_radius, BORDER_RADIUS_NAMES),
        box_shadow=_named(tokens.shadows, BOX_SHADOW_NAMES),
    )


def _dark_mode(tokens: DesignTokens) -> Literal["class", "media"]:
    return "class" if tokens.mode == "dark" else "media"


def generate_tailwind_config(
    style_id: str, *, tokens: DesignTokens | None = None
) -> TailwindConfig:
    """
    Generate the structural Tailwind config for a catalog style.

    Args:
        style_id: Catalog style identifier
        tokens: Resolved tokens to use instead of the catalog record
    """
    if tokens is None:
        tokens = get_style(style_id)
    return TailwindConfig(
        dark_mode=_dark_mode(tokens),
        theme=TailwindThemeSection(extend=generate_tailwind_theme(tokens)),
    )


def _js_string(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def _theme_object_source(theme: TailwindTheme) -> str:
    """JSON for the theme with identifier keys unquoted, indented under ``extend:``."""
    text = json.dumps(theme.model_dump(by_alias=True), indent=2)
    text = _QUOTED_IDENT_KEY.sub(r"\1\2:", text)
    return text.replace("\n", "\n    ")


def generate_tailwind_config_string(
    style_id: str,
    content: list[str] | None = None,
    plugins: list[str] | None = None,
    *,
    tokens: DesignTokens | None = None,
) -> str:
    """
    Generate ``tailwind.config.js`` source for a catalog style.

    Args:
        style_id: Catalog style identifier
        content: Content globs (defaults to src/, app/ and components/)
        plugins: npm package names, emitted as ``require()`` calls
        tokens: Resolved tokens to use instead of the catalog record

    Returns:
        JavaScript module source
    """
    config = generate_tailwind_config(style_id, tokens=tokens)
    globs = DEFAULT_CONTENT if content is None else content

    lines: list[str] = [
        _CONFIG_HEADER,
        "module.exports = {",
        f"  darkMode: '{config.dark_mode}',",
        "  content: [",
    ]
    lines.extend(f"    {_js_string(glob)}," for glob in globs)
    lines.append("  ],")
    lines.append("  theme: {")
    lines.append(f"    {_EXTEND_MARKER}{_theme_object_source(config.theme.extend)},")
    lines.append("  },")
    if plugins:
        lines.append("  plugins: [")
        lines.extend(f"    require({_js_string(plugin)})," for plugin in plugins)
        lines.append("  ],")
    else:
        lines.append("  plugins: [],")
    lines.append("};")
    return "\n".join(lines)


def extract_theme_object(source: str) -> dict[str, Any]:
    """
    Parse the ``theme.extend`` object back out of generated config source.

    Bare identifier keys are re-quoted so the object reads as JSON again.

    Raises:
        ValueError: if the source has no ``extend:`` object.
    """
    start = source.find(_EXTEND_MARKER)
    if start == -1:
        raise ValueError("config source has no theme.extend object")
    body = source[start + len(_EXTEND_MARKER) :]
    body = _BARE_IDENT_KEY.sub(r'\1"\2":', body)
    theme, _ = json.JSONDecoder().raw_decode(body)
    return theme


@cache
def tailwind_presets() -> dict[StyleId, str]:
    """Pre-built tailwind.config.js sources for every style with tokens."""
    return {style_id: generate_tailwind_config_string(style_id) for style_id, _ in iter_full_styles()}
