"""
CSS custom property generators.

Three flavours of ``:root`` block are produced from a DesignTokens record:

- direct: every token verbatim (colors, fonts, spacing, radii, shadows, effects)
- HSL: colors only, hex values converted to ``H S% L%`` triples
- shadcn: the curated semantic subset used by shadcn/ui style component kits
"""

from __future__ import annotations

from functools import cache

from stylekit.core.color import hex_to_hsl
from stylekit.core.ir import DesignTokens, StyleId
from stylekit.core.store import iter_full_styles


def generate_css_variables(tokens: DesignTokens) -> str:
    """
    Generate CSS custom properties from design tokens.

    Output can be pasted into a global stylesheet.

    Args:
        tokens: Token set to flatten

    Returns:
        ``:root { ... }`` block, one declaration per line
    """
    lines: list[str] = [":root {"]

    # Colors
    for role, value in tokens.color_items():
        lines.append(f"  --{role}: {value};")

    # Typography
    font_family = tokens.typography.font_family
    lines.append(f"  --font-display: {font_family.display};")
    lines.append(f"  --font-body: {font_family.body};")
    if font_family.mono:
        lines.append(f"  --font-mono: {font_family.mono};")

    # Spacing
    for index, value in enumerate(tokens.spacing.scale):
        lines.append(f"  --spacing-{index}: {value}px;")

    # Border radius
    for index, value in enumerate(tokens.border_radius):
        lines.append(f"  --radius-{index}: {value};")

    # Shadows are numbered from 1
    for index, value in enumerate(tokens.shadows, start=1):
        lines.append(f"  --shadow-{index}: {value};")

    # Effects
    if tokens.effects is not None:
        if tokens.effects.blur:
            lines.append(f"  --blur: {tokens.effects.blur};")
        if tokens.effects.backdrop:
            lines.append(f"  --backdrop: {tokens.effects.backdrop};")

    lines.append("}")
    return "\n".join(lines)


def generate_hsl_variables(tokens: DesignTokens) -> str:
    """Generate color custom properties with hex values as HSL triples."""
    lines: list[str] = [":root {"]
    for role, value in tokens.color_items():
        if value.startswith("#"):
            value = hex_to_hsl(value)
        lines.append(f"  --{role}: {value};")
    lines.append("}")
    return "\n".join(lines)


def generate_shadcn_variables(tokens: DesignTokens) -> str:
    """
    Generate shadcn/ui compatible semantic variables.

    Light styles are emitted under ``:root``, dark styles under ``.dark``.
    Optional roles (card, secondary, muted, accent, border) only appear when
    the style defines them. ``--muted-foreground`` carries the muted color
    itself, unlike the other ``*-foreground`` companions which use the
    style's foreground.
    """
    dark = tokens.mode == "dark"
    colors = tokens.colors
    foreground = colors["foreground"]

    lines: list[str] = [".dark {" if dark else ":root {"]

    lines.append(f"  --background: {colors['background']};")
    lines.append(f"  --foreground: {foreground};")

    if card := tokens.color("card"):
        lines.append(f"  --card: {card};")
        lines.append(f"  --card-foreground: {foreground};")

    lines.append(f"  --primary: {colors['primary']};")
    lines.append(f"  --primary-foreground: {'#000000' if dark else '#ffffff'};")

    if secondary := tokens.color("secondary"):
        lines.append(f"  --secondary: {secondary};")
        lines.append(f"  --secondary-foreground: {foreground};")

    if muted := tokens.color("muted"):
        lines.append(f"  --muted: {muted};")
        lines.append(f"  --muted-foreground: {muted};")

    if accent := tokens.color("accent"):
        lines.append(f"  --accent: {accent};")
        lines.append(f"  --accent-foreground: {foreground};")

    if border := tokens.color("border"):
        lines.append(f"  --border: {border};")
        lines.append(f"  --input: {border};")
        lines.append(f"  --ring: {colors['primary']};")

    if tokens.border_radius:
        radius = tokens.border_radius[min(2, len(tokens.border_radius) - 1)]
        lines.append(f"  --radius: {radius};")

    lines.append("}")
    return "\n".join(lines)


@cache
def css_variable_presets() -> dict[StyleId, str]:
    """Pre-built direct CSS variable blocks for every style with tokens."""
    return {style_id: generate_css_variables(tokens) for style_id, tokens in iter_full_styles()}
