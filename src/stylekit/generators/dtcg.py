"""
W3C Design Token Community Group (DTCG) tokens.json export.

Generates a DTCG-compliant tokens.json document from a DesignTokens record.
See: https://design-tokens.github.io/community-group/format/
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from stylekit.core.ir import DesignTokens

logger = logging.getLogger(__name__)


def _token(type_: str, value: Any) -> dict[str, Any]:
    return {"$type": type_, "$value": value}


def generate_dtcg_tokens(tokens: DesignTokens) -> dict[str, Any]:
    """Generate W3C DTCG format design tokens from a DesignTokens record.

    Groups tokens into: color, fontFamily, fontSize, fontWeight, dimension
    (spacing and radii) and shadow.

    Args:
        tokens: Token set to export.

    Returns:
        DTCG-formatted dict suitable for writing as tokens.json.
    """
    dtcg: dict[str, Any] = {
        "$description": f"{tokens.name}: {tokens.description}",
    }

    dtcg["color"] = {role: _token("color", value) for role, value in tokens.color_items()}

    font_family = tokens.typography.font_family
    family_group = {
        "display": _token("fontFamily", font_family.display),
        "body": _token("fontFamily", font_family.body),
    }
    if font_family.mono:
        family_group["mono"] = _token("fontFamily", font_family.mono)
    dtcg["fontFamily"] = family_group

    dtcg["fontSize"] = {
        str(index): _token("dimension", size)
        for index, size in enumerate(tokens.typography.font_sizes)
    }
    dtcg["fontWeight"] = {
        str(weight): _token("fontWeight", weight) for weight in tokens.typography.font_weights
    }

    # Dimension group (spacing + radii)
    dimension_group: dict[str, Any] = {}
    for index, value in enumerate(tokens.spacing.scale):
        dimension_group[f"spacing-{index}"] = _token("dimension", f"{value}px")
    for index, value in enumerate(tokens.border_radius):
        dimension_group[f"radius-{index}"] = _token("dimension", value)
    dtcg["dimension"] = dimension_group

    dtcg["shadow"] = {
        f"shadow-{index}": _token("shadow", value)
        for index, value in enumerate(tokens.shadows, start=1)
    }

    return dtcg


def export_dtcg_file(tokens: DesignTokens, output_path: Path) -> Path:
    """Generate DTCG tokens and write to a JSON file.

    Args:
        tokens: Token set to export.
        output_path: Path to write tokens.json.

    Returns:
        Path to the written file.
    """
    document = generate_dtcg_tokens(tokens)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(document, indent=2),
        encoding="utf-8",
    )
    logger.debug("Wrote DTCG tokens to %s", output_path)

    return output_path
