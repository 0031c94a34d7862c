"""
Write generated artifacts for a style to disk.

Output layout (one directory per export):

    variables.css        direct CSS custom properties
    variables.hsl.css    colors as HSL triples
    shadcn.css           shadcn/ui semantic variables
    utilities.css        bespoke utility classes (only if the style has any)
    tailwind.config.js   Tailwind config module
    prompt.md            landing page prompt for an AI assistant
    tokens.json          W3C DTCG tokens
"""

from __future__ import annotations

import logging
from pathlib import Path

from stylekit.core.manifest import StylekitManifest
from stylekit.core.resolver import resolve_tokens
from stylekit.generators.css import (
    generate_css_variables,
    generate_hsl_variables,
    generate_shadcn_variables,
)
from stylekit.generators.dtcg import export_dtcg_file
from stylekit.generators.prompts import generate_landing_page_prompt
from stylekit.generators.tailwind import generate_tailwind_config_string
from stylekit.generators.utilities import generate_utility_classes

logger = logging.getLogger(__name__)


def _write(path: Path, content: str) -> Path:
    path.write_text(content + "\n", encoding="utf-8")
    logger.debug("Wrote %s", path)
    return path


def export_style(
    style_id: str,
    output_dir: Path,
    *,
    manifest: StylekitManifest | None = None,
) -> list[Path]:
    """
    Generate and write every artifact for a style.

    Args:
        style_id: Catalog style identifier
        output_dir: Directory to write into (created if missing)
        manifest: Project manifest supplying token overrides and Tailwind
            content/plugins

    Returns:
        Paths of the files written, in write order

    Raises:
        NotFoundError: if the style is unknown or has no token set.
    """
    manifest = manifest or StylekitManifest()
    tokens = resolve_tokens(style_id, manifest.overrides)

    output_dir.mkdir(parents=True, exist_ok=True)
    written = [
        _write(output_dir / "variables.css", generate_css_variables(tokens)),
        _write(output_dir / "variables.hsl.css", generate_hsl_variables(tokens)),
        _write(output_dir / "shadcn.css", generate_shadcn_variables(tokens)),
    ]

    utilities = generate_utility_classes(style_id)
    if utilities:
        written.append(_write(output_dir / "utilities.css", utilities))

    written.append(
        _write(
            output_dir / "tailwind.config.js",
            generate_tailwind_config_string(
                style_id,
                content=manifest.tailwind.content,
                plugins=manifest.tailwind.plugins,
                tokens=tokens,
            ),
        )
    )
    written.append(
        _write(output_dir / "prompt.md", generate_landing_page_prompt(style_id, tokens=tokens))
    )
    written.append(export_dtcg_file(tokens, output_dir / "tokens.json"))

    logger.info("Exported %s to %s (%d files)", style_id, output_dir, len(written))
    return written
