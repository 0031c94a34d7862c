"""
Loader for the packaged landing page templates.

Each template lives in its own directory under ``data/``: a
``template.yaml`` manifest with the metadata and ordered section list, and
one ``<section>.html`` file per section.
"""

from __future__ import annotations

import logging
from functools import cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from stylekit.core.errors import CatalogError
from stylekit.core.ir import LandingPageTemplate

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"
MANIFEST_FILE = "template.yaml"

# Listing order
TEMPLATE_DIRS: tuple[str, ...] = (
    "dexo_media",
    "velour_fashion",
    "lowkey_coffee",
    "wise_transfer",
)


def _read_manifest(template_dir: Path) -> dict[str, Any]:
    manifest_path = template_dir / MANIFEST_FILE
    try:
        data = yaml.safe_load(manifest_path.read_text(encoding="utf-8"))
    except OSError as e:
        raise CatalogError(f"Cannot read template manifest {manifest_path}: {e}") from e
    except yaml.YAMLError as e:
        raise CatalogError(f"Invalid YAML in {manifest_path}: {e}") from e
    if not isinstance(data, dict):
        raise CatalogError(f"Empty or invalid template manifest: {manifest_path}")
    return data


def _read_section_html(template_dir: Path, name: str) -> str:
    html_path = template_dir / f"{name}.html"
    try:
        return html_path.read_text(encoding="utf-8").rstrip("\n")
    except OSError as e:
        raise CatalogError(f"Missing section HTML {html_path}: {e}") from e


def load_template(template_dir: Path) -> LandingPageTemplate:
    """
    Load one template directory.

    Raises:
        CatalogError: if the manifest or a section file is missing or invalid.
    """
    data = _read_manifest(template_dir)
    sections = []
    for section in data.get("sections") or []:
        if not isinstance(section, dict) or "name" not in section:
            raise CatalogError(f"Section entries need a name in {template_dir / MANIFEST_FILE}")
        sections.append(
            {
                "name": section["name"],
                "description": section.get("description"),
                "html": _read_section_html(template_dir, section["name"]),
            }
        )
    data["sections"] = sections

    try:
        template = LandingPageTemplate.model_validate(data)
    except ValidationError as e:
        raise CatalogError(f"Invalid template manifest in {template_dir}: {e}") from e

    logger.debug("Loaded template %r (%d sections)", template.name, len(template.sections))
    return template


@cache
def load_templates(data_dir: Path = DATA_DIR) -> tuple[LandingPageTemplate, ...]:
    """Load every packaged template, in listing order. Loaded once per directory."""
    return tuple(load_template(data_dir / name) for name in TEMPLATE_DIRS)
