"""
Landing page template catalog.

Four static templates (Dexo Media, Velour Fashion, Lowkey Coffee and Wise
Transfer) with lookups by style, source, category and name.
"""

from __future__ import annotations

import logging

from stylekit.core.errors import NotFoundError
from stylekit.core.ir import LandingPageTemplate, TemplateSection, TemplateSummary

from .loader import load_template, load_templates

logger = logging.getLogger(__name__)


def get_templates() -> tuple[LandingPageTemplate, ...]:
    """All templates, in listing order."""
    return load_templates()


def list_templates() -> list[TemplateSummary]:
    return [
        TemplateSummary(
            name=t.name,
            style=t.style,
            source=t.source,
            category=t.category,
            features=t.features,
            section_count=len(t.sections),
        )
        for t in get_templates()
    ]


def get_templates_by_style(style: str) -> list[LandingPageTemplate]:
    return [t for t in get_templates() if t.style == style]


def get_templates_by_source(source: str) -> list[LandingPageTemplate]:
    return [t for t in get_templates() if t.source == source]


def get_templates_by_category(category: str) -> list[LandingPageTemplate]:
    return [t for t in get_templates() if t.category == category]


def get_template_by_name(name: str) -> LandingPageTemplate:
    """
    Look up a template by name, ignoring case.

    Raises:
        NotFoundError: if no template has that name.
    """
    wanted = name.lower()
    for template in get_templates():
        if template.name.lower() == wanted:
            return template
    logger.debug("No template named %r", name)
    raise NotFoundError("template", name, [t.name for t in get_templates()])


def get_section_examples(section_name: str) -> list[TemplateSection]:
    """Every section called ``section_name``, across templates in listing order."""
    return [
        section
        for template in get_templates()
        for section in template.sections
        if section.name == section_name
    ]


__all__ = [
    "get_templates",
    "list_templates",
    "get_templates_by_style",
    "get_templates_by_source",
    "get_templates_by_category",
    "get_template_by_name",
    "get_section_examples",
    "load_template",
    "load_templates",
]
