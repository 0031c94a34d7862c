"""
Landing page template IR types.

Templates are static fixtures: metadata plus an ordered list of named HTML
sections. Nothing is computed over them beyond lookup and filtering.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .tokens import StyleId


class TemplateSource(StrEnum):
    """Where a template was collected from."""

    CARAMELL = "caramell"
    AURA = "aura"
    DESIGNPROMPTS = "designprompts"
    CUSTOM = "custom"


class TemplateCategory(StrEnum):
    """Kind of site a template is built for."""

    AGENCY = "agency"
    ECOMMERCE = "ecommerce"
    SAAS = "saas"
    PORTFOLIO = "portfolio"
    PRODUCT = "product"
    BRAND = "brand"


class TemplateSection(BaseModel):
    """One named HTML fragment of a template (hero, pricing, footer, ...)."""

    model_config = ConfigDict(frozen=True)

    name: str
    html: str
    description: str | None = None


class LandingPageTemplate(BaseModel):
    """A complete landing page template."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    source: TemplateSource
    style: StyleId = Field(description="Catalog style the template is drawn in")
    category: TemplateCategory
    features: tuple[str, ...] = ()
    sections: tuple[TemplateSection, ...] = ()
    tailwind_config: dict[str, Any] | None = None
    css_variables: dict[str, str] | None = None
    fonts: tuple[str, ...] = ()
    file_path: str | None = None

    def get_section(self, name: str) -> TemplateSection | None:
        """Get a section by name."""
        for section in self.sections:
            if section.name == name:
                return section
        return None


class TemplateSummary(BaseModel):
    """Listing row for a template."""

    model_config = ConfigDict(frozen=True)

    name: str
    style: StyleId
    source: TemplateSource
    category: TemplateCategory
    features: tuple[str, ...]
    section_count: int
