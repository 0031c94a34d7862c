"""
stylekit intermediate representation.

Frozen pydantic models for design tokens, catalog entries and landing page
templates.
"""

from .templates import (
    LandingPageTemplate,
    TemplateCategory,
    TemplateSection,
    TemplateSource,
    TemplateSummary,
)
from .tokens import (
    REQUIRED_COLOR_ROLES,
    DesignTokens,
    Effects,
    FontFamily,
    FullStyle,
    MetadataOnlyStyle,
    Spacing,
    StyleEntry,
    StyleId,
    StyleMetadata,
    StyleMode,
    Typography,
    TypographyType,
)

__all__ = [
    # Tokens
    "DesignTokens",
    "Effects",
    "FontFamily",
    "Spacing",
    "Typography",
    "REQUIRED_COLOR_ROLES",
    # Enums
    "StyleId",
    "StyleMode",
    "TypographyType",
    # Catalog entries
    "StyleMetadata",
    "FullStyle",
    "MetadataOnlyStyle",
    "StyleEntry",
    # Templates
    "LandingPageTemplate",
    "TemplateCategory",
    "TemplateSection",
    "TemplateSource",
    "TemplateSummary",
]
