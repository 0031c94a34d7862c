"""
stylekit - design-token catalog and style generators.

A catalog of named visual styles (colors, typography, spacing, radii,
shadows), generators that turn a style into CSS custom properties, a
Tailwind config, utility CSS and AI prompts, and a small set of landing
page templates and component patterns.

Usage:
    from stylekit import get_style, generate_css_variables

    tokens = get_style("neoBrutalism")
    print(generate_css_variables(tokens))
"""

from stylekit._version import __version__
from stylekit.core import (
    NotFoundError,
    StylekitError,
    get_metadata,
    get_style,
    get_styles_by_category,
    get_styles_by_mode,
    get_styles_by_type,
    hex_to_hsl,
    list_categories,
    list_styles,
    search_styles,
)
from stylekit.core.ir import DesignTokens, StyleId, StyleMetadata
from stylekit.generators import (
    generate_component_prompt,
    generate_css_variables,
    generate_hsl_variables,
    generate_landing_page_prompt,
    generate_shadcn_variables,
    generate_style_prompt,
    generate_tailwind_config,
    generate_tailwind_config_string,
    generate_utility_classes,
)
from stylekit.kit import StyleKit, get_style_kit
from stylekit.templates import get_template_by_name, get_templates, list_templates

__all__ = [
    "__version__",
    # Types
    "DesignTokens",
    "StyleId",
    "StyleMetadata",
    "StyleKit",
    # Errors
    "StylekitError",
    "NotFoundError",
    # Catalog
    "get_style",
    "get_metadata",
    "list_styles",
    "list_categories",
    "get_styles_by_category",
    "get_styles_by_mode",
    "get_styles_by_type",
    "search_styles",
    "hex_to_hsl",
    # Generators
    "generate_css_variables",
    "generate_hsl_variables",
    "generate_shadcn_variables",
    "generate_tailwind_config",
    "generate_tailwind_config_string",
    "generate_utility_classes",
    "generate_style_prompt",
    "generate_landing_page_prompt",
    "generate_component_prompt",
    "get_style_kit",
    # Templates
    "get_templates",
    "list_templates",
    "get_template_by_name",
]
