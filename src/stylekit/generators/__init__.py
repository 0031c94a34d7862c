"""
stylekit generators.

Pure functions that turn design tokens into CSS, Tailwind config, utility
CSS, DTCG JSON and prompt text.
"""

from .css import (
    css_variable_presets,
    generate_css_variables,
    generate_hsl_variables,
    generate_shadcn_variables,
)
from .dtcg import export_dtcg_file, generate_dtcg_tokens
from .prompts import (
    BASE_SYSTEM_PROMPT,
    COMPONENT_PROMPTS,
    STYLE_GUIDELINES,
    generate_component_prompt,
    generate_landing_page_prompt,
    generate_style_prompt,
    get_style_guidelines,
)
from .tailwind import (
    TailwindConfig,
    TailwindTheme,
    extract_theme_object,
    generate_tailwind_config,
    generate_tailwind_config_string,
    generate_tailwind_theme,
    tailwind_presets,
)
from .utilities import UTILITY_CLASSES, generate_utility_classes

__all__ = [
    # CSS
    "generate_css_variables",
    "generate_hsl_variables",
    "generate_shadcn_variables",
    "css_variable_presets",
    # Tailwind
    "TailwindConfig",
    "TailwindTheme",
    "generate_tailwind_theme",
    "generate_tailwind_config",
    "generate_tailwind_config_string",
    "extract_theme_object",
    "tailwind_presets",
    # Utilities
    "UTILITY_CLASSES",
    "generate_utility_classes",
    # Prompts
    "BASE_SYSTEM_PROMPT",
    "COMPONENT_PROMPTS",
    "STYLE_GUIDELINES",
    "generate_style_prompt",
    "generate_landing_page_prompt",
    "generate_component_prompt",
    "get_style_guidelines",
    # DTCG
    "generate_dtcg_tokens",
    "export_dtcg_file",
]
