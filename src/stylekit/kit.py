"""
Everything needed to build UI in one style, bundled.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from stylekit.core.ir import DesignTokens
from stylekit.core.store import get_style
from stylekit.generators.css import generate_css_variables
from stylekit.generators.prompts import (
    COMPONENT_PROMPTS,
    generate_landing_page_prompt,
    generate_style_prompt,
)
from stylekit.generators.tailwind import TailwindConfig, generate_tailwind_config
from stylekit.generators.utilities import generate_utility_classes


class StyleKit(BaseModel):
    """Tokens plus every generated artifact for a single style."""

    model_config = ConfigDict(frozen=True)

    tokens: DesignTokens
    style_prompt: str
    landing_page_prompt: str
    component_prompts: dict[str, str]
    css_variables: str
    tailwind_config: TailwindConfig
    utility_classes: str


def get_style_kit(style_id: str) -> StyleKit:
    """
    Bundle tokens, prompts, CSS variables and Tailwind config for a style.

    Raises:
        NotFoundError: if the style is unknown or has no token set.
    """
    tokens = get_style(style_id)
    return StyleKit(
        tokens=tokens,
        style_prompt=generate_style_prompt(style_id),
        landing_page_prompt=generate_landing_page_prompt(style_id),
        component_prompts=dict(COMPONENT_PROMPTS),
        css_variables=generate_css_variables(tokens),
        tailwind_config=generate_tailwind_config(style_id),
        utility_classes=generate_utility_classes(style_id),
    )
