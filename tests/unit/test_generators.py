"""Every generator returns identical output for identical input."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import pytest

from stylekit.core.store import get_style, iter_full_styles
from stylekit.generators.css import (
    generate_css_variables,
    generate_hsl_variables,
    generate_shadcn_variables,
)
from stylekit.generators.dtcg import generate_dtcg_tokens
from stylekit.generators.prompts import (
    generate_component_prompt,
    generate_landing_page_prompt,
    generate_style_prompt,
)
from stylekit.generators.tailwind import generate_tailwind_config_string, generate_tailwind_theme
from stylekit.generators.utilities import generate_utility_classes

FULL_STYLE_IDS = [style_id.value for style_id, _ in iter_full_styles()]

GENERATORS: dict[str, Callable[[str], Any]] = {
    "css": lambda s: generate_css_variables(get_style(s)),
    "hsl": lambda s: generate_hsl_variables(get_style(s)),
    "shadcn": lambda s: generate_shadcn_variables(get_style(s)),
    "dtcg": lambda s: json.dumps(generate_dtcg_tokens(get_style(s))),
    "tailwind_theme": lambda s: generate_tailwind_theme(get_style(s)).model_dump(by_alias=True),
    "tailwind_config": generate_tailwind_config_string,
    "utilities": generate_utility_classes,
    "style_prompt": generate_style_prompt,
    "landing_prompt": generate_landing_page_prompt,
    "component_prompt": lambda s: generate_component_prompt(s, "hero"),
}


class TestDeterminism:
    @pytest.mark.parametrize("generator", list(GENERATORS), ids=list(GENERATORS))
    @pytest.mark.parametrize("style_id", FULL_STYLE_IDS)
    def test_repeated_calls_match(self, style_id: str, generator: str) -> None:
        generate = GENERATORS[generator]
        assert generate(style_id) == generate(style_id)

    @pytest.mark.parametrize("style_id", FULL_STYLE_IDS)
    def test_dtcg_key_order_is_stable(self, style_id: str) -> None:
        first = generate_dtcg_tokens(get_style(style_id))
        second = generate_dtcg_tokens(get_style(style_id))
        assert json.dumps(first) == json.dumps(second)
        assert list(first["color"]) == list(second["color"])
