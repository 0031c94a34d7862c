"""Tests for the bundled style kit."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from stylekit.core.errors import NotFoundError
from stylekit.core.store import get_style
from stylekit.generators.css import generate_css_variables
from stylekit.generators.prompts import COMPONENT_PROMPTS, generate_style_prompt
from stylekit.generators.tailwind import generate_tailwind_config
from stylekit.kit import get_style_kit


class TestStyleKit:
    def test_bundle_contents(self) -> None:
        kit = get_style_kit("terminal")
        assert kit.tokens is get_style("terminal")
        assert kit.style_prompt == generate_style_prompt("terminal")
        assert kit.css_variables == generate_css_variables(get_style("terminal"))
        assert kit.tailwind_config == generate_tailwind_config("terminal")
        assert ".cursor-blink::after" in kit.utility_classes
        assert kit.component_prompts == COMPONENT_PROMPTS

    def test_landing_prompt_extends_style_prompt(self) -> None:
        kit = get_style_kit("saasTech")
        assert kit.landing_page_prompt.startswith(kit.style_prompt)

    def test_style_without_utilities(self) -> None:
        assert get_style_kit("bauhaus").utility_classes == ""

    def test_frozen(self) -> None:
        kit = get_style_kit("monochrome")
        with pytest.raises(ValidationError):
            kit.css_variables = ""  # type: ignore[misc]

    def test_unknown_style(self) -> None:
        with pytest.raises(NotFoundError):
            get_style_kit("doesNotExist")

    def test_metadata_only_style(self) -> None:
        with pytest.raises(NotFoundError):
            get_style_kit("wiseDesign")
