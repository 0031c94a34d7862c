"""Tests for per-style utility CSS."""

from __future__ import annotations

import pytest

from stylekit.core.ir import StyleId
from stylekit.generators.utilities import UTILITY_CLASSES, generate_utility_classes

_WITH_UTILITIES = {
    StyleId.MONOCHROME,
    StyleId.CYBERPUNK,
    StyleId.NEO_BRUTALISM,
    StyleId.SAAS_TECH,
    StyleId.CLAYMORPHISM,
    StyleId.TERMINAL,
}


class TestUtilityClasses:
    def test_table_covers_every_style(self) -> None:
        assert set(UTILITY_CLASSES) == set(StyleId)

    def test_only_core_styles_have_utilities(self) -> None:
        assert {s for s, css in UTILITY_CLASSES.items() if css} == _WITH_UTILITIES

    def test_terminal_cursor(self) -> None:
        assert ".cursor-blink::after" in generate_utility_classes("terminal")

    def test_neo_brutalism_block(self) -> None:
        css = generate_utility_classes("neoBrutalism")
        assert css.startswith("/* Neo Brutalism Utilities */")
        assert ".shadow-brutal {" in css
        assert ".hover-brutal:hover {" in css

    @pytest.mark.parametrize("style_id", ["bauhaus", "aura", "wiseDesign"])
    def test_styles_without_utilities(self, style_id: str) -> None:
        assert generate_utility_classes(style_id) == ""

    def test_unknown_style_is_empty(self) -> None:
        assert generate_utility_classes("doesNotExist") == ""
