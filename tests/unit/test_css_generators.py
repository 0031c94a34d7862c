"""Tests for CSS custom property generators."""

from __future__ import annotations

from stylekit.core.ir import DesignTokens, Effects, StyleId
from stylekit.core.store import get_style, iter_full_styles
from stylekit.generators.css import (
    css_variable_presets,
    generate_css_variables,
    generate_hsl_variables,
    generate_shadcn_variables,
)


class TestDirectVariables:
    def test_minimal_tokens_exact_output(self, minimal_tokens: DesignTokens) -> None:
        assert generate_css_variables(minimal_tokens) == "\n".join(
            [
                ":root {",
                "  --primary: #0052FF;",
                "  --background: #FFFFFF;",
                "  --foreground: #000000;",
                "  --font-display: Inter, sans-serif;",
                "  --font-body: Inter, sans-serif;",
                "  --spacing-0: 0px;",
                "  --spacing-1: 4px;",
                "  --spacing-2: 8px;",
                "}",
            ]
        )

    def test_wrapped_in_root(self) -> None:
        for _, tokens in iter_full_styles():
            css = generate_css_variables(tokens)
            assert css.startswith(":root {\n")
            assert css.endswith("\n}")

    def test_colors_in_declaration_order(self) -> None:
        css = generate_css_variables(get_style("monochrome"))
        lines = css.splitlines()
        assert lines[1] == "  --primary: #000000;"
        assert lines[2] == "  --secondary: #525252;"

    def test_radii_zero_indexed_shadows_one_indexed(self) -> None:
        css = generate_css_variables(get_style("neoBrutalism"))
        assert "  --radius-0: 0px;" in css
        assert "  --radius-3: 12px;" in css
        assert "  --shadow-1: rgb(0, 0, 0) 4px 4px 0px 0px;" in css
        assert "--shadow-0" not in css

    def test_mono_font_only_when_defined(self) -> None:
        assert "--font-mono" in generate_css_variables(get_style("monochrome"))
        assert "--font-mono" not in generate_css_variables(get_style("neoBrutalism"))

    def test_effects(self, minimal_tokens: DesignTokens) -> None:
        tokens = minimal_tokens.model_copy(
            update={"effects": Effects(blur="blur(4px)", backdrop="blur(12px)")}
        )
        css = generate_css_variables(tokens)
        assert "  --blur: blur(4px);" in css
        assert "  --backdrop: blur(12px);" in css

    def test_presets_cover_full_styles(self) -> None:
        presets = css_variable_presets()
        assert StyleId.WISE_DESIGN not in presets
        assert len(presets) == 33
        assert presets[StyleId.TERMINAL] == generate_css_variables(get_style("terminal"))


class TestHslVariables:
    def test_minimal_tokens_exact_output(self, minimal_tokens: DesignTokens) -> None:
        assert generate_hsl_variables(minimal_tokens) == "\n".join(
            [
                ":root {",
                "  --primary: 221 100% 50%;",
                "  --background: 0 0% 100%;",
                "  --foreground: 0 0% 0%;",
                "}",
            ]
        )

    def test_non_hex_values_pass_through(self) -> None:
        css = generate_hsl_variables(get_style("cyberpunk"))
        assert "  --glow: rgba(0, 255, 136, 0.3);" in css
        assert "  --primary: 152 100% 50%;" in css

    def test_colors_only(self) -> None:
        css = generate_hsl_variables(get_style("monochrome"))
        assert "--font" not in css
        assert "--spacing" not in css


class TestShadcnVariables:
    def test_light_style(self) -> None:
        css = generate_shadcn_variables(get_style("neoBrutalism"))
        assert css == "\n".join(
            [
                ":root {",
                "  --background: #FFFDF5;",
                "  --foreground: #000000;",
                "  --primary: #FFD93D;",
                "  --primary-foreground: #ffffff;",
                "  --secondary: #FF6B6B;",
                "  --secondary-foreground: #000000;",
                "  --muted: #525252;",
                "  --muted-foreground: #525252;",
                "  --accent: #C4B5FD;",
                "  --accent-foreground: #000000;",
                "  --border: #000000;",
                "  --input: #000000;",
                "  --ring: #FFD93D;",
                "  --radius: 8px;",
                "}",
            ]
        )

    def test_dark_style_uses_dark_selector(self) -> None:
        css = generate_shadcn_variables(get_style("cyberpunk"))
        assert css.startswith(".dark {")
        assert "  --primary-foreground: #000000;" in css
        assert "  --card: #121218;" in css
        assert "  --card-foreground: #E0E0E0;" in css
        assert "  --radius: 4px;" in css

    def test_single_radius_is_used(self) -> None:
        assert "  --radius: 0px;" in generate_shadcn_variables(get_style("monochrome"))

    def test_optional_roles_omitted(self, minimal_tokens: DesignTokens) -> None:
        css = generate_shadcn_variables(minimal_tokens)
        assert css == "\n".join(
            [
                ":root {",
                "  --background: #FFFFFF;",
                "  --foreground: #000000;",
                "  --primary: #0052FF;",
                "  --primary-foreground: #ffffff;",
                "}",
            ]
        )
