"""Tests for Tailwind theme and config generation."""

from __future__ import annotations

import pytest

from stylekit.core.errors import NotFoundError
from stylekit.core.ir import DesignTokens, StyleId
from stylekit.core.store import get_style, iter_full_styles
from stylekit.generators.tailwind import (
    DEFAULT_CONTENT,
    extract_theme_object,
    generate_tailwind_config,
    generate_tailwind_config_string,
    generate_tailwind_theme,
    tailwind_presets,
)


class TestTheme:
    def test_colors_copied(self) -> None:
        theme = generate_tailwind_theme(get_style("neoBrutalism"))
        assert theme.colors["primary"] == "#FFD93D"

    def test_font_stacks_split(self) -> None:
        theme = generate_tailwind_theme(get_style("monochrome"))
        assert theme.font_family["body"] == ["ui-sans-serif", "system-ui", "sans-serif"]
        assert theme.font_family["display"][-1] == "serif"
        assert "mono" in theme.font_family

    def test_mono_omitted_when_absent(self) -> None:
        theme = generate_tailwind_theme(get_style("neoBrutalism"))
        assert set(theme.font_family) == {"display", "body"}

    def test_index_keys(self) -> None:
        theme = generate_tailwind_theme(get_style("neoBrutalism"))
        assert theme.font_size["0"] == "12px"
        assert theme.spacing["0"] == "0px"
        assert theme.spacing["1"] == "4px"

    def test_named_radii_and_shadows(self) -> None:
        theme = generate_tailwind_theme(get_style("neoBrutalism"))
        assert list(theme.border_radius) == ["none", "sm", "DEFAULT", "md"]
        assert list(theme.box_shadow) == ["sm", "DEFAULT", "md"]
        assert theme.box_shadow["DEFAULT"] == "rgb(0, 0, 0) 6px 6px 0px 0px"

    def test_names_run_out_to_indices(self, minimal_tokens: DesignTokens) -> None:
        tokens = minimal_tokens.model_copy(
            update={
                "border_radius": tuple(f"{i}px" for i in range(10)),
                "shadows": tuple(f"shadow {i}" for i in range(7)),
            }
        )
        theme = generate_tailwind_theme(tokens)
        assert theme.border_radius["full"] == "8px"
        assert theme.border_radius["9"] == "9px"
        assert theme.box_shadow["2xl"] == "shadow 5"
        assert theme.box_shadow["6"] == "shadow 6"

    def test_dump_uses_js_keys(self) -> None:
        dumped = generate_tailwind_theme(get_style("saasTech")).model_dump(by_alias=True)
        assert set(dumped) == {
            "colors",
            "fontFamily",
            "fontSize",
            "spacing",
            "borderRadius",
            "boxShadow",
        }


class TestConfig:
    def test_dark_mode_strategy(self) -> None:
        assert generate_tailwind_config("cyberpunk").dark_mode == "class"
        assert generate_tailwind_config("monochrome").dark_mode == "media"

    def test_unknown_style_raises(self) -> None:
        with pytest.raises(NotFoundError):
            generate_tailwind_config("doesNotExist")

    def test_metadata_only_style_raises(self) -> None:
        with pytest.raises(NotFoundError):
            generate_tailwind_config_string("wiseDesign")

    def test_tokens_override(self, minimal_tokens: DesignTokens) -> None:
        config = generate_tailwind_config("cyberpunk", tokens=minimal_tokens)
        assert config.dark_mode == "media"
        assert config.theme.extend.colors["primary"] == "#0052FF"


class TestConfigString:
    def test_structure(self) -> None:
        source = generate_tailwind_config_string("cyberpunk")
        lines = source.splitlines()
        assert lines[0] == "/** @type {import('tailwindcss').Config} */"
        assert lines[1] == "module.exports = {"
        assert lines[2] == "  darkMode: 'class',"
        assert lines[-1] == "};"
        assert "  plugins: []," in lines

    def test_default_content(self) -> None:
        source = generate_tailwind_config_string("monochrome")
        for glob in DEFAULT_CONTENT:
            assert f"    '{glob}'," in source

    def test_custom_content_and_plugins(self) -> None:
        source = generate_tailwind_config_string(
            "saasTech",
            content=["./pages/**/*.tsx"],
            plugins=["@tailwindcss/forms", "@tailwindcss/typography"],
        )
        assert "    './pages/**/*.tsx'," in source
        assert "./src/**" not in source
        assert "    require('@tailwindcss/forms')," in source
        assert "    require('@tailwindcss/typography')," in source

    def test_identifier_keys_unquoted(self) -> None:
        source = generate_tailwind_config_string("neoBrutalism")
        assert "      fontFamily: {" in source
        assert "        DEFAULT: " in source

    def test_deterministic(self) -> None:
        assert generate_tailwind_config_string("terminal") == generate_tailwind_config_string(
            "terminal"
        )

    @pytest.mark.parametrize("style_id", [s for s, _ in iter_full_styles()])
    def test_theme_round_trips(self, style_id: StyleId) -> None:
        source = generate_tailwind_config_string(style_id)
        expected = generate_tailwind_theme(get_style(style_id)).model_dump(by_alias=True)
        assert extract_theme_object(source) == expected

    def test_extract_requires_extend(self) -> None:
        with pytest.raises(ValueError):
            extract_theme_object("module.exports = {};")

    def test_presets(self) -> None:
        presets = tailwind_presets()
        assert len(presets) == 33
        assert presets[StyleId.AURA] == generate_tailwind_config_string("aura")
