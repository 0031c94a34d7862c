"""Tests for the style catalog and its lookups."""

from __future__ import annotations

import pytest

from stylekit.core.catalog import STYLE_CATALOG
from stylekit.core.errors import NotFoundError
from stylekit.core.ir import FullStyle, MetadataOnlyStyle, StyleId
from stylekit.core.store import (
    get_entry,
    get_metadata,
    get_style,
    get_styles_by_category,
    get_styles_by_mode,
    get_styles_by_type,
    iter_full_styles,
    list_categories,
    list_styles,
    search_styles,
    style_categories,
)


class TestCatalogContents:
    def test_every_style_id_has_an_entry(self) -> None:
        assert set(STYLE_CATALOG) == set(StyleId)
        assert len(STYLE_CATALOG) == 34

    def test_entry_keys_match_metadata_ids(self) -> None:
        for style_id, entry in STYLE_CATALOG.items():
            assert entry.metadata.id == style_id

    def test_full_styles_agree_with_their_metadata(self) -> None:
        """Name, mode and type are duplicated between tokens and metadata."""
        for entry in STYLE_CATALOG.values():
            if isinstance(entry, FullStyle):
                assert entry.tokens.name == entry.metadata.name
                assert entry.tokens.mode == entry.metadata.mode
                assert entry.tokens.type == entry.metadata.type

    def test_required_roles_present(self) -> None:
        for _, tokens in iter_full_styles():
            for role in ("primary", "background", "foreground"):
                assert tokens.colors[role]

    def test_spacing_scales_start_at_zero(self) -> None:
        for _, tokens in iter_full_styles():
            assert tokens.spacing.scale[0] == 0

    def test_wise_design_is_metadata_only(self) -> None:
        entry = STYLE_CATALOG[StyleId.WISE_DESIGN]
        assert isinstance(entry, MetadataOnlyStyle)
        assert entry.metadata.name == "Wise Design"

    def test_sources(self) -> None:
        assert get_metadata("caramell").source == "caramell.app"
        assert get_metadata("aura").source == "aura.build"
        assert get_metadata("monochrome").source is None


class TestGetStyle:
    def test_known_style(self) -> None:
        tokens = get_style("neoBrutalism")
        assert tokens.name == "Neo Brutalism"
        assert tokens.colors["primary"] == "#FFD93D"
        assert tokens.mode == "light"

    def test_accepts_enum_member(self) -> None:
        assert get_style(StyleId.CYBERPUNK).name == "Cyberpunk"

    def test_cyberpunk_tokens(self) -> None:
        tokens = get_style("cyberpunk")
        assert tokens.mode == "dark"
        assert tokens.type == "mono"
        assert tokens.effects is not None
        assert tokens.effects.backdrop == "blur(8px)"

    def test_unknown_style_raises(self) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            get_style("doesNotExist")
        assert exc_info.value.key == "doesNotExist"

    def test_unknown_style_is_lookup_error(self) -> None:
        with pytest.raises(LookupError):
            get_style("nope")

    def test_suggests_close_ids(self) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            get_style("neoBrutalsm")
        assert "neoBrutalism" in exc_info.value.suggestions
        assert "did you mean" in str(exc_info.value)

    def test_metadata_only_style_has_no_tokens(self) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            get_style("wiseDesign")
        assert exc_info.value.kind == "style tokens"

    def test_metadata_only_style_still_has_metadata(self) -> None:
        assert get_metadata("wiseDesign").category == "SaaS"
        assert isinstance(get_entry("wiseDesign"), MetadataOnlyStyle)

    def test_returns_same_record(self) -> None:
        assert get_style("terminal") is get_style("terminal")

    def test_colors_are_read_only(self) -> None:
        tokens = get_style("monochrome")
        with pytest.raises(TypeError):
            tokens.colors["primary"] = "#123456"  # type: ignore[index]
        assert get_style("monochrome").colors["primary"] == "#000000"

    def test_dump_gives_plain_colors_dict(self) -> None:
        dumped = get_style("monochrome").model_dump()
        assert type(dumped["colors"]) is dict
        assert dumped["colors"]["primary"] == "#000000"


class TestListing:
    def test_list_order_is_catalog_order(self) -> None:
        ids = [m.id for m in list_styles()]
        assert ids == list(STYLE_CATALOG)
        assert ids[0] == StyleId.MONOCHROME
        assert ids[-1] == StyleId.WISE_DESIGN

    def test_list_is_stable(self) -> None:
        assert list_styles() == list_styles()

    def test_iter_full_styles_skips_metadata_only(self) -> None:
        ids = [style_id for style_id, _ in iter_full_styles()]
        assert len(ids) == 33
        assert StyleId.WISE_DESIGN not in ids

    def test_categories_first_seen_order(self) -> None:
        categories = list_categories()
        assert categories[:4] == ["Editorial", "Futuristic", "Bold", "Professional"]
        assert len(categories) == len(set(categories))

    def test_style_categories_cover_catalog(self) -> None:
        grouped = style_categories()
        assert sorted(sum(grouped.values(), [])) == sorted(s.value for s in StyleId)
        assert grouped["Bold"] == ["neoBrutalism", "industrial", "maximalism", "kinetic"]


class TestFilters:
    @pytest.mark.parametrize("mode", ["light", "dark"])
    def test_by_mode(self, mode: str) -> None:
        results = get_styles_by_mode(mode)
        assert results
        assert all(m.mode == mode for m in results)
        assert results == [m for m in list_styles() if m.mode == mode]

    def test_modes_partition_catalog(self) -> None:
        assert len(get_styles_by_mode("light")) + len(get_styles_by_mode("dark")) == 34

    @pytest.mark.parametrize("type_", ["sans", "serif", "mono"])
    def test_by_type(self, type_: str) -> None:
        results = get_styles_by_type(type_)
        assert all(m.type == type_ for m in results)

    def test_by_category(self) -> None:
        names = [m.name for m in get_styles_by_category("Editorial")]
        assert names[0] == "Monochrome"
        assert all(m.category == "Editorial" for m in get_styles_by_category("Editorial"))

    def test_unknown_filter_values_return_empty(self) -> None:
        assert get_styles_by_category("Nope") == []
        assert get_styles_by_mode("sepia") == []


class TestSearch:
    def test_empty_query_matches_all(self) -> None:
        assert search_styles() == list_styles()

    def test_name_match_case_insensitive(self) -> None:
        ids = [m.id for m in search_styles("CYBER")]
        assert ids == [StyleId.CYBERPUNK]

    def test_description_match(self) -> None:
        ids = [m.id for m in search_styles("brutalist architecture")]
        assert StyleId.NEO_BRUTALISM in ids

    def test_combined_filters(self) -> None:
        results = search_styles("", mode="dark", category="Futuristic")
        assert results
        assert all(m.mode == "dark" and m.category == "Futuristic" for m in results)

    def test_no_match(self) -> None:
        assert search_styles("zzzz-not-a-style") == []
