"""Tests for the landing page template catalog."""

from __future__ import annotations

from pathlib import Path

import pytest

from stylekit.core.errors import CatalogError, NotFoundError
from stylekit.core.ir import StyleId, TemplateSource
from stylekit.core.store import get_metadata
from stylekit.templates import (
    get_section_examples,
    get_template_by_name,
    get_templates,
    get_templates_by_category,
    get_templates_by_source,
    get_templates_by_style,
    list_templates,
)
from stylekit.templates.loader import load_template


class TestTemplateCatalog:
    def test_listing_order(self) -> None:
        assert [t.name for t in get_templates()] == [
            "Dexo Media",
            "Velour Fashion",
            "Lowkey Coffee",
            "Wise Transfer",
        ]

    def test_styles_exist_in_catalog(self) -> None:
        for template in get_templates():
            assert get_metadata(template.style).id == template.style

    def test_section_html_loaded(self) -> None:
        for template in get_templates():
            assert template.sections
            for section in template.sections:
                assert section.html.startswith("<")
                assert not section.html.endswith("\n")

    def test_section_order_follows_manifest(self) -> None:
        dexo = get_template_by_name("Dexo Media")
        assert [s.name for s in dexo.sections] == [
            "navigation",
            "hero",
            "stats",
            "features",
            "marquee",
            "cta",
            "footer",
        ]

    def test_loaded_once(self) -> None:
        assert get_templates() is get_templates()

    def test_summaries(self) -> None:
        summaries = {s.name: s for s in list_templates()}
        assert summaries["Wise Transfer"].section_count == 8
        assert summaries["Velour Fashion"].section_count == 5
        assert summaries["Dexo Media"].style == StyleId.MODERN_DARK


class TestTemplateLookups:
    def test_by_style(self) -> None:
        assert [t.name for t in get_templates_by_style("neoBrutalism")] == ["Lowkey Coffee"]

    def test_by_style_without_templates(self) -> None:
        assert get_templates_by_style("bauhaus") == []

    def test_by_source(self) -> None:
        assert len(get_templates_by_source("caramell")) == 3
        assert [t.name for t in get_templates_by_source(TemplateSource.CUSTOM)] == [
            "Wise Transfer"
        ]

    def test_by_category(self) -> None:
        assert [t.name for t in get_templates_by_category("ecommerce")] == ["Velour Fashion"]

    def test_by_name_ignores_case(self) -> None:
        assert get_template_by_name("lowkey coffee").style == StyleId.NEO_BRUTALISM

    def test_unknown_name_raises(self) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            get_template_by_name("Dexo")
        assert exc_info.value.kind == "template"

    def test_get_section(self) -> None:
        template = get_template_by_name("Wise Transfer")
        assert template.get_section("howItWorks") is not None
        assert template.get_section("pricing") is None


class TestSectionExamples:
    def test_footer_in_every_template(self) -> None:
        assert len(get_section_examples("footer")) == 4

    def test_cta(self) -> None:
        assert len(get_section_examples("cta")) == 2

    def test_unknown_section(self) -> None:
        assert get_section_examples("pricing") == []


class TestLoader:
    def _write_template(self, root: Path, manifest: str, sections: dict[str, str]) -> Path:
        template_dir = root / "tpl"
        template_dir.mkdir()
        (template_dir / "template.yaml").write_text(manifest, encoding="utf-8")
        for name, html in sections.items():
            (template_dir / f"{name}.html").write_text(html, encoding="utf-8")
        return template_dir

    def test_load_template(self, tmp_path: Path) -> None:
        template_dir = self._write_template(
            tmp_path,
            "name: Test\n"
            "description: A test template\n"
            "source: custom\n"
            "style: saasTech\n"
            "category: saas\n"
            "sections:\n"
            "  - name: hero\n"
            "    description: Hero\n",
            {"hero": "<section>hi</section>\n"},
        )
        template = load_template(template_dir)
        assert template.name == "Test"
        assert template.sections[0].html == "<section>hi</section>"

    def test_missing_section_file(self, tmp_path: Path) -> None:
        template_dir = self._write_template(
            tmp_path,
            "name: Test\ndescription: x\nsource: custom\nstyle: saasTech\ncategory: saas\n"
            "sections:\n  - name: hero\n",
            {},
        )
        with pytest.raises(CatalogError):
            load_template(template_dir)

    def test_unknown_style_rejected(self, tmp_path: Path) -> None:
        template_dir = self._write_template(
            tmp_path,
            "name: Test\ndescription: x\nsource: custom\nstyle: notAStyle\ncategory: saas\n",
            {},
        )
        with pytest.raises(CatalogError):
            load_template(template_dir)

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        template_dir = self._write_template(tmp_path, "name: [unclosed\n", {})
        with pytest.raises(CatalogError):
            load_template(template_dir)

    def test_missing_manifest(self, tmp_path: Path) -> None:
        with pytest.raises(CatalogError):
            load_template(tmp_path)
