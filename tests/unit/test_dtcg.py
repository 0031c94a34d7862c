"""Tests for W3C DTCG token export."""

from __future__ import annotations

import json
from pathlib import Path

from stylekit.core.store import get_style
from stylekit.generators.dtcg import export_dtcg_file, generate_dtcg_tokens


class TestGenerateDtcgTokens:
    def test_groups(self) -> None:
        doc = generate_dtcg_tokens(get_style("neoBrutalism"))
        assert list(doc) == [
            "$description",
            "color",
            "fontFamily",
            "fontSize",
            "fontWeight",
            "dimension",
            "shadow",
        ]
        assert doc["$description"].startswith("Neo Brutalism: ")

    def test_color_tokens(self) -> None:
        doc = generate_dtcg_tokens(get_style("neoBrutalism"))
        assert doc["color"]["primary"] == {"$type": "color", "$value": "#FFD93D"}

    def test_typography_tokens(self) -> None:
        doc = generate_dtcg_tokens(get_style("neoBrutalism"))
        assert "mono" not in doc["fontFamily"]
        assert doc["fontSize"]["0"] == {"$type": "dimension", "$value": "12px"}
        assert doc["fontWeight"]["900"] == {"$type": "fontWeight", "$value": 900}

    def test_dimensions_and_shadows(self) -> None:
        doc = generate_dtcg_tokens(get_style("neoBrutalism"))
        assert doc["dimension"]["spacing-1"]["$value"] == "4px"
        assert doc["dimension"]["radius-3"]["$value"] == "12px"
        assert list(doc["shadow"]) == ["shadow-1", "shadow-2", "shadow-3"]


class TestExportDtcgFile:
    def test_writes_json(self, tmp_path: Path) -> None:
        tokens = get_style("monochrome")
        path = export_dtcg_file(tokens, tmp_path / "out" / "tokens.json")
        assert path.exists()
        assert json.loads(path.read_text(encoding="utf-8")) == generate_dtcg_tokens(tokens)
