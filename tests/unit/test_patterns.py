"""Tests for the component class patterns."""

from __future__ import annotations

import pytest

from stylekit.core.errors import NotFoundError
from stylekit.patterns import BUTTON_PATTERNS, PATTERN_GROUPS, get_pattern


class TestPatterns:
    def test_groups(self) -> None:
        assert list(PATTERN_GROUPS) == [
            "buttons",
            "cards",
            "sections",
            "navigation",
            "inputs",
            "badges",
            "animations",
        ]

    def test_get_pattern(self) -> None:
        pattern = get_pattern("buttons", "neoBrutalist")
        assert pattern["colors"]["yellow"] == "bg-[#FFD93D] text-black"
        assert "border-2 border-black" in pattern["base"]

    def test_primary_button_sizes(self) -> None:
        sizes = get_pattern("buttons", "primary")["sizes"]
        assert list(sizes) == ["sm", "md", "lg", "xl"]

    def test_returned_pattern_is_read_only(self) -> None:
        pattern = get_pattern("buttons", "primary")
        with pytest.raises(TypeError):
            pattern["base"] = "changed"  # type: ignore[index]
        assert "changed" not in BUTTON_PATTERNS["primary"].values()

    def test_nested_mappings_are_read_only(self) -> None:
        sizes = get_pattern("buttons", "primary")["sizes"]
        with pytest.raises(TypeError):
            sizes["sm"] = "changed"  # type: ignore[index]
        with pytest.raises(TypeError):
            BUTTON_PATTERNS["neoBrutalist"]["colors"]["yellow"] = "changed"  # type: ignore[index]
        assert BUTTON_PATTERNS["primary"]["sizes"]["sm"] != "changed"
        assert get_pattern("buttons", "neoBrutalist")["colors"]["yellow"] == (
            "bg-[#FFD93D] text-black"
        )

    def test_sequences_are_tuples(self) -> None:
        delays = get_pattern("animations", "stagger")["delays"]
        assert isinstance(delays, tuple)
        assert delays[0] == "delay-0"

    def test_groups_are_read_only(self) -> None:
        with pytest.raises(TypeError):
            PATTERN_GROUPS["extra"] = {}  # type: ignore[index]

    def test_unknown_group(self) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            get_pattern("button", "primary")
        assert exc_info.value.suggestions[0] == "buttons"

    def test_unknown_pattern(self) -> None:
        with pytest.raises(NotFoundError):
            get_pattern("cards", "nope")

    def test_animation_patterns(self) -> None:
        assert get_pattern("animations", "loading")["spin"] == "animate-spin"
