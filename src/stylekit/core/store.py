"""
Read-only lookups over the style catalog.

All functions here are pure reads of ``STYLE_CATALOG``; listing order is the
catalog's insertion order and is stable across calls.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from .catalog import STYLE_CATALOG
from .errors import NotFoundError
from .ir import DesignTokens, FullStyle, StyleEntry, StyleId, StyleMetadata

logger = logging.getLogger(__name__)


def _coerce_id(style_id: str) -> StyleId:
    try:
        return StyleId(style_id)
    except ValueError:
        logger.debug("Lookup of unknown style id %r", style_id)
        raise NotFoundError("style", str(style_id), STYLE_CATALOG) from None


def get_entry(style_id: str) -> StyleEntry:
    """Get the catalog entry (full or metadata-only) for a style id."""
    return STYLE_CATALOG[_coerce_id(style_id)]


def get_style(style_id: str) -> DesignTokens:
    """
    Get the design tokens for a style.

    Raises:
        NotFoundError: if the id is unknown, or names a metadata-only style
            that has no token set.
    """
    entry = get_entry(style_id)
    if not isinstance(entry, FullStyle):
        logger.debug("Style %r is metadata-only", style_id)
        raise NotFoundError(
            "style tokens",
            str(style_id),
            [e.metadata.id for e in STYLE_CATALOG.values() if isinstance(e, FullStyle)],
        )
    return entry.tokens


def get_metadata(style_id: str) -> StyleMetadata:
    """Get the listing metadata for a style."""
    return get_entry(style_id).metadata


def list_styles() -> list[StyleMetadata]:
    """List metadata for every catalog style, in catalog order."""
    return [entry.metadata for entry in STYLE_CATALOG.values()]


def iter_full_styles() -> Iterator[tuple[StyleId, DesignTokens]]:
    """Iterate ``(id, tokens)`` for every style that has a token set."""
    for style_id, entry in STYLE_CATALOG.items():
        if isinstance(entry, FullStyle):
            yield style_id, entry.tokens


def get_styles_by_category(category: str) -> list[StyleMetadata]:
    return [m for m in list_styles() if m.category == category]


def get_styles_by_mode(mode: str) -> list[StyleMetadata]:
    return [m for m in list_styles() if m.mode == mode]


def get_styles_by_type(type_: str) -> list[StyleMetadata]:
    return [m for m in list_styles() if m.type == type_]


def list_categories() -> list[str]:
    """Distinct categories in first-seen order."""
    return list(dict.fromkeys(m.category for m in list_styles()))


def style_categories() -> dict[str, list[str]]:
    """Map each category to the ids of its styles."""
    grouped: dict[str, list[str]] = {}
    for metadata in list_styles():
        grouped.setdefault(metadata.category, []).append(metadata.id.value)
    return grouped


def search_styles(
    query: str = "",
    mode: str | None = None,
    category: str | None = None,
) -> list[StyleMetadata]:
    """
    Filter the catalog by free text, mode and category.

    The query matches case-insensitively against the style name and, for
    styles with tokens, the description. An empty query matches everything.
    """
    needle = query.strip().lower()
    results = []
    for entry in STYLE_CATALOG.values():
        metadata = entry.metadata
        if mode is not None and metadata.mode != mode:
            continue
        if category is not None and metadata.category != category:
            continue
        if needle:
            haystack = metadata.name.lower()
            if isinstance(entry, FullStyle):
                haystack += "\n" + entry.tokens.description.lower()
            if needle not in haystack:
                continue
        results.append(metadata)
    return results
