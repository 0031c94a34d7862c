"""
stylekit core: token IR, the style catalog and lookups over it.
"""

from .color import hex_to_hsl
from .errors import CatalogError, ConfigError, NotFoundError, StylekitError
from .manifest import StylekitManifest, TokenOverrides, find_manifest, load_manifest
from .resolver import resolve_tokens
from .store import (
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

__all__ = [
    # Errors
    "StylekitError",
    "NotFoundError",
    "CatalogError",
    "ConfigError",
    # Store
    "get_entry",
    "get_metadata",
    "get_style",
    "get_styles_by_category",
    "get_styles_by_mode",
    "get_styles_by_type",
    "iter_full_styles",
    "list_categories",
    "list_styles",
    "search_styles",
    "style_categories",
    # Color
    "hex_to_hsl",
    # Config
    "StylekitManifest",
    "TokenOverrides",
    "find_manifest",
    "load_manifest",
    "resolve_tokens",
]
