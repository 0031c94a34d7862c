"""
Error types for stylekit catalog lookups, packaged data and configuration.
"""

from __future__ import annotations

import difflib
from collections.abc import Iterable


class StylekitError(Exception):
    """Base exception for all stylekit errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotFoundError(StylekitError, LookupError):
    """
    Raised when a by-id accessor is given an identifier it does not know.

    Examples:
    - Unknown style identifier passed to get_style()
    - Metadata-only style passed to a generator that needs full tokens
    - Unknown template name or component prompt
    """

    def __init__(self, kind: str, key: str, candidates: Iterable[str] = ()):
        self.kind = kind
        self.key = key
        self.suggestions = difflib.get_close_matches(key, list(candidates), n=3)
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        message = f"Unknown {self.kind}: {self.key!r}"
        if self.suggestions:
            message += f" (did you mean: {', '.join(self.suggestions)}?)"
        return message


class CatalogError(StylekitError):
    """
    Raised when packaged catalog data cannot be loaded.

    Examples:
    - Template manifest missing or not valid YAML
    - Section HTML file referenced by a manifest does not exist
    - Manifest fields fail validation
    """

    pass


class ConfigError(StylekitError):
    """Raised when a stylekit.toml manifest cannot be parsed."""

    pass
