"""
Token resolver for stylekit.

Resolves the final token set by layering manifest overrides on top of a
catalog style. Catalog records are never modified; a new frozen record is
returned.
"""

from __future__ import annotations

import logging

from .ir import DesignTokens
from .manifest import TokenOverrides
from .store import get_style

logger = logging.getLogger(__name__)


def resolve_tokens(style_id: str, overrides: TokenOverrides | None = None) -> DesignTokens:
    """
    Resolve the tokens for a style with overrides applied.

    Args:
        style_id: Catalog style identifier
        overrides: Values from the manifest's [overrides] tables

    Returns:
        The catalog record itself when there is nothing to override,
        otherwise a validated copy with the overrides merged in.
    """
    base = get_style(style_id)
    if overrides is None or overrides.is_empty():
        return base

    colors = dict(base.colors)
    colors.update(overrides.colors)

    data = base.model_dump()
    data["colors"] = colors
    if overrides.shadows is not None:
        data["shadows"] = tuple(overrides.shadows)
    if overrides.border_radius is not None:
        data["border_radius"] = tuple(overrides.border_radius)

    logger.debug("Resolved %s with overrides for %s", style_id, sorted(overrides.colors))
    # Re-validate so overrides cannot blank out a required role
    return DesignTokens.model_validate(data)
