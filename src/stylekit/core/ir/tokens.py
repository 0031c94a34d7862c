"""
Design token IR types.

A DesignTokens record holds every value of one named visual style: colors,
typography, spacing, corner radii, shadows and optional filter effects.
Catalog entries pair a record with its listing metadata; styles that are
known by name only are kept as a separate metadata-only variant.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from types import MappingProxyType
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

# =============================================================================
# Enums
# =============================================================================


class StyleMode(StrEnum):
    """Color mode a style is designed for."""

    LIGHT = "light"
    DARK = "dark"


class TypographyType(StrEnum):
    """Dominant typography category of a style."""

    SANS = "sans"
    SERIF = "serif"
    MONO = "mono"


class StyleId(StrEnum):
    """Identifiers of every style in the catalog."""

    MONOCHROME = "monochrome"
    CYBERPUNK = "cyberpunk"
    NEO_BRUTALISM = "neoBrutalism"
    SAAS_TECH = "saasTech"
    CLAYMORPHISM = "claymorphism"
    TERMINAL = "terminal"
    BAUHAUS = "bauhaus"
    NEUMORPHISM = "neumorphism"
    LUXURY = "luxury"
    ART_DECO = "artDeco"
    WEB3 = "web3"
    GLASSMORPHISM = "glassmorphism"
    SKETCH = "sketch"
    INDUSTRIAL = "industrial"
    ORGANIC = "organic"
    MAXIMALISM = "maximalism"
    RETRO = "retro"
    VAPORWAVE = "vaporwave"
    ACADEMIA = "academia"
    PLAYFUL_GEOMETRIC = "playfulGeometric"
    MINIMAL_DARK = "minimalDark"
    PROFESSIONAL = "professional"
    BOTANICAL = "botanical"
    ENTERPRISE = "enterprise"
    MODERN_DARK = "modernDark"
    NEWSPRINT = "newsprint"
    SWISS_MINIMALIST = "swissMinimalist"
    KINETIC = "kinetic"
    FLAT_DESIGN = "flatDesign"
    MATERIAL_DESIGN = "materialDesign"
    BOLD_TYPOGRAPHY = "boldTypography"
    CARAMELL = "caramell"
    AURA = "aura"
    WISE_DESIGN = "wiseDesign"


# Color roles every style must define
REQUIRED_COLOR_ROLES: tuple[str, ...] = ("primary", "background", "foreground")


# =============================================================================
# Token sections
# =============================================================================


class FontFamily(BaseModel):
    """CSS font-family stacks for display, body and (optionally) code text."""

    model_config = ConfigDict(frozen=True)

    display: str
    body: str
    mono: str | None = None


class Typography(BaseModel):
    """Font stacks plus the ordered size and weight scales."""

    model_config = ConfigDict(frozen=True)

    font_family: FontFamily
    font_sizes: tuple[str, ...] = Field(description="Pixel sizes, smallest to largest")
    font_weights: tuple[int, ...] = Field(description="Numeric weights, lightest first")


class Spacing(BaseModel):
    """Base unit and index-addressable spacing scale, both in pixels."""

    model_config = ConfigDict(frozen=True)

    base: int
    scale: tuple[int, ...]

    @field_validator("scale")
    @classmethod
    def _scale_starts_at_zero(cls, value: tuple[int, ...]) -> tuple[int, ...]:
        if not value or value[0] != 0:
            raise ValueError("spacing scale must start at 0")
        return value


class Effects(BaseModel):
    """Optional CSS filter and backdrop-filter values."""

    model_config = ConfigDict(frozen=True)

    blur: str | None = None
    backdrop: str | None = None


class DesignTokens(BaseModel):
    """
    Complete token set for one visual style.

    Colors are a read-only mapping from semantic role names to CSS color
    values and keep the order they were declared in; generators emit roles
    in that order.

    Example:
        DesignTokens(
            name="Monochrome",
            description="Pure black and white editorial style",
            mode=StyleMode.LIGHT,
            type=TypographyType.SERIF,
            colors={"primary": "#000000", "background": "#FFFFFF", "foreground": "#000000"},
            typography=Typography(
                font_family=FontFamily(display="Georgia, serif", body="system-ui, sans-serif"),
                font_sizes=("12px", "16px"),
                font_weights=(400, 700),
            ),
            spacing=Spacing(base=4, scale=(0, 4, 8)),
            border_radius=("0px",),
            shadows=(),
        )
    """

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    mode: StyleMode
    type: TypographyType
    colors: Mapping[str, str]
    typography: Typography
    spacing: Spacing
    border_radius: tuple[str, ...] = ()
    shadows: tuple[str, ...] = ()
    effects: Effects | None = None

    @field_validator("colors")
    @classmethod
    def _required_roles_present(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        missing = [role for role in REQUIRED_COLOR_ROLES if not value.get(role)]
        if missing:
            raise ValueError(f"missing required color roles: {', '.join(missing)}")
        return MappingProxyType(dict(value))

    @field_serializer("colors")
    def _dump_colors(self, value: Mapping[str, str]) -> dict[str, str]:
        return dict(value)

    def color(self, role: str) -> str | None:
        """Get a color value by role, or None when the style does not define it."""
        return self.colors.get(role) or None

    def color_items(self) -> list[tuple[str, str]]:
        """Color roles with a value, in declaration order."""
        return [(role, value) for role, value in self.colors.items() if value]


# =============================================================================
# Catalog entries
# =============================================================================


class StyleMetadata(BaseModel):
    """Listing metadata shown for a style in the catalog."""

    model_config = ConfigDict(frozen=True)

    id: StyleId
    name: str
    mode: StyleMode
    type: TypographyType
    category: str
    source: str | None = None


class FullStyle(BaseModel):
    """A catalog style with a complete token set."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["full"] = "full"
    metadata: StyleMetadata
    tokens: DesignTokens


class MetadataOnlyStyle(BaseModel):
    """A catalog style known by name and category only, without tokens."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["metadata"] = "metadata"
    metadata: StyleMetadata


StyleEntry = Annotated[FullStyle | MetadataOnlyStyle, Field(discriminator="kind")]
