"""
Pure-Python hex to HSL conversion.

Produces the space-separated ``H S% L%`` triple used by HSL-variable theme
systems (shadcn/ui and friends), e.g. ``--primary: 221 100% 50%;``.
"""

from __future__ import annotations

import math
import re

_HEX_RE = re.compile(r"#?([0-9a-fA-F]{6})")


def _round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    return math.floor(value + 0.5)


def hex_to_hsl(value: str) -> str:
    """Convert a ``#RRGGBB`` color to an ``H S% L%`` string.

    Anything other than six hex digits (with or without the leading ``#``)
    is returned unchanged: short hex, named colors and ``rgba()`` values
    pass straight through.

    Args:
        value: Color string.

    Returns:
        HSL triple with H in degrees (no unit) and S, L as integer percents.
    """
    match = _HEX_RE.fullmatch(value)
    if match is None:
        return value

    digits = match.group(1)
    r = int(digits[0:2], 16) / 255
    g = int(digits[2:4], 16) / 255
    b = int(digits[4:6], 16) / 255

    high = max(r, g, b)
    low = min(r, g, b)
    lightness = (high + low) / 2
    hue = 0.0
    saturation = 0.0

    if high != low:
        d = high - low
        saturation = d / (2 - high - low) if lightness > 0.5 else d / (high + low)
        if high == r:
            hue = ((g - b) / d + (6 if g < b else 0)) / 6
        elif high == g:
            hue = ((b - r) / d + 2) / 6
        else:
            hue = ((r - g) / d + 4) / 6

    h = _round_half_up(hue * 360)
    s = _round_half_up(saturation * 100)
    l = _round_half_up(lightness * 100)  # noqa: E741
    return f"{h} {s}% {l}%"
