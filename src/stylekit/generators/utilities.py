"""
Style-specific CSS utility classes.

A hand-authored table, not derived from token values. Every StyleId has an
entry; styles without bespoke utilities map to an empty string.
"""

from __future__ import annotations

import logging

from stylekit.core.ir import StyleId

logger = logging.getLogger(__name__)

_NEO_BRUTALISM = """\
/* Neo Brutalism Utilities */
.shadow-brutal {
  box-shadow: 4px 4px 0px 0px #000;
}
.shadow-brutal-lg {
  box-shadow: 8px 8px 0px 0px #000;
}
.border-brutal {
  border: 2px solid #000;
}
.hover-brutal {
  transition: transform 0.2s, box-shadow 0.2s;
}
.hover-brutal:hover {
  transform: translate(-4px, -4px);
  box-shadow: 8px 8px 0px 0px #000;
}
.hover-brutal:active {
  transform: translate(0, 0);
  box-shadow: 4px 4px 0px 0px #000;
}"""

_TERMINAL = """\
/* Terminal Utilities */
.glow-terminal {
  text-shadow: 0 0 8px rgba(51, 255, 0, 0.5);
}
.border-terminal {
  border: 1px solid #33FF00;
}
.bg-terminal {
  background-color: #0A0A0A;
}
.text-terminal {
  color: #33FF00;
  font-family: "JetBrains Mono", monospace;
}
@keyframes blink {
  0%, 50% { opacity: 1; }
  51%, 100% { opacity: 0; }
}
.cursor-blink::after {
  content: '_';
  animation: blink 1s infinite;
}"""

_CYBERPUNK = """\
/* Cyberpunk Utilities */
.glow-neon {
  box-shadow: 0 0 20px rgba(0, 255, 136, 0.3);
}
.glow-cyan {
  box-shadow: 0 0 20px rgba(0, 212, 255, 0.3);
}
.glow-magenta {
  box-shadow: 0 0 20px rgba(255, 0, 255, 0.3);
}
.text-glow {
  text-shadow: 0 0 10px currentColor;
}
.grid-overlay {
  background-image:
    linear-gradient(rgba(0, 255, 136, 0.1) 1px, transparent 1px),
    linear-gradient(90deg, rgba(0, 255, 136, 0.1) 1px, transparent 1px);
  background-size: 20px 20px;
}"""

_CLAYMORPHISM = """\
/* Claymorphism Utilities */
.shadow-clay {
  box-shadow:
    8px 8px 16px rgba(139, 92, 246, 0.2),
    -4px -4px 8px rgba(255, 255, 255, 0.5);
}
.shadow-clay-lg {
  box-shadow:
    12px 12px 24px rgba(139, 92, 246, 0.3),
    -8px -8px 16px rgba(255, 255, 255, 0.4);
}
.shadow-clay-inset {
  box-shadow:
    inset 4px 4px 8px rgba(139, 92, 246, 0.1),
    inset -4px -4px 8px rgba(255, 255, 255, 0.9);
}"""

_MONOCHROME = """\
/* Monochrome Utilities */
.ring-mono {
  box-shadow: rgb(0, 0, 0) 0px 0px 0px 2px;
}
.border-mono {
  border: 1px solid #000;
}
.border-mono-thick {
  border: 2px solid #000;
}"""

_SAAS_TECH = """\
/* SaaS Tech Utilities */
.shadow-soft {
  box-shadow: 0 1px 3px 0 rgba(0, 0, 0, 0.1), 0 1px 2px -1px rgba(0, 0, 0, 0.1);
}
.shadow-soft-lg {
  box-shadow: 0 10px 15px -3px rgba(0, 0, 0, 0.1), 0 4px 6px -4px rgba(0, 0, 0, 0.1);
}
.gradient-primary {
  background: linear-gradient(135deg, #0052FF 0%, #4D7CFF 100%);
}"""

UTILITY_CLASSES: dict[StyleId, str] = {
    StyleId.MONOCHROME: _MONOCHROME,
    StyleId.CYBERPUNK: _CYBERPUNK,
    StyleId.NEO_BRUTALISM: _NEO_BRUTALISM,
    StyleId.SAAS_TECH: _SAAS_TECH,
    StyleId.CLAYMORPHISM: _CLAYMORPHISM,
    StyleId.TERMINAL: _TERMINAL,
    StyleId.BAUHAUS: "",
    StyleId.NEUMORPHISM: "",
    StyleId.LUXURY: "",
    StyleId.ART_DECO: "",
    StyleId.WEB3: "",
    StyleId.GLASSMORPHISM: "",
    StyleId.SKETCH: "",
    StyleId.INDUSTRIAL: "",
    StyleId.ORGANIC: "",
    StyleId.MAXIMALISM: "",
    StyleId.RETRO: "",
    StyleId.VAPORWAVE: "",
    StyleId.ACADEMIA: "",
    StyleId.PLAYFUL_GEOMETRIC: "",
    StyleId.MINIMAL_DARK: "",
    StyleId.PROFESSIONAL: "",
    StyleId.BOTANICAL: "",
    StyleId.ENTERPRISE: "",
    StyleId.MODERN_DARK: "",
    StyleId.NEWSPRINT: "",
    StyleId.SWISS_MINIMALIST: "",
    StyleId.KINETIC: "",
    StyleId.FLAT_DESIGN: "",
    StyleId.MATERIAL_DESIGN: "",
    StyleId.BOLD_TYPOGRAPHY: "",
    StyleId.CARAMELL: "",
    StyleId.AURA: "",
    StyleId.WISE_DESIGN: "",
}


def generate_utility_classes(style_id: str) -> str:
    """Return the bespoke utility CSS for a style, or ``""`` if it has none."""
    try:
        return UTILITY_CLASSES[StyleId(style_id)]
    except ValueError:
        logger.debug("No utility classes for unknown style %r", style_id)
        return ""
