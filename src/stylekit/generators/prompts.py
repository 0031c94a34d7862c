"""
Prompt text for AI code-generation assistants.

Builds instruction text that describes a catalog style: a fixed system
prompt, a tagged ``<design-system>`` block filled from the style's tokens,
and per-style implementation guidelines. Nothing here calls a model; the
output is text to hand to one.
"""

from __future__ import annotations

import logging

from stylekit.core.errors import NotFoundError
from stylekit.core.ir import DesignTokens, StyleId
from stylekit.core.store import get_style

logger = logging.getLogger(__name__)

# =============================================================================
# Base system prompt
# =============================================================================

BASE_SYSTEM_PROMPT = """\
<role>
You are an expert frontend engineer, UI/UX designer, visual design specialist, and typography expert. Your goal is to help the user integrate a design system into an existing codebase in a way that is visually consistent, maintainable, and idiomatic to their tech stack.

Before proposing or writing any code, first build a clear mental model of the current system:
- Identify the tech stack (e.g. React, Next.js, Vue, Tailwind, shadcn/ui, etc.).
- Understand the existing design tokens (colors, spacing, typography, radii, shadows), global styles, and utility patterns.
- Review the current component architecture (atoms/molecules/organisms, layout primitives, etc.) and naming conventions.
- Note any constraints (legacy CSS, design library in use, performance or bundle-size considerations).

Ask the user focused questions to understand their goals. Do they want:
- a specific component or page redesigned in the new style,
- existing components refactored to the new system, or
- new components built from scratch following the design language?
</role>

<approach>
When implementing designs:
1. Start with design tokens - colors, typography, spacing, shadows, border-radius
2. Build atomic components first (buttons, inputs, badges, cards)
3. Compose molecules from atoms (forms, card groups, navigation items)
4. Assemble organisms (headers, hero sections, feature grids, pricing tables)
5. Create page templates from organisms

Always:
- Use semantic HTML elements
- Ensure accessibility (ARIA labels, keyboard navigation, focus states)
- Implement responsive design (mobile-first)
- Consider dark/light mode support
- Use CSS custom properties or Tailwind for theming
- Keep bundle size minimal
</approach>"""

# =============================================================================
# Per-style guidelines
# =============================================================================

STYLE_GUIDELINES: dict[StyleId, str] = {
    StyleId.MONOCHROME: """\
- Use only black (#000), white (#FFF), and gray (#525252) colors
- Typography should be oversized and dramatic for headings
- Use serif fonts for display text, sans-serif for body
- No border-radius - keep all corners sharp and geometric
- Generous whitespace, editorial layouts
- High contrast between text and background
- Use thin black borders (1-2px) for subtle separation
- Focus states should use black ring shadows""",
    StyleId.CYBERPUNK: """\
- Dark backgrounds with neon accent colors (green, cyan, magenta)
- All text in monospace font
- Grid overlays and scan-line effects for authenticity
- Glowing shadows on interactive elements
- Sharp corners or minimal border-radius (2-4px max)
- Use brackets and technical notation (>_, ./, [ ])
- Terminal-style UI elements
- High-tech, dystopian aesthetic""",
    StyleId.NEO_BRUTALISM: """\
- Bold, saturated colors (yellow, coral, purple)
- Thick black borders (2-4px) on all interactive elements
- Hard offset shadows (4-8px) with no blur - black only
- Large, bold typography with heavy font weights
- Playful geometric shapes as decorations
- Dotted or grid pattern backgrounds
- Intentionally "unpolished" aesthetic
- Rotated elements for visual interest""",
    StyleId.SAAS_TECH: """\
- Professional blue primary color for trust
- Clean, minimal design with generous whitespace
- Rounded corners (8-16px) for friendly feel
- Subtle shadows for depth (avoid harsh shadows)
- System fonts for performance
- Clear visual hierarchy
- Consistent spacing scale
- Neutral grays for secondary elements
- Gradient accents used sparingly""",
    StyleId.CLAYMORPHISM: """\
- Soft, puffy appearance on all elements
- Dual shadows: colored glow + white highlight
- Very rounded corners (16-48px)
- Pastel color palette with purple primary
- Soft, rounded sans-serif fonts (Nunito)
- Floating 3D elements as decorations
- Light, airy backgrounds
- Playful, approachable aesthetic
- Smooth transitions and hover effects""",
    StyleId.TERMINAL: """\
- Pure green (#33FF00) on black (#0A0A0A) only
- 100% monospace typography
- No border-radius - sharp terminal edges
- No shadows - flat terminal aesthetic
- ASCII-style borders and decorations
- Command-line notation ($ > | [])
- Blinking cursor animations
- Scanline or CRT effects optional
- Status indicators and progress bars
- Matrix/hacker aesthetic""",
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

# =============================================================================
# Component prompts
# =============================================================================

COMPONENT_PROMPTS: dict[str, str] = {
    "hero": """\
Create a hero section with:
- Headline with strong visual hierarchy
- Supporting subheadline
- Primary and secondary CTA buttons
- Optional badge/label above headline
- Social proof element (logos, stats, or testimonial)
- Background treatment appropriate to the style""",
    "features": """\
Create a features grid with:
- Section title and description
- 3-6 feature cards in a responsive grid
- Icon or illustration for each feature
- Feature title and description
- Consistent spacing and alignment""",
    "pricing": """\
Create a pricing section with:
- Section title and description
- 2-4 pricing tiers
- Highlighted "popular" or "recommended" tier
- Feature checklist for each tier
- CTA button for each tier
- Annual/monthly toggle (optional)""",
    "testimonials": """\
Create a testimonials section with:
- Section title
- 1-3 testimonial cards
- Quote text, author name, title, and company
- Optional author avatar/photo
- Optional company logo
- Visual treatment appropriate to style""",
    "cta": """\
Create a call-to-action section with:
- Compelling headline
- Brief supporting text
- Email input + submit button, or single CTA button
- Optional background treatment or pattern""",
    "footer": """\
Create a footer with:
- Company logo and tagline
- Navigation links grouped by category
- Social media links
- Legal links (Privacy, Terms)
- Copyright notice
- Newsletter signup (optional)""",
    "navigation": """\
Create a navigation header with:
- Logo/brand on the left
- Main navigation links centered or right-aligned
- CTA button on the right
- Mobile menu with hamburger toggle
- Sticky/fixed positioning
- Backdrop blur on scroll (if appropriate)""",
}

LANDING_PAGE_TASK = """\
<task>
Create a complete landing page with the following sections:

1. **Navigation** - Sticky header with logo, links, and CTA
2. **Hero** - Headline, subheadline, CTAs, and social proof
3. **Stats/Metrics** - 3-4 key numbers with labels
4. **Features** - 6 features in a responsive grid
5. **How It Works** - 3-step process explanation
6. **Benefits** - 4 benefit cards
7. **Testimonials** - 3 customer testimonials
8. **Pricing** - 3 pricing tiers
9. **FAQ** - 6 frequently asked questions with accordion
10. **CTA** - Final call-to-action section
11. **Footer** - Links, social media, legal

Use a fictional SaaS product called "Acme Platform" for placeholder content.
Use Tailwind CSS for styling.
Make it fully responsive (mobile, tablet, desktop).
Include hover states and focus styles for accessibility.
</task>"""


# =============================================================================
# Generators
# =============================================================================


def get_style_guidelines(style_id: str) -> str:
    """Bespoke guideline bullets for a style (empty when it has none or is unknown)."""
    try:
        return STYLE_GUIDELINES[StyleId(style_id)]
    except ValueError:
        logger.debug("No guidelines for unknown style %r", style_id)
        return ""


def _design_system_block(tokens: DesignTokens) -> list[str]:
    typography = tokens.typography
    lines = [
        f'<design-system name="{tokens.name}">',
        tokens.description,
        "",
        f"<mode>{tokens.mode}</mode>",
        f"<typography-type>{tokens.type}</typography-type>",
        "",
        "<colors>",
        *(f"  --{role}: {value};" for role, value in tokens.color_items()),
        "</colors>",
        "",
        "<typography>",
        f"  <font-display>{typography.font_family.display}</font-display>",
        f"  <font-body>{typography.font_family.body}</font-body>",
    ]
    if typography.font_family.mono:
        lines.append(f"  <font-mono>{typography.font_family.mono}</font-mono>")
    lines.extend(
        [
            f"  <font-sizes>{', '.join(typography.font_sizes)}</font-sizes>",
            f"  <font-weights>{', '.join(str(w) for w in typography.font_weights)}</font-weights>",
            "</typography>",
            "",
            "<spacing>",
            f"  <base>{tokens.spacing.base}px</base>",
            f"  <scale>{', '.join(f'{s}px' for s in tokens.spacing.scale)}</scale>",
            "</spacing>",
            "",
            "<border-radius>",
            f"  {', '.join(tokens.border_radius)}",
            "</border-radius>",
            "",
            "<shadows>",
            *(f"  --shadow-{i}: {shadow};" for i, shadow in enumerate(tokens.shadows, start=1)),
            "</shadows>",
        ]
    )
    if tokens.effects is not None:
        lines.append("")
        lines.append("<effects>")
        if tokens.effects.blur:
            lines.append(f"  <blur>{tokens.effects.blur}</blur>")
        if tokens.effects.backdrop:
            lines.append(f"  <backdrop>{tokens.effects.backdrop}</backdrop>")
        lines.append("</effects>")
    lines.append("</design-system>")
    return lines


def generate_style_prompt(style_id: str, *, tokens: DesignTokens | None = None) -> str:
    """
    Generate the system prompt for building UI in a catalog style.

    Args:
        style_id: Catalog style identifier
        tokens: Resolved tokens to use instead of the catalog record

    Raises:
        NotFoundError: if the style is unknown or has no token set.
    """
    if tokens is None:
        tokens = get_style(style_id)
    guidelines = get_style_guidelines(style_id)

    lines = [BASE_SYSTEM_PROMPT, ""]
    lines.extend(_design_system_block(tokens))
    lines.append("")
    lines.append("<implementation-guidelines>")
    lines.append(f'Apply the "{tokens.name}" design language to all components:')
    if guidelines:
        lines.append(guidelines)
    lines.append("</implementation-guidelines>")
    return "\n".join(lines)


def generate_landing_page_prompt(style_id: str, *, tokens: DesignTokens | None = None) -> str:
    """Style prompt plus the full landing page task."""
    return f"{generate_style_prompt(style_id, tokens=tokens)}\n\n{LANDING_PAGE_TASK}"


def generate_component_prompt(
    style_id: str, component: str, *, tokens: DesignTokens | None = None
) -> str:
    """
    Style prompt plus a task for a single component.

    Raises:
        NotFoundError: for an unknown style or component name.
    """
    if component not in COMPONENT_PROMPTS:
        raise NotFoundError("component", component, COMPONENT_PROMPTS)
    task = COMPONENT_PROMPTS[component]
    return f"{generate_style_prompt(style_id, tokens=tokens)}\n\n<task>\n{task}\n</task>"
