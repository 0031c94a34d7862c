"""
Style catalog CLI commands.

Browse the catalog and print generated CSS, Tailwind config and prompts.
"""

from __future__ import annotations

import json
from enum import StrEnum
from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from stylekit.core.color import hex_to_hsl
from stylekit.core.errors import NotFoundError
from stylekit.core.ir import FullStyle
from stylekit.core.resolver import resolve_tokens
from stylekit.core.store import get_entry, search_styles
from stylekit.export import export_style
from stylekit.generators.css import (
    generate_css_variables,
    generate_hsl_variables,
    generate_shadcn_variables,
)
from stylekit.generators.prompts import (
    generate_component_prompt,
    generate_landing_page_prompt,
    generate_style_prompt,
)
from stylekit.generators.tailwind import generate_tailwind_config, generate_tailwind_config_string
from stylekit.generators.utilities import generate_utility_classes

from .utils import console, fail, get_state, resolve_style_arg


class CssFormat(StrEnum):
    DIRECT = "direct"
    HSL = "hsl"
    SHADCN = "shadcn"
    UTILITIES = "utilities"


StyleArg = Annotated[
    str | None,
    typer.Argument(help="Style id (default: [project] style from stylekit.toml)"),
]


def list_command(
    mode: Annotated[str | None, typer.Option("--mode", "-m", help="light or dark")] = None,
    category: Annotated[str | None, typer.Option("--category", "-c", help="Category name")] = None,
    type_: Annotated[
        str | None, typer.Option("--type", "-t", help="sans, serif or mono")
    ] = None,
    search: Annotated[
        str, typer.Option("--search", "-s", help="Match name or description")
    ] = "",
) -> None:
    """List catalog styles."""
    styles = search_styles(search, mode=mode, category=category)
    if type_ is not None:
        styles = [m for m in styles if m.type == type_]

    if not styles:
        console.print("[dim]No styles match.[/dim]")
        return

    table = Table(title=f"{len(styles)} style{'s' if len(styles) != 1 else ''}")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Mode")
    table.add_column("Type")
    table.add_column("Category")
    table.add_column("Source", style="dim")
    for metadata in styles:
        table.add_row(
            metadata.id.value,
            metadata.name,
            metadata.mode.value,
            metadata.type.value,
            metadata.category,
            metadata.source or "",
        )
    console.print(table)


def show_command(ctx: typer.Context, style: StyleArg = None) -> None:
    """Show a style's tokens."""
    style_id = resolve_style_arg(ctx, style)
    try:
        entry = get_entry(style_id)
    except NotFoundError as e:
        fail(str(e))

    metadata = entry.metadata
    console.print(f"[bold]{metadata.name}[/bold] [dim]({metadata.id.value})[/dim]")
    console.print(f"{metadata.mode.value} / {metadata.type.value} / {metadata.category}")
    if not isinstance(entry, FullStyle):
        console.print("[yellow]Metadata only: this style has no token set.[/yellow]")
        return

    tokens = entry.tokens
    console.print(tokens.description)
    console.print()

    colors = Table(title="Colors")
    colors.add_column("Role", style="cyan")
    colors.add_column("Value")
    colors.add_column("HSL", style="dim")
    for role, value in tokens.color_items():
        converted = hex_to_hsl(value)
        colors.add_row(role, value, converted if converted != value else "")
    console.print(colors)

    family = tokens.typography.font_family
    console.print(f"[bold]Display:[/bold] {family.display}")
    console.print(f"[bold]Body:[/bold] {family.body}")
    if family.mono:
        console.print(f"[bold]Mono:[/bold] {family.mono}")
    console.print(f"[bold]Sizes:[/bold] {', '.join(tokens.typography.font_sizes)}")
    console.print(f"[bold]Spacing:[/bold] base {tokens.spacing.base}px, {len(tokens.spacing.scale)} steps")
    console.print(f"[bold]Radius:[/bold] {', '.join(tokens.border_radius) or '-'}")
    console.print(f"[bold]Shadows:[/bold] {len(tokens.shadows)}")


def css_command(
    ctx: typer.Context,
    style: StyleArg = None,
    format_: Annotated[
        CssFormat, typer.Option("--format", "-f", help="Variable flavour")
    ] = CssFormat.DIRECT,
) -> None:
    """Print CSS custom properties for a style."""
    style_id = resolve_style_arg(ctx, style)
    try:
        if format_ is CssFormat.UTILITIES:
            get_entry(style_id)
            typer.echo(generate_utility_classes(style_id))
            return
        tokens = resolve_tokens(style_id, get_state(ctx).manifest.overrides)
    except NotFoundError as e:
        fail(str(e))

    if format_ is CssFormat.HSL:
        typer.echo(generate_hsl_variables(tokens))
    elif format_ is CssFormat.SHADCN:
        typer.echo(generate_shadcn_variables(tokens))
    else:
        typer.echo(generate_css_variables(tokens))


def tailwind_command(
    ctx: typer.Context,
    style: StyleArg = None,
    output_json: Annotated[
        bool, typer.Option("--json", help="Print the config object as JSON")
    ] = False,
) -> None:
    """Print a tailwind.config.js for a style."""
    style_id = resolve_style_arg(ctx, style)
    manifest = get_state(ctx).manifest
    try:
        tokens = resolve_tokens(style_id, manifest.overrides)
    except NotFoundError as e:
        fail(str(e))

    if output_json:
        config = generate_tailwind_config(style_id, tokens=tokens)
        typer.echo(json.dumps(config.model_dump(by_alias=True), indent=2))
        return
    typer.echo(
        generate_tailwind_config_string(
            style_id,
            content=manifest.tailwind.content,
            plugins=manifest.tailwind.plugins,
            tokens=tokens,
        )
    )


def prompt_command(
    ctx: typer.Context,
    style: StyleArg = None,
    landing_page: Annotated[
        bool, typer.Option("--landing-page", "-l", help="Append the landing page task")
    ] = False,
    component: Annotated[
        str | None, typer.Option("--component", help="Append a single component task")
    ] = None,
) -> None:
    """Print an AI prompt for a style."""
    style_id = resolve_style_arg(ctx, style)
    if landing_page and component:
        fail("--landing-page and --component are mutually exclusive")
    try:
        tokens = resolve_tokens(style_id, get_state(ctx).manifest.overrides)
        if component:
            text = generate_component_prompt(style_id, component, tokens=tokens)
        elif landing_page:
            text = generate_landing_page_prompt(style_id, tokens=tokens)
        else:
            text = generate_style_prompt(style_id, tokens=tokens)
    except NotFoundError as e:
        fail(str(e))
    typer.echo(text)


def export_command(
    ctx: typer.Context,
    style: StyleArg = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output directory (default: [project] output_dir)"),
    ] = None,
) -> None:
    """Write CSS, Tailwind config, prompt and DTCG tokens for a style."""
    state = get_state(ctx)
    style_id = resolve_style_arg(ctx, style)
    output_dir = output or state.output_dir
    try:
        written = export_style(style_id, output_dir, manifest=state.manifest)
    except NotFoundError as e:
        fail(str(e))

    for path in written:
        console.print(f"[green]✓[/green] {path}")
