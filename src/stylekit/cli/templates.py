"""
Landing page template CLI commands.
"""

from __future__ import annotations

from typing import Annotated

import typer
from rich.rule import Rule
from rich.table import Table

from stylekit.templates import get_templates, list_templates

from .utils import console


def templates_command(
    style: Annotated[str | None, typer.Option("--style", help="Style id")] = None,
    source: Annotated[
        str | None, typer.Option("--source", help="caramell, aura, designprompts or custom")
    ] = None,
    category: Annotated[
        str | None, typer.Option("--category", help="agency, ecommerce, saas, ...")
    ] = None,
) -> None:
    """List landing page templates."""
    summaries = [
        s
        for s in list_templates()
        if (style is None or s.style == style)
        and (source is None or s.source == source)
        and (category is None or s.category == category)
    ]
    if not summaries:
        console.print("[dim]No templates match.[/dim]")
        return

    table = Table(title="Templates")
    table.add_column("Name", style="cyan")
    table.add_column("Style")
    table.add_column("Source")
    table.add_column("Category")
    table.add_column("Sections", justify="right")
    for summary in summaries:
        table.add_row(
            summary.name,
            summary.style.value,
            summary.source.value,
            summary.category.value,
            str(summary.section_count),
        )
    console.print(table)


def sections_command(
    name: Annotated[str, typer.Argument(help="Section name, e.g. hero or footer")],
) -> None:
    """Print every template's HTML for one section."""
    found = False
    for template in get_templates():
        section = template.get_section(name)
        if section is None:
            continue
        found = True
        console.print(Rule(f"{template.name} / {section.name}"))
        if section.description:
            console.print(f"[dim]{section.description}[/dim]")
        typer.echo(section.html)

    if not found:
        console.print(f"[dim]No template has a {name!r} section.[/dim]")
