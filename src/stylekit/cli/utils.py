"""
stylekit CLI utilities.

Shared helpers used across CLI modules.
"""

from __future__ import annotations

import logging
import platform
from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from stylekit._version import get_version
from stylekit.core.manifest import StylekitManifest

console = Console()

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


@dataclass
class CliState:
    """Per-invocation state stashed on the typer context."""

    manifest: StylekitManifest

    @property
    def default_style(self) -> str | None:
        return self.manifest.project.style

    @property
    def output_dir(self) -> Path:
        base = self.manifest.path.parent if self.manifest.path else Path.cwd()
        return base / self.manifest.project.output_dir


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"stylekit version {get_version()}")
        typer.echo("")
        typer.echo("Environment:")
        typer.echo(
            f"  Python:        {platform.python_implementation()} {platform.python_version()}"
        )
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")
        raise typer.Exit()


def configure_logging(level: str) -> None:
    """Configure root logging once for a CLI run."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
    )


def fail(message: str) -> NoReturn:
    """Print an error in red and exit with status 1."""
    console.print(f"[red]Error:[/red] {escape(message)}")
    raise typer.Exit(code=1)


def get_state(ctx: typer.Context) -> CliState:
    state = ctx.obj
    if not isinstance(state, CliState):
        state = CliState(manifest=StylekitManifest())
        ctx.obj = state
    return state


def resolve_style_arg(ctx: typer.Context, style: str | None) -> str:
    """Use the given style id, falling back to the manifest's default style."""
    if style:
        return style
    default = get_state(ctx).default_style
    if default is None:
        fail("No style given and no [project] style set in stylekit.toml")
    return default
