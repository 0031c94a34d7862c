"""
stylekit command line application.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

import typer

from stylekit.core.errors import ConfigError
from stylekit.core.manifest import StylekitManifest, find_manifest, load_manifest

from .styles import (
    css_command,
    export_command,
    list_command,
    prompt_command,
    show_command,
    tailwind_command,
)
from .templates import sections_command, templates_command
from .utils import CliState, configure_logging, fail, version_callback

app = typer.Typer(
    help="""stylekit - design-token catalog and style generators

Commands:
  • Browse: list, show, templates, sections
  • Generate: css, tailwind, prompt
  • Write files: export

Commands that take a style id fall back to [project] style in stylekit.toml.
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and environment information",
        ),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option("--config", help="Path to stylekit.toml (default: search upward from cwd)"),
    ] = None,
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", help="DEBUG, INFO, WARNING, ERROR or CRITICAL"),
    ] = None,
) -> None:
    """stylekit CLI main callback for global options."""
    manifest_path = config or find_manifest()
    try:
        manifest = load_manifest(manifest_path) if manifest_path else StylekitManifest()
    except ConfigError as e:
        fail(str(e))

    configure_logging(log_level or manifest.log_level)
    ctx.obj = CliState(manifest=manifest)


app.command(name="list")(list_command)
app.command(name="show")(show_command)
app.command(name="css")(css_command)
app.command(name="tailwind")(tailwind_command)
app.command(name="prompt")(prompt_command)
app.command(name="export")(export_command)
app.command(name="templates")(templates_command)
app.command(name="sections")(sections_command)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main(sys.argv[1:])
