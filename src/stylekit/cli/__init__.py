"""
stylekit CLI package.

- main.py: Typer app and global options
- styles.py: catalog, CSS, Tailwind, prompt and export commands
- templates.py: landing page template commands
- utils.py: shared console, logging and context helpers
"""

from stylekit.cli.main import app, main
from stylekit.cli.utils import version_callback

__all__ = [
    "app",
    "main",
    "version_callback",
]
