"""CLI command modules for theme-assets."""

from __future__ import annotations

import typer

from .build import build
from .list_cmd import list_themes


def register_commands(app: typer.Typer) -> None:
    """Attach every command to the root typer app."""
    app.command()(build)
    app.command(name="list")(list_themes)


__all__ = ["register_commands"]
