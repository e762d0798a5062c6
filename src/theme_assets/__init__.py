"""
theme-assets - build-time theme integration for web application bundles.

Usage:
    theme-assets build
    theme-assets build --project-dir path/to/app --verbose
    theme-assets list
"""

from __future__ import annotations

import typer
from rich.console import Console

__version__ = "0.1.0"

console = Console()

app = typer.Typer(
    name="theme-assets",
    help="Copy theme static assets and generate theme loader scripts",
    add_completion=False,
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"theme-assets {__version__}")
        raise typer.Exit()


@app.callback()
def callback(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Build-time theme asset integration."""


from theme_assets.cli.commands import register_commands  # noqa: E402

register_commands(app)


def main():
    app()


if __name__ == "__main__":
    main()
