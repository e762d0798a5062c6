"""``theme-assets list`` command: show discovered themes without building."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from theme_assets.cli.ui import resolve_options
from theme_assets.themes.errors import ThemeAssetsConfigError, ThemeConfigError
from theme_assets.themes.processor import discover_themes
from theme_assets.themes.properties import read_properties

console = Console()


def list_themes(
    project_dir: Path = typer.Option(
        Path("."),
        "--project-dir",
        "-p",
        help="Project root that relative paths resolve against",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (default: theme-assets.yaml in the project)",
    ),
    theme_jar_folder: Optional[Path] = typer.Option(
        None, "--theme-jar-folder", help="Folder with themes unpacked from dependency archives"
    ),
    theme_folders: Optional[List[Path]] = typer.Option(
        None, "--theme-folder", "-t", help="Project theme folder (repeatable, replaces configured list)"
    ),
) -> None:
    """List discovered themes and the asset rules they declare.

    Nothing is copied or written. Themes whose theme.json cannot be
    read are shown with the error instead of their rules.
    """
    project_dir = project_dir.resolve()
    try:
        options = resolve_options(
            project_dir,
            config,
            theme_jar_folder=theme_jar_folder,
            theme_folders=theme_folders,
        )
    except ThemeAssetsConfigError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(1)

    table = Table(title="Discovered Themes", show_lines=True)
    table.add_column("Source", style="cyan", no_wrap=True)
    table.add_column("Theme", style="bold", no_wrap=True)
    table.add_column("Module")
    table.add_column("Pattern")
    table.add_column("Destination", style="magenta")

    roots = [("packaged", options.theme_jar_folder)]
    roots.extend(("project", folder) for folder in options.theme_project_folders)

    found = 0
    errors: list[str] = []
    try:
        for source, root in roots:
            if not root.is_dir():
                continue
            for theme_folder in discover_themes(root):
                found += 1
                try:
                    rules = read_properties(theme_folder).asset_rules()
                except ThemeConfigError as exc:
                    table.add_row(source, theme_folder.name, "[red]invalid theme.json[/red]", "", "")
                    errors.append(str(exc))
                    continue
                if not rules:
                    table.add_row(source, theme_folder.name, "[dim]no assets[/dim]", "", "")
                    continue
                for rule in rules:
                    table.add_row(
                        source, theme_folder.name, escape(rule.module), escape(rule.pattern), escape(rule.destination)
                    )
    except OSError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(1)

    if not found:
        console.print("[yellow]No themes found.[/yellow]")
        return
    console.print(table)
    for error in errors:
        console.print(f"[red]Error:[/red] {escape(error)}")
