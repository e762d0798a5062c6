"""``theme-assets build`` command.

Runs the application theme plugin once: copies the static assets every
theme declares and regenerates each theme's loader script.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from theme_assets.cli.ui import build_report_table, configure_logging, resolve_options
from theme_assets.themes.errors import ThemeAssetsError
from theme_assets.themes.plugin import RUN_HOOK, ApplicationThemePlugin, BuildHooks

console = Console()


def build(
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
    output_folder: Optional[Path] = typer.Option(
        None, "--output-folder", "-o", help="Static assets output folder"
    ),
    theme_folders: Optional[List[Path]] = typer.Option(
        None, "--theme-folder", "-t", help="Project theme folder (repeatable, replaces configured list)"
    ),
    node_modules: Optional[Path] = typer.Option(
        None, "--node-modules", help="Installed-dependency root asset globs resolve against"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every copied file"),
    json_output: bool = typer.Option(False, "--json", help="Print the build report as JSON"),
) -> None:
    """Copy theme static assets and regenerate theme loader scripts.

    Processes the packaged theme folder first, then every project theme
    folder in order. A malformed theme.json or a failed copy aborts the
    build with exit code 1.

    Examples:
        theme-assets build
        theme-assets build -p my-app -t frontend/themes --verbose
    """
    configure_logging(verbose, quiet=json_output)
    project_dir = project_dir.resolve()

    try:
        options = resolve_options(
            project_dir,
            config,
            theme_jar_folder=theme_jar_folder,
            output_folder=output_folder,
            theme_folders=theme_folders,
            node_modules=node_modules,
        )
        hooks = BuildHooks()
        ApplicationThemePlugin(options).apply(hooks)
        (report,) = hooks.call(RUN_HOOK)
    except (ThemeAssetsError, OSError) as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(1)

    if json_output:
        typer.echo(json.dumps(report.to_dict(), indent=2))
        return

    if not report.themes:
        console.print("[yellow]No themes found.[/yellow]")
        return

    console.print(build_report_table(report, project_dir))
    console.print(
        f"[green]Processed {len(report.themes)} theme(s), copied {report.copied_count} file(s).[/green]"
    )
