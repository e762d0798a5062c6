"""Shared helpers for theme-assets CLI commands."""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from theme_assets.config import ThemePluginOptions, load_options
from theme_assets.themes.models import BuildReport

PACKAGE_LOGGER = "theme_assets"


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Route package log records to stderr through rich.

    *quiet* keeps only errors, for machine-readable output modes.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        if isinstance(handler, RichHandler):
            package_logger.removeHandler(handler)
    package_logger.addHandler(
        RichHandler(console=Console(stderr=True), show_path=False, show_time=False)
    )
    if quiet:
        package_logger.setLevel(logging.ERROR)
    else:
        package_logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def resolve_options(
    project_dir: Path,
    config_path: Path | None = None,
    *,
    theme_jar_folder: Path | None = None,
    output_folder: Path | None = None,
    theme_folders: list[Path] | None = None,
    node_modules: Path | None = None,
) -> ThemePluginOptions:
    """Load the project config and apply command-line overrides.

    Relative override paths resolve against *project_dir*, like the
    paths in the configuration file.
    """
    options = load_options(project_dir, config_path)
    return options.with_overrides(
        theme_jar_folder=_under(project_dir, theme_jar_folder),
        static_assets_output_folder=_under(project_dir, output_folder),
        theme_project_folders=[_under(project_dir, folder) for folder in theme_folders or []],
        node_modules_folder=_under(project_dir, node_modules),
    )


def _under(project_dir: Path, path: Path | None) -> Path | None:
    if path is None or path.is_absolute():
        return path
    return project_dir / path


def build_report_table(report: BuildReport, project_dir: Path) -> Table:
    """Render processed themes as a rich table."""
    table = Table(title="Processed Themes", show_lines=False)
    table.add_column("Theme", style="bold", no_wrap=True)
    table.add_column("Loader", style="cyan", overflow="fold")
    table.add_column("Copied files", justify="right", style="magenta", no_wrap=True)

    for theme in report.themes:
        table.add_row(theme.name, _display_path(theme.loader_file, project_dir), str(len(theme.copied_files)))
    return table


def _display_path(path: Path, project_dir: Path) -> str:
    try:
        return str(path.relative_to(project_dir))
    except ValueError:
        return str(path)
