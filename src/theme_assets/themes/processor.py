"""Theme folder processing: one theme root, every theme beneath it."""

from __future__ import annotations

import logging
from pathlib import Path

from theme_assets.themes.copier import copy_static_assets
from theme_assets.themes.generator import ThemeFileGenerator, generate_theme_file
from theme_assets.themes.models import ThemeResult
from theme_assets.themes.properties import read_properties

logger = logging.getLogger(__name__)


def discover_themes(theme_root: Path) -> list[Path]:
    """Return the theme folders (immediate subdirectories) of *theme_root*.

    Regular files are ignored. Folders are sorted by name so runs are
    reproducible regardless of filesystem enumeration order.
    """
    return sorted(entry for entry in theme_root.iterdir() if entry.is_dir())


def loader_file_for(theme_folder: Path) -> Path:
    return theme_folder / f"{theme_folder.name}.js"


def handle_themes(
    theme_root: Path,
    output_root: Path,
    *,
    node_modules: Path,
    generator: ThemeFileGenerator = generate_theme_file,
    log: logging.Logger | None = None,
) -> list[ThemeResult]:
    """Process every theme found in *theme_root*.

    For each theme: read ``theme.json``, copy its static assets into
    *output_root*, generate the loader script and write it to
    ``<themeFolder>/<themeName>.js`` (replacing any previous content).

    The first failure aborts processing; remaining themes are left
    untouched and the exception propagates to the caller.

    Args:
        theme_root: Existing theme root folder.
        output_root: Static assets output folder shared by all themes.
        node_modules: Installed-dependency root for asset globs.
        generator: Loader script generator.
        log: Logger to report through (defaults to the module logger).

    Returns:
        One ThemeResult per processed theme, in processing order.
    """
    log = log or logger
    log.info("handling theme from %s", theme_root)

    results: list[ThemeResult] = []
    for theme_folder in discover_themes(theme_root):
        theme_name = theme_folder.name
        config = read_properties(theme_folder)
        log.info("Found theme %s in folder %s", theme_name, theme_folder)

        copied = copy_static_assets(config, output_root, node_modules=node_modules, log=log)
        theme_file = generator(theme_folder, theme_name, config)
        loader_file = loader_file_for(theme_folder)
        loader_file.write_text(theme_file, encoding="utf-8")

        results.append(
            ThemeResult(
                name=theme_name,
                folder=theme_folder,
                loader_file=loader_file,
                copied_files=copied,
            )
        )
    return results
