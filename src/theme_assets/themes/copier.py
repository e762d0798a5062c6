"""Static asset copier: places files declared in ``theme.json`` into the output tree."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from theme_assets.themes.glob_resolver import resolve_asset_glob
from theme_assets.themes.models import ThemeConfiguration

logger = logging.getLogger(__name__)


def copy_static_assets(
    config: ThemeConfiguration,
    output_root: Path,
    *,
    node_modules: Path,
    log: logging.Logger | None = None,
) -> list[Path]:
    """Copy every file matched by the theme's asset rules into *output_root*.

    Rules are evaluated in declaration order. Each match is copied to
    ``output_root / destination / <basename>``, so any directory structure
    in the match is flattened. Existing files are overwritten, and files
    copied by earlier runs are never removed. When two rules write the
    same destination path the later rule wins.

    ``OSError`` from directory creation or copying propagates.

    Args:
        config: Theme configuration whose ``assets`` section is used.
        output_root: Static assets output folder.
        node_modules: Installed-dependency root the patterns resolve against.
        log: Logger to report through (defaults to the module logger).

    Returns:
        Destination paths written, in copy order.
    """
    log = log or logger
    if not config.assets:
        log.info("no assets to handle no static assets were copied")
        return []

    output_root.mkdir(parents=True, exist_ok=True)
    copied: list[Path] = []
    for rule in config.asset_rules():
        files = resolve_asset_glob(node_modules, rule.module, rule.pattern, log=log)
        target_folder = output_root / rule.destination
        target_folder.mkdir(parents=True, exist_ok=True)
        for source in files:
            target = target_folder / source.name
            log.debug("Copying: %s => %s", source, target_folder)
            shutil.copyfile(source, target)
            copied.append(target)
    return copied
