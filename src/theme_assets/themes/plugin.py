"""Application theme plugin: runs theme processing once per build.

Processing order is fixed: the packaged theme root (themes unpacked
from dependency archives) first, then every project-local theme root in
configured order. All roots share one static assets output folder.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from pathlib import Path
from typing import TYPE_CHECKING, Callable

from theme_assets.themes.generator import ThemeFileGenerator, generate_theme_file
from theme_assets.themes.models import BuildReport
from theme_assets.themes.processor import handle_themes

if TYPE_CHECKING:
    from theme_assets.config import ThemePluginOptions

PLUGIN_NAME = "application-theme-plugin"
RUN_HOOK = "run"


class BuildHooks:
    """Minimal lifecycle hook registry for a host build tool."""

    def __init__(self) -> None:
        self._taps: dict[str, list[tuple[str, Callable[[], object]]]] = defaultdict(list)

    def tap(self, hook: str, name: str, callback: Callable[[], object]) -> None:
        self._taps[hook].append((name, callback))

    def call(self, hook: str) -> list[object]:
        return [callback() for _, callback in self._taps.get(hook, [])]


class ApplicationThemePlugin:
    """Discovers themes, copies their static assets and writes loader scripts."""

    def __init__(
        self,
        options: ThemePluginOptions,
        *,
        generator: ThemeFileGenerator = generate_theme_file,
        logger: logging.Logger | None = None,
    ):
        self.options = options
        self.generator = generator
        self.logger = logger or logging.getLogger(f"theme_assets.{PLUGIN_NAME}")

    def apply(self, hooks: BuildHooks) -> None:
        """Attach :meth:`run` to the host's ``run`` lifecycle hook."""
        hooks.tap(RUN_HOOK, "ApplicationThemePlugin", self.run)

    def run(self) -> BuildReport:
        """Process the packaged root, then each project-local root.

        A missing packaged root is reported as a warning; missing
        project-local roots are skipped silently. Any other failure
        propagates and aborts the run.
        """
        options = self.options
        report = BuildReport()

        if options.theme_jar_folder.is_dir():
            self._process_root(options.theme_jar_folder, report)
        else:
            self.logger.warning("Theme JAR folder not found from %s", options.theme_jar_folder)
            report.skipped_roots.append(options.theme_jar_folder)

        for theme_project_folder in options.theme_project_folders:
            if theme_project_folder.is_dir():
                self._process_root(theme_project_folder, report)
            else:
                self.logger.debug("Theme folder %s does not exist, skipping", theme_project_folder)
                report.skipped_roots.append(theme_project_folder)

        return report

    def _process_root(self, theme_root: Path, report: BuildReport) -> None:
        report.themes.extend(
            handle_themes(
                theme_root,
                self.options.static_assets_output_folder,
                node_modules=self.options.node_modules_folder,
                generator=self.generator,
                log=self.logger,
            )
        )
        report.processed_roots.append(theme_root)
