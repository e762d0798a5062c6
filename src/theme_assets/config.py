"""Build configuration for the theme asset step.

Options are read from ``theme-assets.yaml`` in the project directory.
The ``THEME_ASSETS_CONFIG`` environment variable or an explicit path
selects a different file. Keys may sit at the top level or inside a
``themes:`` section; relative paths resolve against the project
directory. A missing file means every option takes its default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from theme_assets.themes.errors import ThemeAssetsConfigError

CONFIG_FILENAME = "theme-assets.yaml"
CONFIG_ENV_VAR = "THEME_ASSETS_CONFIG"

DEFAULT_THEME_JAR_FOLDER = "target/flow-frontend/themes"
DEFAULT_STATIC_ASSETS_OUTPUT_FOLDER = "target/classes/META-INF/VAADIN/static"
DEFAULT_THEME_PROJECT_FOLDERS = ("frontend/themes",)
DEFAULT_NODE_MODULES_FOLDER = "node_modules"


@dataclass(frozen=True)
class ThemePluginOptions:
    """Folders the theme plugin reads from and writes to."""

    theme_jar_folder: Path
    static_assets_output_folder: Path
    theme_project_folders: list[Path] = field(default_factory=list)
    node_modules_folder: Path = Path(DEFAULT_NODE_MODULES_FOLDER)

    @classmethod
    def defaults(cls, project_dir: Path) -> "ThemePluginOptions":
        return cls(
            theme_jar_folder=project_dir / DEFAULT_THEME_JAR_FOLDER,
            static_assets_output_folder=project_dir / DEFAULT_STATIC_ASSETS_OUTPUT_FOLDER,
            theme_project_folders=[project_dir / folder for folder in DEFAULT_THEME_PROJECT_FOLDERS],
            node_modules_folder=project_dir / DEFAULT_NODE_MODULES_FOLDER,
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None, project_dir: Path) -> "ThemePluginOptions":
        options = cls.defaults(project_dir)
        if not data:
            return options

        updates: dict[str, Any] = {}
        for key in ("theme_jar_folder", "static_assets_output_folder", "node_modules_folder"):
            if key in data:
                updates[key] = _resolve(project_dir, _require_str(data[key], key))

        if "theme_project_folders" in data:
            folders = data["theme_project_folders"]
            if isinstance(folders, str):
                folders = [folders]
            if not isinstance(folders, list):
                raise ThemeAssetsConfigError("theme_project_folders must be a list of paths")
            updates["theme_project_folders"] = [
                _resolve(project_dir, _require_str(folder, "theme_project_folders")) for folder in folders
            ]

        return replace(options, **updates)

    def with_overrides(
        self,
        *,
        theme_jar_folder: Path | None = None,
        static_assets_output_folder: Path | None = None,
        theme_project_folders: list[Path] | None = None,
        node_modules_folder: Path | None = None,
    ) -> "ThemePluginOptions":
        """Return a copy with every non-empty override applied."""
        updates: dict[str, Any] = {}
        if theme_jar_folder is not None:
            updates["theme_jar_folder"] = theme_jar_folder
        if static_assets_output_folder is not None:
            updates["static_assets_output_folder"] = static_assets_output_folder
        if theme_project_folders:
            updates["theme_project_folders"] = list(theme_project_folders)
        if node_modules_folder is not None:
            updates["node_modules_folder"] = node_modules_folder
        return replace(self, **updates)


def config_path_for(project_dir: Path, config_path: Path | None = None) -> Path:
    """Return the config file to read: explicit path, env var, or project default."""
    if config_path is not None:
        return config_path
    if env_path := os.environ.get(CONFIG_ENV_VAR):
        return Path(env_path)
    return project_dir / CONFIG_FILENAME


def load_options(project_dir: Path, config_path: Path | None = None) -> ThemePluginOptions:
    """Load :class:`ThemePluginOptions` for *project_dir*.

    Raises:
        ThemeAssetsConfigError: If the file cannot be parsed or holds
            values of the wrong type.
    """
    project_dir = project_dir.resolve()
    path = config_path_for(project_dir, config_path)
    if not path.exists():
        return ThemePluginOptions.defaults(project_dir)

    yaml = YAML(typ="safe")
    try:
        with path.open("r", encoding="utf-8") as handle:
            payload = yaml.load(handle) or {}
    except (OSError, YAMLError) as exc:
        raise ThemeAssetsConfigError(f"Failed to parse {path}: {exc}") from exc

    if not isinstance(payload, dict):
        raise ThemeAssetsConfigError(f"Expected a mapping in {path}")

    section = payload.get("themes", payload)
    if not isinstance(section, dict):
        raise ThemeAssetsConfigError(f"'themes' in {path} must be a mapping")
    return ThemePluginOptions.from_dict(section, project_dir)


def _require_str(value: Any, key: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ThemeAssetsConfigError(f"{key} must be a non-empty path string")
    return value.strip()


def _resolve(project_dir: Path, value: str) -> Path:
    path = Path(value).expanduser()
    return path if path.is_absolute() else project_dir / path
