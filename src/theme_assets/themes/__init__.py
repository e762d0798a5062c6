"""Theme discovery and static asset placement.

This subpackage walks theme roots, reads each theme's ``theme.json``,
copies declared static assets out of installed packages and writes a
loader script per theme.
"""

from theme_assets.themes.copier import copy_static_assets
from theme_assets.themes.errors import ThemeAssetsConfigError, ThemeAssetsError, ThemeConfigError
from theme_assets.themes.generator import ThemeFileGenerator, generate_theme_file
from theme_assets.themes.glob_resolver import resolve_asset_glob
from theme_assets.themes.models import AssetRule, BuildReport, ThemeConfiguration, ThemeResult
from theme_assets.themes.plugin import ApplicationThemePlugin, BuildHooks
from theme_assets.themes.processor import discover_themes, handle_themes
from theme_assets.themes.properties import THEME_PROPERTY_FILE, read_properties

__all__ = [
    "ApplicationThemePlugin",
    "AssetRule",
    "BuildHooks",
    "BuildReport",
    "THEME_PROPERTY_FILE",
    "ThemeAssetsConfigError",
    "ThemeAssetsError",
    "ThemeConfigError",
    "ThemeConfiguration",
    "ThemeFileGenerator",
    "ThemeResult",
    "copy_static_assets",
    "discover_themes",
    "generate_theme_file",
    "handle_themes",
    "read_properties",
    "resolve_asset_glob",
]
