"""Loader script generation for a theme.

The processor only depends on the :class:`ThemeFileGenerator` contract:
given the theme folder, its name and its configuration, return the full
text of ``<themeName>.js``. :func:`generate_theme_file` is the default
implementation used by the build step.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Protocol

from theme_assets.themes.models import ThemeConfiguration

COMPONENTS_FOLDER = "components"

_HEADER = "import 'construct-style-sheets-polyfill';"

_APPLY_THEME = """\
const createSheet = (cssText) => {
  const sheet = new CSSStyleSheet();
  sheet.replaceSync(cssText);
  return sheet;
};

export const applyTheme = (target) => {
  const sheets = globalStyles.map(createSheet);
  target.adoptedStyleSheets = [...target.adoptedStyleSheets, ...sheets];
  Object.entries(componentStyles).forEach(([tag, cssText]) => {
    themeRegistry[tag] = createSheet(cssText);
  });
};
"""


class ThemeFileGenerator(Protocol):
    """Callable producing the runtime loader script for one theme."""

    def __call__(self, theme_folder: Path, theme_name: str, config: ThemeConfiguration) -> str: ...


def generate_theme_file(theme_folder: Path, theme_name: str, config: ThemeConfiguration) -> str:
    """Build the ES module that applies *theme_name* at runtime.

    Top-level ``*.css`` files of the theme become global styles,
    ``components/*.css`` files become per-component styles keyed by file
    stem (the component tag name). File lists are sorted so the output
    only changes when the theme's files or properties change.
    """
    global_files = _css_files(theme_folder)
    component_files = _css_files(theme_folder / COMPONENTS_FOLDER)

    lines = [
        f"// Theme '{theme_name}'. Generated on every build, do not edit.",
        _HEADER,
    ]
    for index, css_file in enumerate(global_files):
        lines.append(f"import globalCss{index} from {_specifier(css_file.name)};")
    for index, css_file in enumerate(component_files):
        lines.append(f"import componentCss{index} from {_specifier(f'{COMPONENTS_FOLDER}/{css_file.name}')};")

    lines.append("")
    lines.append(f"export const themeName = {json.dumps(theme_name)};")
    lines.append(f"export const themeProperties = {json.dumps(dict(config.properties), indent=2)};")
    lines.append("export const themeRegistry = {};")
    lines.append("")

    global_refs = ", ".join(f"globalCss{index}" for index in range(len(global_files)))
    lines.append(f"const globalStyles = [{global_refs}];")
    lines.append("export const componentStyles = {")
    for index, css_file in enumerate(component_files):
        lines.append(f"  {json.dumps(css_file.stem)}: componentCss{index},")
    lines.append("};")
    lines.append("")
    lines.append(_APPLY_THEME)
    return "\n".join(lines)


def _css_files(folder: Path) -> list[Path]:
    if not folder.is_dir():
        return []
    return sorted(path for path in folder.glob("*.css") if path.is_file())


def _specifier(relative: str) -> str:
    """Quoted import specifier for a file next to the loader script."""
    return json.dumps(f"./{relative}?inline")
