"""Theme property reader: loads ``theme.json`` from a theme folder."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from theme_assets.themes.errors import ThemeConfigError
from theme_assets.themes.models import ThemeConfiguration

THEME_PROPERTY_FILE = "theme.json"


def read_properties(theme_folder: Path) -> ThemeConfiguration:
    """Return the configuration declared in *theme_folder*/theme.json.

    A missing file is an empty configuration, not an error. A file that
    is present but unparseable raises :class:`ThemeConfigError`.

    Args:
        theme_folder: Existing theme directory.

    Returns:
        ThemeConfiguration with the raw properties and the ``assets``
        section (empty when not declared).
    """
    property_file = theme_folder / THEME_PROPERTY_FILE
    if not property_file.is_file():
        return ThemeConfiguration()

    try:
        data = json.loads(property_file.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ThemeConfigError(f"Invalid JSON in {property_file}: {exc}", property_file) from exc

    if not isinstance(data, dict):
        raise ThemeConfigError(f"Expected JSON object in {property_file}", property_file)

    return ThemeConfiguration(
        properties=data,
        assets=_parse_assets(data.get("assets"), property_file),
    )


def _parse_assets(raw: Any, property_file: Path) -> Mapping[str, Mapping[str, str]]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ThemeConfigError(f"{property_file}: 'assets' must be an object", property_file)

    assets: dict[str, dict[str, str]] = {}
    for module, rules in raw.items():
        if not isinstance(rules, dict):
            raise ThemeConfigError(
                f"{property_file}: assets for {module!r} must map glob patterns to folders",
                property_file,
            )
        for pattern, destination in rules.items():
            if not isinstance(destination, str):
                raise ThemeConfigError(
                    f"{property_file}: destination for {module!r} pattern {pattern!r} must be a string",
                    property_file,
                )
        assets[module] = dict(rules)
    return assets
