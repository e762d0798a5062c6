"""Filesystem helpers shared by the theme-assets tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def write_theme(root: Path, name: str, properties: dict[str, Any] | None = None) -> Path:
    """Create a theme folder, with a theme.json when *properties* is given."""
    theme_folder = root / name
    theme_folder.mkdir(parents=True, exist_ok=True)
    if properties is not None:
        (theme_folder / "theme.json").write_text(json.dumps(properties, indent=2), encoding="utf-8")
    return theme_folder


def write_package_file(node_modules: Path, relative: str, content: str) -> Path:
    """Create ``node_modules/<relative>`` with *content*."""
    path = node_modules / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def snapshot_tree(root: Path) -> dict[str, bytes]:
    """Map every file under *root* (relative path) to its bytes."""
    if not root.exists():
        return {}
    return {
        str(path.relative_to(root)): path.read_bytes()
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }
