"""Data types shared by the theme discovery and asset copy steps."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping


@dataclass(frozen=True)
class AssetRule:
    """One ``module -> pattern -> destination`` entry of a theme's assets."""

    module: str
    pattern: str
    destination: str


@dataclass(frozen=True)
class ThemeConfiguration:
    """Parsed content of a theme's ``theme.json``.

    ``properties`` is the full mapping as read from disk (unknown keys
    included, they are handed to the loader script generator untouched).
    ``assets`` keeps the insertion order of the JSON objects.
    """

    properties: Mapping[str, Any] = field(default_factory=dict)
    assets: Mapping[str, Mapping[str, str]] = field(default_factory=dict)

    def asset_rules(self) -> list[AssetRule]:
        """Flatten ``assets`` into rules, modules first then patterns."""
        return [
            AssetRule(module, pattern, destination)
            for module, rules in self.assets.items()
            for pattern, destination in rules.items()
        ]


@dataclass
class ThemeResult:
    """Outcome of processing a single theme folder."""

    name: str
    folder: Path
    loader_file: Path
    copied_files: list[Path] = field(default_factory=list)


@dataclass
class BuildReport:
    """Everything one build run did, in processing order."""

    processed_roots: list[Path] = field(default_factory=list)
    skipped_roots: list[Path] = field(default_factory=list)
    themes: list[ThemeResult] = field(default_factory=list)

    @property
    def copied_count(self) -> int:
        return sum(len(theme.copied_files) for theme in self.themes)

    def to_dict(self) -> dict[str, object]:
        return {
            "processed_roots": [str(path) for path in self.processed_roots],
            "skipped_roots": [str(path) for path in self.skipped_roots],
            "themes": [
                {
                    "name": theme.name,
                    "folder": str(theme.folder),
                    "loader_file": str(theme.loader_file),
                    "copied_files": [str(path) for path in theme.copied_files],
                }
                for theme in self.themes
            ],
        }
