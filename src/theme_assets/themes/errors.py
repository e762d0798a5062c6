"""Exception hierarchy for the theme asset build step."""

from __future__ import annotations

from pathlib import Path


class ThemeAssetsError(Exception):
    """Base exception for theme asset errors."""


class ThemeConfigError(ThemeAssetsError, ValueError):
    """Raised when a theme's ``theme.json`` cannot be used.

    A corrupt theme configuration aborts the whole build run; themes are
    never skipped and processing never continues with partial metadata.
    """

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path


class ThemeAssetsConfigError(ThemeAssetsError, RuntimeError):
    """Raised when the build-tool configuration file is invalid."""
