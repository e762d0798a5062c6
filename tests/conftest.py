from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from theme_assets.config import ThemePluginOptions


@pytest.fixture()
def project(tmp_path: Path) -> Path:
    """Empty project directory with an installed-dependency root."""
    project_dir = tmp_path / "project"
    (project_dir / "node_modules").mkdir(parents=True)
    return project_dir


@pytest.fixture()
def node_modules(project: Path) -> Path:
    return project / "node_modules"


@pytest.fixture()
def options(project: Path) -> ThemePluginOptions:
    """Default plugin options rooted at the test project."""
    return ThemePluginOptions.defaults(project)


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Undo CLI logging setup so caplog sees every record in later tests."""
    package_logger = logging.getLogger("theme_assets")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    yield
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
