"""Integration tests for the theme-assets CLI commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from tests.utils import write_package_file, write_theme
from theme_assets import __version__
from theme_assets import app as cli_app
from theme_assets.config import CONFIG_ENV_VAR, CONFIG_FILENAME


@pytest.fixture
def runner():
    """Create CLI runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _no_env_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


@pytest.fixture
def themed_project(project: Path, node_modules: Path) -> Path:
    """Project with one packaged and one project-local theme."""
    write_package_file(node_modules, "pkgA/files/a.css", "a")
    write_package_file(node_modules, "pkgA/files/b.css", "b")
    write_theme(project / "target" / "flow-frontend" / "themes", "lumo-extra")
    write_theme(project / "frontend" / "themes", "my-app", {"assets": {"pkgA": {"files/*.css": "css"}}})
    return project


class TestBuildCommand:
    """Tests for 'theme-assets build'."""

    def test_build_processes_themes(self, runner, themed_project: Path) -> None:
        result = runner.invoke(cli_app, ["build", "--project-dir", str(themed_project)])

        assert result.exit_code == 0, result.output
        assert "my-app" in result.stdout
        assert "lumo-extra" in result.stdout
        static = themed_project / "target" / "classes" / "META-INF" / "VAADIN" / "static"
        assert (static / "css" / "a.css").read_text(encoding="utf-8") == "a"
        assert (themed_project / "frontend" / "themes" / "my-app" / "my-app.js").is_file()

    def test_build_json_report(self, runner, themed_project: Path) -> None:
        result = runner.invoke(cli_app, ["build", "--project-dir", str(themed_project), "--json"])

        assert result.exit_code == 0, result.output
        payload = json.loads(result.stdout)
        assert [theme["name"] for theme in payload["themes"]] == ["lumo-extra", "my-app"]
        assert len(payload["themes"][1]["copied_files"]) == 2

    def test_build_with_cli_overrides(self, runner, project: Path) -> None:
        write_theme(project / "custom-themes", "solo")

        result = runner.invoke(
            cli_app,
            [
                "build",
                "--project-dir",
                str(project),
                "--theme-folder",
                "custom-themes",
                "--output-folder",
                "public",
                "--json",
            ],
        )

        assert result.exit_code == 0, result.output
        payload = json.loads(result.stdout)
        assert [theme["name"] for theme in payload["themes"]] == ["solo"]
        assert (project / "custom-themes" / "solo" / "solo.js").is_file()

    def test_build_without_themes(self, runner, project: Path) -> None:
        result = runner.invoke(cli_app, ["build", "--project-dir", str(project)])

        assert result.exit_code == 0
        assert "No themes found" in result.stdout

    def test_build_fails_on_malformed_theme(self, runner, project: Path) -> None:
        broken = write_theme(project / "frontend" / "themes", "broken")
        (broken / "theme.json").write_text("{ nope", encoding="utf-8")

        result = runner.invoke(cli_app, ["build", "--project-dir", str(project)])

        assert result.exit_code == 1
        assert "Error:" in result.stdout

    def test_build_fails_on_bad_config(self, runner, project: Path) -> None:
        (project / CONFIG_FILENAME).write_text("theme_project_folders: {a: b}\n", encoding="utf-8")

        result = runner.invoke(cli_app, ["build", "--project-dir", str(project)])

        assert result.exit_code == 1
        assert "Error:" in result.stdout


class TestListCommand:
    """Tests for 'theme-assets list'."""

    def test_list_shows_rules_without_writing(self, runner, themed_project: Path) -> None:
        result = runner.invoke(cli_app, ["list", "--project-dir", str(themed_project)])

        assert result.exit_code == 0, result.output
        assert "my-app" in result.stdout
        assert "pkgA" in result.stdout
        assert not (themed_project / "frontend" / "themes" / "my-app" / "my-app.js").exists()
        assert not (themed_project / "target" / "classes").exists()

    def test_list_reports_invalid_theme(self, runner, project: Path) -> None:
        broken = write_theme(project / "frontend" / "themes", "broken")
        (broken / "theme.json").write_text("{ nope", encoding="utf-8")

        result = runner.invoke(cli_app, ["list", "--project-dir", str(project)])

        assert result.exit_code == 0
        assert "invalid theme.json" in result.stdout

    def test_list_without_themes(self, runner, project: Path) -> None:
        result = runner.invoke(cli_app, ["list", "--project-dir", str(project)])

        assert result.exit_code == 0
        assert "No themes found" in result.stdout

    def test_list_reports_unreadable_theme_folder(
        self, runner, project: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        write_theme(project / "frontend" / "themes", "locked", {"assets": {}})

        def _denied(theme_folder: Path):
            raise PermissionError(f"Permission denied: {theme_folder}")

        monkeypatch.setattr("theme_assets.cli.commands.list_cmd.read_properties", _denied)

        result = runner.invoke(cli_app, ["list", "--project-dir", str(project)])

        assert result.exit_code == 1
        assert "Error:" in result.stdout
        assert "Permission denied" in result.stdout


def test_version_flag(runner) -> None:
    result = runner.invoke(cli_app, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.stdout
