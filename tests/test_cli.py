"""Tests for the roster command line."""

import json
import shutil
from pathlib import Path

import pytest

from roster import __version__
from roster.cli import main
from roster.models import Group
from roster.report import github_sponsors_source

SHIPPED_TOOLS_DIR = Path(__file__).parent.parent / "tools"


@pytest.fixture
def fake_default_sources(monkeypatch):
    """Swap the real sources for canned data."""
    sources = {
        Group.CONTRIBUTOR: lambda config, verbose: {"Alice": "https://a"},
        Group.TRANSLATOR: lambda config, verbose: {"bob": "https://b"},
        Group.GITHUB_SPONSOR: lambda config, verbose: {},
        Group.PATREON_SPONSOR: None,
    }
    monkeypatch.setattr("roster.report.DEFAULT_SOURCES", sources)
    return sources


class TestMain:
    """Tests for the CLI entry point."""

    def test_writes_outputs(self, temp_config_dir, fake_default_sources, monkeypatch, capsys):
        monkeypatch.chdir(temp_config_dir)
        markdown = temp_config_dir / "CONTRIBUTORS.md"
        structured = temp_config_dir / "contributors.json"

        assert main([str(markdown), str(structured)]) == 0

        data = json.loads(structured.read_text(encoding="utf-8"))
        assert data["contributor"] == {"Alice": "https://a", "Carol": "https://example.com/carol"}
        assert "* [bob](https://b)" in markdown.read_text(encoding="utf-8")
        assert "Harvesting complete!" in capsys.readouterr().out

    def test_quiet(self, temp_config_dir, fake_default_sources, monkeypatch, capsys):
        monkeypatch.chdir(temp_config_dir)

        assert main(["out.md", "out.json", "--quiet"]) == 0
        assert capsys.readouterr().out == ""

    def test_overrides_dir_option(self, temp_config_dir, fake_default_sources, tmp_path_factory, monkeypatch):
        workdir = tmp_path_factory.mktemp("work")
        monkeypatch.chdir(workdir)

        code = main([
            "out.md",
            "out.json",
            "-q",
            "--overrides-dir",
            str(temp_config_dir / "patches"),
        ])

        assert code == 0
        data = json.loads((workdir / "out.json").read_text(encoding="utf-8"))
        assert data["supporter"]["patreon"] == {
            "patron2": "https://patreon.com/patron2",
            "patron10": "https://patreon.com/patron10",
        }

    def test_roster_error_exits_nonzero(self, temp_config_dir, monkeypatch, capsys):
        """Test a missing credential stops the run before any output."""
        monkeypatch.chdir(temp_config_dir)
        for name in ("GITHUB_REPOSITORY", "CROWDIN_PROJECTID", "CROWDIN_TOKEN", "GITHUB_TOKEN"):
            monkeypatch.delenv(name, raising=False)
        monkeypatch.setattr(
            "roster.report.DEFAULT_SOURCES",
            {Group.GITHUB_SPONSOR: github_sponsors_source},
        )

        assert main(["out.md", "out.json", "-q"]) == 1

        assert "GITHUB_TOKEN" in capsys.readouterr().err
        assert not (temp_config_dir / "out.md").exists()

    def test_runs_without_config_or_flags(self, tmp_path, fake_default_sources, monkeypatch):
        """Test the shipped tools/ override files are found by default."""
        shutil.copytree(SHIPPED_TOOLS_DIR, tmp_path / "tools")
        monkeypatch.chdir(tmp_path)

        assert main(["out.md", "out.json", "-q"]) == 0

        data = json.loads((tmp_path / "out.json").read_text(encoding="utf-8"))
        assert data["contributor"] == {"Alice": "https://a"}
        assert data["translator"] == {"bob": "https://b"}

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["--version"])

        assert excinfo.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_missing_arguments(self):
        with pytest.raises(SystemExit) as excinfo:
            main([])

        assert excinfo.value.code == 2
