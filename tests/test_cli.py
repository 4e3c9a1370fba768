"""Tests for CLI commands."""

import json
from collections.abc import Callable
from pathlib import Path

import pytest
from typer.testing import CliRunner

from todotree.cli import app

runner = CliRunner()


@pytest.fixture
def project(temp_dir: Path, make_file: Callable[..., Path]) -> Path:
    make_file("src/main.py", "# TODO(ann): first\nprint()\n# FIXME: second\n")
    make_file("src/util.py", "# NOTE: third\n")
    make_file("README.md", "nothing to see\n")
    return temp_dir


class TestScanCommand:
    def test_scan_json(self, project: Path):
        result = runner.invoke(app, ["scan", str(project), "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["total_count"] == 3
        assert data["files_scanned"] == 3
        assert data["files_with_todos"] == 2
        main_items = data["files"][str(project / "src" / "main.py")]
        assert main_items[0]["author"] == "ann"
        assert main_items[1]["priority"] == "Critical"

    def test_scan_tree_output(self, project: Path):
        result = runner.invoke(app, ["scan", str(project)])

        assert result.exit_code == 0, result.output
        assert "main.py (2)" in result.output
        assert "FIXME: second" in result.output
        assert "Found 3 item(s) in 2 file(s)" in result.output

    def test_scan_flat_with_custom_tags(self, project: Path):
        result = runner.invoke(app, ["scan", str(project), "--flat", "-t", "NOTE,BUG"])

        assert result.exit_code == 0, result.output
        assert "src/util.py:1:3" in result.output
        assert "main.py" not in result.output

    def test_scan_filter_and_priority(self, project: Path):
        filtered = runner.invoke(app, ["scan", str(project), "--json", "--filter", "note"])
        urgent = runner.invoke(app, ["scan", str(project), "--json", "--priority", "high"])

        assert json.loads(filtered.output)["tag_counts"] == {"NOTE": 1}
        assert json.loads(urgent.output)["tag_counts"] == {"FIXME": 1}

    def test_scan_case_sensitive(self, temp_dir: Path, make_file: Callable[..., Path]):
        make_file("a.py", "# todo: lower\n# TODO: upper\n")

        loose = runner.invoke(app, ["scan", str(temp_dir), "--json"])
        strict = runner.invoke(app, ["scan", str(temp_dir), "--json", "--case-sensitive"])

        assert json.loads(loose.output)["total_count"] == 2
        assert json.loads(strict.output)["total_count"] == 1

    def test_scan_uses_config_file(self, temp_dir: Path, make_file: Callable[..., Path]):
        make_file(".todorc.yaml", "tags: [CUSTOM]\njson: true\n")
        make_file("a.py", "# CUSTOM: mine\n# TODO: default tag\n")

        result = runner.invoke(app, ["scan", str(temp_dir)])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["tag_counts"] == {"CUSTOM": 1}

    def test_scan_missing_root_fails(self, temp_dir: Path):
        result = runner.invoke(app, ["scan", str(temp_dir / "missing")])

        assert result.exit_code == 1
        assert "Failed to resolve path" in result.output

    def test_scan_path_below_a_file_fails(self, temp_dir: Path, make_file: Callable[..., Path]):
        path = make_file("plain.txt", "x")

        result = runner.invoke(app, ["scan", str(path / "child")])

        assert result.exit_code == 1

    def test_scan_bad_priority_fails(self, project: Path):
        result = runner.invoke(app, ["scan", str(project), "--priority", "urgent"])

        assert result.exit_code == 1
        assert "Unknown priority" in result.output

    def test_scan_bad_config_fails(self, temp_dir: Path, make_file: Callable[..., Path]):
        make_file(".todorc.json", "{not json or yaml: [")

        result = runner.invoke(app, ["scan", str(temp_dir)])

        assert result.exit_code == 1
        assert "Failed to parse config" in result.output

    def test_scan_verbose(self, project: Path):
        result = runner.invoke(app, ["scan", str(project), "--verbose", "--threads", "1"])

        assert result.exit_code == 0, result.output
        assert "[DEBUG:scan]" in result.output


class TestOtherCommands:
    def test_list_is_flat(self, project: Path):
        result = runner.invoke(app, ["list", str(project)])

        assert result.exit_code == 0, result.output
        assert "src/main.py:1:3" in result.output
        assert "src/main.py:3:3" in result.output

    def test_tags_json(self, temp_dir: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.chdir(temp_dir)

        result = runner.invoke(app, ["tags", "--json"])

        assert result.exit_code == 0, result.output
        names = [row["name"] for row in json.loads(result.output)["tags"]]
        assert names == ["TODO", "FIXME", "BUG", "NOTE", "HACK", "XXX", "WARN", "PERF"]

    def test_tags_table(self, temp_dir: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.chdir(temp_dir)

        result = runner.invoke(app, ["tags"])

        assert result.exit_code == 0, result.output
        assert "Known bugs" in result.output

    def test_stats(self, project: Path):
        result = runner.invoke(app, ["stats", str(project), "--json"])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == {
            "total_count": 3,
            "files_scanned": 3,
            "files_with_todos": 2,
            "tag_counts": {"FIXME": 1, "NOTE": 1, "TODO": 1},
        }

    def test_init_creates_config(self, temp_dir: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.chdir(temp_dir)

        first = runner.invoke(app, ["init"])
        second = runner.invoke(app, ["init"])
        forced = runner.invoke(app, ["init", "--force", "--format", "json"])

        assert first.exit_code == 0, first.output
        assert (temp_dir / ".todorc.yaml").is_file()
        assert second.exit_code == 1
        assert forced.exit_code == 0
        assert json.loads((temp_dir / ".todorc.json").read_text())["tags"][0] == "TODO"

    def test_init_rejects_unknown_format(self, temp_dir: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.chdir(temp_dir)

        result = runner.invoke(app, ["init", "--format", "toml"])

        assert result.exit_code == 1

    def test_config_shows_source(self, temp_dir: Path, make_file: Callable[..., Path]):
        make_file(".todorc.json", '{"tags": ["SHOWN"]}')

        result = runner.invoke(app, ["config", str(temp_dir)])

        assert result.exit_code == 0, result.output
        assert ".todorc.json" in result.output
        assert "SHOWN" in result.output

    def test_version(self):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert result.output.startswith("todo-tree ")
