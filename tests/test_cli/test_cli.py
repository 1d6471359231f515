"""Tests for the grid-designer CLI commands."""
from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner
from flask import Flask

from grid_designer import __version__
from grid_designer.cli.main import cli
from grid_designer.model import DEFAULT_SNAPSHOT


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def snapshot_file(tmp_path: Path, make_grid_system) -> Path:
    """Two entries: 4 columns up to 719px, 8 columns from 720px."""
    path = tmp_path / "grid.json"
    grid_system = make_grid_system(0, 720, overrides={1: {"columns": 8}})
    path.write_text(json.dumps(grid_system.to_json()), encoding="utf-8")
    return path


@pytest.fixture
def gap_file(tmp_path: Path) -> Path:
    entries = [dict(e) for e in DEFAULT_SNAPSHOT["preferences"]]
    entries[1] = {**entries[1], "breakpointRange": {"minWidth": 800, "maxWidth": 1023}}
    path = tmp_path / "gap.json"
    path.write_text(json.dumps({"preferences": entries}), encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help_lists_commands(self, runner) -> None:
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        for command in ["scss", "inspect", "validate", "export", "url", "serve"]:
            assert command in result.output

    def test_version(self, runner) -> None:
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_log_level_choice(self, runner) -> None:
        result = runner.invoke(cli, ["--log-level", "LOUD", "inspect"])
        assert result.exit_code != 0


# ---------------------------------------------------------------------------
# scss command
# ---------------------------------------------------------------------------


class TestScssCommand:
    def test_default_grid_system(self, runner) -> None:
        result = runner.invoke(cli, ["scss"])
        assert result.exit_code == 0
        assert result.output.startswith("// Unit\n")
        assert '$mq4: "(min-width: #{em(1600)})";' in result.output

    def test_from_file(self, runner, snapshot_file) -> None:
        result = runner.invoke(cli, ["scss", str(snapshot_file)])
        assert result.exit_code == 0
        assert "$mq1\\:grid-columns: 8;" in result.output
        assert "$mq2" not in result.output

    def test_output_file(self, runner, snapshot_file, tmp_path) -> None:
        out = tmp_path / "grid.scss"
        result = runner.invoke(cli, ["scss", str(snapshot_file), "-o", str(out)])
        assert result.exit_code == 0
        assert "2 breakpoint(s)" in result.output
        assert out.read_text(encoding="utf-8").startswith("// Unit\n")

    def test_invalid_snapshot(self, runner, gap_file) -> None:
        result = runner.invoke(cli, ["scss", str(gap_file)])
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_nonexistent_file(self, runner) -> None:
        result = runner.invoke(cli, ["scss", "/nonexistent/grid.json"])
        assert result.exit_code != 0


# ---------------------------------------------------------------------------
# inspect command
# ---------------------------------------------------------------------------


class TestInspectCommand:
    def test_default_grid_system(self, runner) -> None:
        result = runner.invoke(cli, ["inspect"])
        assert result.exit_code == 0
        assert "Breakpoints: 5" in result.output
        assert "720 – 1023" in result.output
        assert "1600 +" in result.output
        assert "scale=1.25" in result.output
        assert "Media queries: 4" in result.output

    def test_demo_offsets(self, runner, snapshot_file) -> None:
        result = runner.invoke(cli, ["inspect", str(snapshot_file)])
        assert "demo: heading1=1-2, heading2=1-2, paragraph=1-2" in result.output
        assert "$mq1  min-width 720px" in result.output


# ---------------------------------------------------------------------------
# validate command
# ---------------------------------------------------------------------------


class TestValidateCommand:
    def test_clean_file(self, runner, tmp_path, make_grid_system) -> None:
        path = tmp_path / "one.json"
        path.write_text(json.dumps(make_grid_system(0).to_json()), encoding="utf-8")
        result = runner.invoke(cli, ["validate", str(path)])
        assert result.exit_code == 0
        assert "OK: one.json is valid" in result.output

    def test_info_only(self, runner, tmp_path) -> None:
        path = tmp_path / "default.json"
        path.write_text(json.dumps(DEFAULT_SNAPSHOT), encoding="utf-8")
        result = runner.invoke(cli, ["validate", str(path)])
        assert result.exit_code == 0
        assert "Summary: 0 error(s), 0 warning(s), 1 info" in result.output

    def test_redundant_breakpoint_warning(self, runner, tmp_path, make_grid_system) -> None:
        path = tmp_path / "same.json"
        path.write_text(json.dumps(make_grid_system(0, 720).to_json()), encoding="utf-8")
        result = runner.invoke(cli, ["validate", str(path)])
        assert result.exit_code == 0
        assert "WARNING" in result.output

    def test_gap(self, runner, gap_file) -> None:
        result = runner.invoke(cli, ["validate", str(gap_file)])
        assert result.exit_code == 1
        assert "leaves a gap" in result.output
        assert "Summary: 1 error(s)" in result.output

    def test_invalid_json(self, runner, tmp_path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{nope", encoding="utf-8")
        result = runner.invoke(cli, ["validate", str(path)])
        assert result.exit_code == 1
        assert "Invalid JSON" in result.output

    def test_not_utf8(self, runner, tmp_path) -> None:
        path = tmp_path / "binary.json"
        path.write_bytes(b"\xff\xfe{\x00")
        result = runner.invoke(cli, ["validate", str(path)])
        assert result.exit_code == 1
        assert "Error: binary.json is not UTF-8 text" in result.output

    def test_not_utf8_scss(self, runner, tmp_path) -> None:
        path = tmp_path / "binary.json"
        path.write_bytes(b"\xff\xfe{\x00")
        result = runner.invoke(cli, ["scss", str(path)])
        assert result.exit_code == 1
        assert "Traceback" not in result.output

    def test_missing_fields(self, runner, tmp_path) -> None:
        path = tmp_path / "partial.json"
        path.write_text(json.dumps({"preferences": [{"columns": 4}]}), encoding="utf-8")
        result = runner.invoke(cli, ["validate", str(path)])
        assert result.exit_code == 1
        assert "Malformed preferences snapshot" in result.output


# ---------------------------------------------------------------------------
# export command
# ---------------------------------------------------------------------------


class TestExportCommand:
    def test_sketch(self, runner) -> None:
        result = runner.invoke(cli, ["export", "--width", "320"])
        assert result.exit_code == 0
        assert json.loads(result.output)["columns"]["columnWidth"] == 60

    def test_figma(self, runner) -> None:
        result = runner.invoke(cli, ["export", "--width", "1200", "--tool", "figma"])
        assert result.exit_code == 0
        assert json.loads(result.output)["columns"]["margin"] == 104

    def test_scaled_entry(self, runner) -> None:
        result = runner.invoke(cli, ["export", "--width", "1600"])
        assert result.exit_code == 1
        assert "scale 1" in result.output

    def test_width_required(self, runner) -> None:
        result = runner.invoke(cli, ["export"])
        assert result.exit_code != 0

    def test_unknown_tool(self, runner) -> None:
        result = runner.invoke(cli, ["export", "--width", "320", "--tool", "gimp"])
        assert result.exit_code != 0


# ---------------------------------------------------------------------------
# url command
# ---------------------------------------------------------------------------


class TestUrlCommand:
    def test_default_is_empty(self, runner) -> None:
        result = runner.invoke(cli, ["url"])
        assert result.exit_code == 0
        assert result.output == "\n"

    def test_snapshot(self, runner, snapshot_file) -> None:
        result = runner.invoke(cli, ["url", str(snapshot_file), "--query", "a=1"])
        assert result.exit_code == 0
        assert result.output.startswith("a=1&gridSystem=")

    def test_custom_key(self, runner, snapshot_file) -> None:
        result = runner.invoke(cli, ["url", str(snapshot_file), "--key", "g"])
        assert result.output.startswith("g=")


# ---------------------------------------------------------------------------
# serve command
# ---------------------------------------------------------------------------


class TestServeCommand:
    def test_serve_help_shows_options(self, runner) -> None:
        result = runner.invoke(cli, ["serve", "--help"])
        assert result.exit_code == 0
        assert "Start the grid designer web API" in result.output
        for option in ["--host", "--port", "--query", "--key", "--debug"]:
            assert option in result.output

    def test_serve_runs_app(self, runner, monkeypatch) -> None:
        calls = []
        monkeypatch.setattr(Flask, "run", lambda self, **kwargs: calls.append((self, kwargs)))
        result = runner.invoke(cli, ["--log-level", "INFO", "serve", "--port", "8123"])
        assert result.exit_code == 0
        assert "Starting grid designer on 127.0.0.1:8123" in result.output
        app, kwargs = calls[0]
        assert kwargs == {"host": "127.0.0.1", "port": 8123, "debug": False}
        assert app.extensions["designer_config"].log_level == "INFO"
