"""Tests for CLI commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from eventmodel import __version__
from eventmodel.cli import app


@pytest.fixture
def cli_runner():
    """Return a CLI test runner."""
    return CliRunner()


def test_validate_command_success(cli_runner: CliRunner, test_project: Path):
    result = cli_runner.invoke(app, ["validate", "--manifest", str(test_project / "eventmodel.toml")])
    assert result.exit_code == 0
    assert "2 model file(s) valid" in result.stdout


def test_validate_command_with_parse_error(cli_runner: CliRunner, test_project: Path):
    (test_project / "models" / "broken.evm").write_text("a->\n", encoding="utf-8")
    result = cli_runner.invoke(app, ["validate", "--manifest", str(test_project / "eventmodel.toml")])
    assert result.exit_code == 1
    assert "Parse error" in result.output
    assert "broken.evm:1:4" in result.output


def test_validate_command_missing_manifest(cli_runner: CliRunner, tmp_path: Path):
    result = cli_runner.invoke(app, ["validate", "--manifest", str(tmp_path / "eventmodel.toml")])
    assert result.exit_code == 1
    assert "Manifest not found" in result.output


def test_parse_command_tree(cli_runner: CliRunner, test_project: Path):
    result = cli_runner.invoke(app, ["parse", str(test_project / "models" / "shop.evm")])
    assert result.exit_code == 0
    assert 'title Shop "Online Shop"' in result.stdout
    assert "read_model OrderSummary" in result.stdout
    assert 'line OrderPlaced -- OrderSummary "projected into"' in result.stdout


def test_parse_command_json(cli_runner: CliRunner, test_project: Path):
    result = cli_runner.invoke(
        app, ["parse", str(test_project / "models" / "shipping.evm"), "--format", "json"]
    )
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert [n["node_type"] for n in data["nodes"]] == ["declaration", "declaration", "arrow"]


def test_parse_command_missing_file(cli_runner: CliRunner, tmp_path: Path):
    result = cli_runner.invoke(app, ["parse", str(tmp_path / "missing.evm")])
    assert result.exit_code == 1


def test_graph_command(cli_runner: CliRunner, test_project: Path):
    result = cli_runner.invoke(app, ["graph", str(test_project / "models" / "shipping.evm")])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["title"] is None
    assert data["nodes"][1]["caption"] == "出荷された"
    assert data["edges"] == [
        {"edge_type": "arrow", "source": "Ordered", "target": "Shipped", "caption": None}
    ]


def test_version(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "eventmodel" in result.stdout


def test_validate_command_models_outside_project(cli_runner: CliRunner, tmp_path: Path):
    project = tmp_path / "proj"
    shared = tmp_path / "shared"
    project.mkdir()
    shared.mkdir()
    (shared / "a.evm").write_text("e:Ordered\n", encoding="utf-8")
    (project / "eventmodel.toml").write_text('[models]\npaths = ["../shared"]\n', encoding="utf-8")
    result = cli_runner.invoke(app, ["validate", "--manifest", str(project / "eventmodel.toml")])
    assert result.exit_code == 0
    assert f"{(shared / 'a.evm').resolve()}: 1 nodes" in result.stdout
    assert "1 model file(s) valid" in result.stdout


def test_validate_command_invalid_manifest_table(cli_runner: CliRunner, tmp_path: Path):
    (tmp_path / "eventmodel.toml").write_text('project = "x"\n', encoding="utf-8")
    result = cli_runner.invoke(app, ["validate", "--manifest", str(tmp_path / "eventmodel.toml")])
    assert result.exit_code == 1
    assert "[project] must be a table" in result.output


def test_parse_command_directory(cli_runner: CliRunner, tmp_path: Path):
    result = cli_runner.invoke(app, ["parse", str(tmp_path)])
    assert result.exit_code == 1
    assert "not a file" in result.output


def test_version_reports_installed_version(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["--version"])
    assert __version__ in result.stdout
