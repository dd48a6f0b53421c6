from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from g_dep_tree.cli import app


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def test_help(runner: CliRunner) -> None:
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "show" in result.stdout
    assert "configurations" in result.stdout


def test_show_prints_tree(runner: CliRunner, sample_report_path: Path) -> None:
    result = runner.invoke(app, ["show", str(sample_report_path)])
    assert result.exit_code == 0
    assert "Project Dependencies" in result.stdout
    assert "commons-codec:commons-codec:1.6" in result.stdout


def test_show_json(runner: CliRunner, sample_report_path: Path) -> None:
    result = runner.invoke(app, ["show", str(sample_report_path), "--json"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["root"]["label"] == "Project Dependencies"
    assert len(data["root"]["children"]) == 2
    assert data["unplaced"] == []


def test_show_missing_file(runner: CliRunner, tmp_path: Path) -> None:
    result = runner.invoke(app, ["show", str(tmp_path / "missing.txt")])
    assert result.exit_code == 1
    assert "Error" in result.stdout


def test_show_rejects_bad_config(runner: CliRunner, sample_report_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("GDEP_LOG_LEVEL", "LOUD")
    result = runner.invoke(app, ["show", str(sample_report_path)])
    assert result.exit_code == 1


def test_configurations_table(runner: CliRunner, sample_report_path: Path) -> None:
    result = runner.invoke(app, ["configurations", str(sample_report_path)])
    assert result.exit_code == 0
    assert "compile" in result.stdout
    assert "runtime" in result.stdout


def test_configurations_empty_report(runner: CliRunner, tmp_path: Path) -> None:
    path = tmp_path / "report.txt"
    path.write_text("Root project 'demo'\n\nNo dependencies\n", encoding="utf-8")
    result = runner.invoke(app, ["configurations", str(path)])
    assert result.exit_code == 0
    assert "No configurations found" in result.stdout


def test_show_keeps_coordinates_intact(runner: CliRunner, tmp_path: Path) -> None:
    path = tmp_path / "report.txt"
    path.write_text(
        "compile - Compile classpath.\n+--- org.apache.ant:ant:1.10.14\n\\--- com.acme:x:2.0\n",
        encoding="utf-8",
    )
    result = runner.invoke(app, ["show", str(path)])
    assert result.exit_code == 0
    assert "org.apache.ant:ant:1.10.14" in result.stdout
    assert "com.acme:x:2.0" in result.stdout


def test_configurations_reads_stdin(runner: CliRunner, sample_report_text: str) -> None:
    result = runner.invoke(app, ["configurations", "-"], input=sample_report_text)
    assert result.exit_code == 0
    assert "compile" in result.stdout
    assert "runtime" in result.stdout
