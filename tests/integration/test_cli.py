import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from linkgraph.cli import app

runner = CliRunner()


@pytest.fixture
def notes(tmp_path: Path) -> Path:
    (tmp_path / "project.md").write_text("# Project\nSee [[Implementation]].\n", encoding="utf-8")
    (tmp_path / "implementation.md").write_text("# Implementation\nFor [[project]].\n", encoding="utf-8")
    (tmp_path / "notes.md").write_text("# Notes\nno links here\n", encoding="utf-8")
    return tmp_path


def test_links_lists_resolved_edges(notes: Path) -> None:
    result = runner.invoke(app, ["links", str(notes)])

    assert result.exit_code == 0
    assert "Links (1)" in result.stdout
    assert "Implementation" in result.stdout


def test_layout_json_output(notes: Path) -> None:
    result = runner.invoke(app, ["layout", str(notes), "--ticks", "5", "--json"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["ticks"] == 5
    assert sorted(node["id"] for node in payload["nodes"]) == ["implementation.md", "project.md"]
    assert len(payload["edges"]) == 1


def test_layout_without_links_reports_empty_graph(tmp_path: Path) -> None:
    (tmp_path / "lonely.md").write_text("# Lonely\n", encoding="utf-8")

    result = runner.invoke(app, ["layout", str(tmp_path)])

    assert result.exit_code == 0
    assert "No connections yet." in result.stdout


def test_missing_directory_exits_with_error(tmp_path: Path) -> None:
    result = runner.invoke(app, ["links", str(tmp_path / "missing")])

    assert result.exit_code == 1
    assert "Directory not found" in result.stdout
