"""Tests for the command line interface."""

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from cli import app

runner = CliRunner()


def _corpus(tmp_path: Path) -> Path:
    (tmp_path / "cat.txt").write_text("The cat sat on the mat.", encoding="utf-8")
    (tmp_path / "dog.txt").write_text("Dogs are loyal animals.", encoding="utf-8")
    return tmp_path


def test_search_prints_ranked_passages(tmp_path: Path) -> None:
    result = runner.invoke(app, ["search", "cat mat", "--docs", str(_corpus(tmp_path)), "--top-k", "1"])
    assert result.exit_code == 0
    assert "The cat sat on the mat." in result.output
    assert "Dogs" not in result.output


def test_search_json_output(tmp_path: Path) -> None:
    result = runner.invoke(app, ["search", "loyal", "--docs", str(_corpus(tmp_path)), "--json"])
    assert result.exit_code == 0
    rows = [json.loads(line) for line in result.output.splitlines() if line.startswith("{")]
    assert rows[0]["text"] == "Dogs are loyal animals."
    assert rows[0]["rank"] == 1


def test_search_blank_query_fails(tmp_path: Path) -> None:
    result = runner.invoke(app, ["search", "  ", "--docs", str(_corpus(tmp_path))])
    assert result.exit_code == 2


def test_stats_reports_counts(tmp_path: Path) -> None:
    result = runner.invoke(app, ["stats", "--docs", str(_corpus(tmp_path))])
    assert result.exit_code == 0
    assert "documents=2" in result.output
    assert "vocabulary=6" in result.output
