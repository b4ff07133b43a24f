"""
Tests for the cols subcommand
"""

import json

import pytest
from click.testing import CliRunner

from cli import main


@pytest.fixture
def runner(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return CliRunner()


class TestColsCommand:
    def test_lists_all_cols(self, runner, content_tree):
        result = runner.invoke(main, ["cols", "-d", str(content_tree)])
        assert result.exit_code == 0
        assert "4 col(s) of 4" in result.output
        assert "col-du-galibier" in result.output
        assert "(2642 m)" in result.output

    def test_filters(self, runner, content_tree):
        result = runner.invoke(main, [
            "cols", "-d", str(content_tree), "--region", "pyrenees", "--max-altitude", "2500",
        ])
        assert result.exit_code == 0
        assert "2 col(s) of 4" in result.output
        assert "alpe-d-huez" not in result.output

    def test_search(self, runner, content_tree):
        result = runner.invoke(main, ["cols", "-d", str(content_tree), "-q", "huez"])
        assert "1 col(s) of 4" in result.output
        assert "alpe-d-huez" in result.output

    def test_json_output(self, runner, tmp_path, record_factory, record_writer):
        cols_dir = tmp_path / "data" / "cols" / "enriched"
        record_writer(cols_dir, "galibier.json", record_factory("cols", "Col du Galibier", difficulty=9))
        record_writer(cols_dir, "aspin.json", record_factory("cols", "Col d'Aspin", difficulty=5))
        result = runner.invoke(main, [
            "cols", "-d", str(tmp_path / "data"), "--difficulty", "9", "--json",
        ])
        assert result.exit_code == 0
        cols = json.loads(result.output)
        assert [c["slug"] for c in cols] == ["col-du-galibier"]

    def test_missing_data_root(self, runner, tmp_path):
        result = runner.invoke(main, ["cols", "-d", str(tmp_path / "nothing")])
        assert result.exit_code == 0
        assert "0 col(s) of 0" in result.output


class TestColsLogging:
    def test_quiet_by_default(self, runner, content_tree):
        result = runner.invoke(main, ["cols", "-d", str(content_tree)])
        assert "Reading content directory" not in result.output

    def test_environment_log_level_applies(self, runner, content_tree, monkeypatch):
        monkeypatch.setenv("VELO_CONTENT_LOG_LEVEL", "INFO")
        result = runner.invoke(main, ["cols", "-d", str(content_tree)])
        assert result.exit_code == 0
        assert "Reading content directory" in result.output

    def test_config_file_log_level_applies(self, runner, content_tree, tmp_path):
        config_path = tmp_path / "audit.yaml"
        config_path.write_text("log_level: info\n", encoding="utf-8")
        result = runner.invoke(main, ["cols", "-d", str(content_tree), "--config", str(config_path)])
        assert "Reading content directory" in result.output

    def test_flag_log_level_applies(self, runner, content_tree):
        result = runner.invoke(main, ["cols", "-d", str(content_tree), "--log-level", "INFO"])
        assert "Reading content directory" in result.output
