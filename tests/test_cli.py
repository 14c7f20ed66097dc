"""Tests for the command-line interface."""

import json

import pytest
from click.testing import CliRunner

from todo_parser.cli import main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def no_config(tmp_path):
    return ["--config", str(tmp_path / "missing.yaml")]


class TestCreditsCommand:
    def test_credits(self, runner, no_config):
        result = runner.invoke(main, no_config + ["credits"])

        assert result.exit_code == 0
        assert "Author:" in result.output
        assert "Project: ToDo Parser" in result.output
        assert "Language: Python" in result.output


class TestParseCommand:
    """Test the parse command."""

    def test_parse_file(self, runner, no_config, sprint_file):
        result = runner.invoke(main, no_config + ["parse", "--file", str(sprint_file)])

        assert result.exit_code == 0
        assert "Project: Sprint" in result.output
        assert "Total: 3 | Active: 2 | Completed: 1" in result.output

    def test_parse_tree(self, runner, no_config, sprint_file):
        result = runner.invoke(main, no_config + ["parse", "-f", str(sprint_file), "--tree"])

        assert result.exit_code == 0
        assert "Syntax tree:" in result.output
        lines = result.output.splitlines()
        assert "file" in lines
        assert "  project" in lines
        assert "            priority: @high" in lines

    def test_parse_json(self, runner, no_config, sprint_file):
        result = runner.invoke(main, no_config + ["parse", "-f", str(sprint_file), "--json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data[0]["name"] == "Sprint"
        assert data[0]["tasks"][1]["depends_on"] == "DB"
        assert data[0]["stats"]["completed_tasks"] == 1

    def test_syntax_error_exits_with_failure(self, runner, no_config, tmp_path):
        path = tmp_path / "broken.todo"
        path.write_text('project "T" {\n  todo: "A"\n}\n', encoding="utf-8")

        result = runner.invoke(main, no_config + ["parse", "-f", str(path)])

        assert result.exit_code == 1
        assert "Parsing error: line 3, column 1" in result.output

    def test_syntax_error_in_tree_mode(self, runner, no_config, tmp_path):
        path = tmp_path / "broken.todo"
        path.write_text("", encoding="utf-8")

        result = runner.invoke(main, no_config + ["parse", "-f", str(path), "--tree"])

        assert result.exit_code == 1
        assert "Parsing error" in result.output

    def test_missing_file(self, runner, no_config, tmp_path):
        result = runner.invoke(main, no_config + ["parse", "-f", str(tmp_path / "nope.todo")])

        assert result.exit_code == 1
        assert "Parsing error: Cannot read" in result.output

    def test_file_option_is_required(self, runner, no_config):
        result = runner.invoke(main, no_config + ["parse"])
        assert result.exit_code != 0

    def test_config_file_disables_emoji(self, runner, tmp_path, sprint_file):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("use_emoji: false\nshow_summary: false\n")

        result = runner.invoke(main, ["--config", str(config_path), "parse", "-f", str(sprint_file)])

        assert result.exit_code == 0
        assert "[x] DB" in result.output
        assert "Total:" not in result.output

    def test_verbose_flag(self, runner, no_config, sprint_file):
        result = runner.invoke(main, ["-v"] + no_config + ["parse", "-f", str(sprint_file)])
        assert result.exit_code == 0
