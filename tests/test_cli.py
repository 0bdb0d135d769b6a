"""
Tests for the command-line interface.
"""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from pagegist.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def html_file(tmp_path, article_html):
    path = tmp_path / "article.html"
    path.write_text(article_html, encoding="utf-8")
    return path


@pytest.fixture
def text_file(tmp_path, coffee_article):
    path = tmp_path / "article.txt"
    path.write_text(coffee_article, encoding="utf-8")
    return path


def invoke(runner, *args):
    return runner.invoke(cli, ["--log-level", "WARNING", *args], catch_exceptions=False)


class TestExtractCommand:
    def test_json_output(self, runner, html_file):
        result = invoke(runner, "extract", str(html_file), "--url", "https://example.com/coffee", "--json")

        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert payload["title"] == "Study Finds Coffee Improves Focus"
        assert payload["wordCount"] == len(payload["content"].split())
        assert payload["shouldProcess"] is True
        assert payload["isLongForm"] is False

    def test_should_process_omitted_without_url(self, runner, html_file):
        result = invoke(runner, "extract", str(html_file), "--json")

        assert json.loads(result.output)["shouldProcess"] is None

    def test_rich_output(self, runner, html_file):
        result = invoke(runner, "extract", str(html_file))

        assert result.exit_code == 0
        assert "Study Finds Coffee Improves Focus" in result.output

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(cli, ["extract", str(tmp_path / "missing.html")])

        assert result.exit_code == 2


class TestSummarizeCommand:
    def test_html_input(self, runner, html_file):
        result = invoke(runner, "summarize", str(html_file), "--json")

        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert payload["title"] == "Study Finds Coffee Improves Focus"
        assert 0 < len(payload["points"]) <= 4

    def test_text_input(self, runner, text_file, coffee_sentences):
        result = invoke(
            runner, "summarize", str(text_file), "--text", "--title", "Study Finds Coffee Improves Focus", "--json"
        )

        assert result.exit_code == 0
        assert json.loads(result.output)["points"] == coffee_sentences[:4]

    def test_rich_output(self, runner, text_file):
        result = invoke(runner, "summarize", str(text_file), "--text", "--title", "Coffee")

        assert result.exit_code == 0
        assert "Coffee" in result.output

    def test_nothing_to_summarize(self, runner, tmp_path):
        path = tmp_path / "tiny.txt"
        path.write_text("Too short.", encoding="utf-8")

        result = invoke(runner, "summarize", str(path), "--text")

        assert result.exit_code == 0
        assert "No sentences" in result.output


class TestConfigOption:
    def test_config_file_applies(self, runner, text_file, config_file):
        result = invoke(
            runner, "--config", str(config_file), "summarize", str(text_file), "--text", "--title", "Coffee", "--json"
        )

        assert result.exit_code == 0
        assert len(json.loads(result.output)["points"]) == 2

    def test_invalid_config_exits(self, runner, tmp_path, text_file):
        bad = tmp_path / "bad.yaml"
        bad.write_text("summarization:\n  max_points: 0\n", encoding="utf-8")

        result = runner.invoke(cli, ["--config", str(bad), "summarize", str(text_file), "--text"])

        assert result.exit_code == 2
        assert "Invalid configuration" in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert "0.1.0" in result.output
