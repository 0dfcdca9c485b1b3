"""
Tests for the command-line interface.
"""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from auto_seo_headings.cli import main


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def post_file(tmp_path: Path, serialized_content: str) -> Path:
    """Write the serialized sample post to disk."""
    path = tmp_path / "post.html"
    path.write_text(serialized_content, encoding="utf-8")
    return path


class TestAnalyzeCommand:
    """Tests for the analyze command."""

    def test_json_output(self, runner, post_file):
        """Test suggestions are printed as JSON."""
        result = runner.invoke(main, ["analyze", str(post_file), "--title", "Pizza Napoletana", "--json"])

        assert result.exit_code == 0
        suggestions = json.loads(result.output)
        assert [s["block_index"] for s in suggestions] == [0, 2]
        assert suggestions[0]["suggested_level"] == 2
        assert suggestions[1]["suggested_level"] == 3

    def test_include_headings(self, runner, post_file):
        """Test --include-headings indexes headings too."""
        result = runner.invoke(main, [
            "analyze", str(post_file), "-t", "Pizza Napoletana", "-k", "forno", "--include-headings", "--json",
        ])

        assert result.exit_code == 0
        suggestions = json.loads(result.output)
        assert [s["block_index"] for s in suggestions] == [0, 1, 3]
        assert suggestions[1]["current_level"] == 3
        assert suggestions[1]["suggested_level"] == 2

    def test_table_output(self, runner, post_file):
        """Test the default rich table output."""
        result = runner.invoke(main, ["analyze", str(post_file), "--title", "Pizza Napoletana"])

        assert result.exit_code == 0
        assert "Heading Suggestions" in result.output
        assert "2 suggestions" in result.output

    def test_no_suggestions(self, runner, tmp_path):
        """Test the message when nothing qualifies."""
        path = tmp_path / "empty.html"
        path.write_text("<p>Breve</p>", encoding="utf-8")

        result = runner.invoke(main, ["analyze", str(path)])

        assert result.exit_code == 0
        assert "No suggestions found" in result.output

    def test_parse_error(self, runner, tmp_path):
        """Test block parsing errors exit with code 1."""
        path = tmp_path / "broken.html"
        path.write_text('<!-- wp:heading {"level":} -->\n<h2>X</h2>\n<!-- /wp:heading -->', encoding="utf-8")

        result = runner.invoke(main, ["analyze", str(path)])

        assert result.exit_code == 1
        assert "Block parsing error" in result.output

    def test_missing_file(self, runner, tmp_path):
        """Test a missing source file is a usage error."""
        result = runner.invoke(main, ["analyze", str(tmp_path / "missing.html")])
        assert result.exit_code == 2


class TestTransformCommand:
    """Tests for the transform command."""

    def test_transform_to_h3(self, runner):
        """Test heading conversion output."""
        result = runner.invoke(main, ["transform", "<p>Hello</p>", "--level", "3"])

        assert result.exit_code == 0
        assert result.output.strip() == '<h3 class="wp-block-heading auto-seo-generated">Hello</h3>'

    def test_invalid_level(self, runner):
        """Test invalid levels exit with code 1."""
        result = runner.invoke(main, ["transform", "<p>Hello</p>", "--level", "4"])

        assert result.exit_code == 1
        assert "Invalid heading level" in result.output

    def test_to_paragraph(self, runner):
        """Test converting a heading back to a paragraph."""
        result = runner.invoke(main, ["transform", "<h2>Hello</h2>", "--to-paragraph"])

        assert result.exit_code == 0
        assert result.output.strip() == "<p>Hello</p>"
