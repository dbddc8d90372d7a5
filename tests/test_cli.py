"""Tests for the rtldoc CLI."""

import json

from typer.testing import CliRunner

from rtldoc.cli import app

runner = CliRunner()


class TestLocalizeCommand:
    """Tests for `rtldoc localize`."""

    def test_latin_text(self):
        result = runner.invoke(app, ["localize", "Hello"])

        assert result.exit_code == 0
        assert "Hello" in result.output

    def test_arabic_text(self):
        result = runner.invoke(app, ["localize", "باب"])

        assert result.exit_code == 0
        assert "\ufe8f\ufe8e\ufe91" in result.output

    def test_malformed_markup(self):
        result = runner.invoke(app, ["localize", "<b>x"])

        assert result.exit_code == 1
        assert "Error" in result.output


class TestRenderCommand:
    """Tests for `rtldoc render`."""

    def test_render_pdf(self, attributes, tmp_path, default_font_state):
        attributes["footer"] = "Thanks"
        source = tmp_path / "doc.json"
        source.write_text(json.dumps(attributes), encoding="utf-8")
        output = tmp_path / "doc.pdf"

        result = runner.invoke(app, ["render", str(source), "--kind", "document", "-o", str(output)])

        assert result.exit_code == 0, result.output
        assert output.read_bytes().startswith(b"%PDF")

    def test_missing_required_key(self, attributes, tmp_path):
        del attributes["recipient"]
        source = tmp_path / "doc.json"
        source.write_text(json.dumps(attributes), encoding="utf-8")

        result = runner.invoke(app, ["render", str(source), "-o", str(tmp_path / "doc.pdf")])

        assert result.exit_code == 1
        assert "recipient" in result.output
        assert not (tmp_path / "doc.pdf").exists()

    def test_unknown_kind(self, attributes, tmp_path):
        source = tmp_path / "doc.json"
        source.write_text(json.dumps(attributes), encoding="utf-8")

        result = runner.invoke(app, ["render", str(source), "--kind", "memo"])

        assert result.exit_code == 1
        assert "Unknown document kind" in result.output


class TestLogLevel:
    """Tests for the global --log-level option."""

    def test_known_level(self):
        result = runner.invoke(app, ["--log-level", "debug", "localize", "Hello"])

        assert result.exit_code == 0
        assert "Hello" in result.output

    def test_unknown_level(self):
        result = runner.invoke(app, ["--log-level", "loud", "localize", "Hello"])

        assert result.exit_code == 1
        assert "Unknown log level" in result.output
