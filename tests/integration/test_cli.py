"""End-to-end tests for the textmesh command line."""

import logging

import pytest
from typer.testing import CliRunner

from textmesh import __version__
from textmesh.cli.app import app


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def restore_root_handlers():
    # build installs handlers on the root logger
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


class TestGlobalOptions:
    """Tests for options handled by the app callback."""

    def test_version(self, runner):
        """Test that CLI --version works."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_no_args_shows_help(self, runner):
        """Test running without arguments lists the commands."""
        result = runner.invoke(app, [])
        assert "build" in result.output
        assert "measure" in result.output


class TestMetricsCommand:
    """Tests for `textmesh metrics`."""

    def test_prints_metrics(self, runner, font_file):
        """Test the metrics table."""
        result = runner.invoke(app, ["metrics", str(font_file)])

        assert result.exit_code == 0, result.output
        assert "Line height" in result.output
        assert "1.0000" in result.output
        assert "-0.2000" in result.output

    def test_missing_file(self, runner, tmp_path):
        """Test CLI handles nonexistent file gracefully."""
        result = runner.invoke(app, ["metrics", str(tmp_path / "missing.ttf")])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_not_a_font(self, runner, tmp_path):
        """Test a file that is not a font exits with an error."""
        bogus = tmp_path / "bogus.ttf"
        bogus.write_bytes(b"definitely not a font")

        result = runner.invoke(app, ["metrics", str(bogus)])

        assert result.exit_code == 1
        assert "Could not load font" in result.output


class TestMeasureCommand:
    """Tests for `textmesh measure`."""

    def test_width_and_positions(self, runner, font_file):
        """Test measure prints width and positions."""
        result = runner.invoke(app, ["measure", str(font_file), "AB"])

        assert result.exit_code == 0, result.output
        assert "1.1000" in result.output
        assert "0.6000" in result.output

    def test_empty_text(self, runner, font_file):
        """Test measuring empty text."""
        result = runner.invoke(app, ["measure", str(font_file), ""])

        assert result.exit_code == 0, result.output
        assert "0.0000" in result.output


class TestBuildCommand:
    """Tests for `textmesh build`."""

    def test_combined_obj(self, runner, font_file, tmp_path):
        """Test build writes a combined OBJ file."""
        output = tmp_path / "hello.obj"

        result = runner.invoke(app, ["build", str(font_file), "Hi\\nYou", "-o", str(output)])

        assert result.exit_code == 0, result.output
        assert "Complete" in result.output
        content = output.read_text(encoding="utf-8")
        assert "\nv " in content
        assert "\nf " in content

    def test_summary_without_output(self, runner, font_file):
        """Test build without --output only prints the summary."""
        result = runner.invoke(app, ["build", str(font_file), "A"])

        assert result.exit_code == 0, result.output
        assert "triangles" in result.output
        assert "Complete" not in result.output

    def test_per_glyph(self, runner, font_file, tmp_path):
        """Test --per-glyph writes one object per glyph."""
        output = tmp_path / "glyphs.obj"

        result = runner.invoke(
            app,
            ["build", str(font_file), "A B", "--per-glyph", "-o", str(output), "-a", "top-left"],
        )

        assert result.exit_code == 0, result.output
        assert "2 glyphs" in result.output
        content = output.read_text(encoding="utf-8")
        assert content.count("\no ") == 2

    def test_per_glyph_reports_skipped(self, runner, font_file):
        """Test --per-glyph reports characters without geometry."""
        result = runner.invoke(app, ["build", str(font_file), "AZ", "--per-glyph"])

        assert result.exit_code == 0, result.output
        assert "1 skipped" in result.output

    def test_custom_anchor(self, runner, font_file):
        """Test a 'px,py' anchor."""
        result = runner.invoke(app, ["build", str(font_file), "A", "--anchor", "0,0"])

        # Pivot (0, 0) puts the minimum corner at the origin
        assert result.exit_code == 0, result.output
        assert "(0.000, 0.000, -0.100)" in result.output

    def test_quiet(self, runner, font_file, tmp_path):
        """Test --quiet suppresses the header."""
        output = tmp_path / "quiet.obj"

        result = runner.invoke(app, ["build", str(font_file), "A", "-q", "-o", str(output)])

        assert result.exit_code == 0, result.output
        assert "textmesh" not in result.output
        assert output.exists()

    def test_log_file(self, runner, font_file, tmp_path):
        """Test --log-file creates the log file."""
        log_file = tmp_path / "build.log"

        result = runner.invoke(
            app, ["build", str(font_file), "A", "-q", "--log-file", str(log_file)]
        )

        assert result.exit_code == 0, result.output
        assert log_file.exists()

    @pytest.mark.parametrize(
        ("args", "message"),
        [
            (["--justify", "middle"], "Invalid justify"),
            (["--anchor", "nowhere"], "Invalid anchor"),
            (["--depth", "0"], "Invalid style"),
        ],
    )
    def test_invalid_options(self, runner, font_file, args, message):
        """Test invalid option values exit with code 1."""
        result = runner.invoke(app, ["build", str(font_file), "A", *args])

        assert result.exit_code == 1
        assert message in result.output

    def test_subdivision_out_of_range(self, runner, font_file):
        """Test typer rejects out-of-range subdivision."""
        result = runner.invoke(app, ["build", str(font_file), "A", "-s", "300"])
        assert result.exit_code != 0

    def test_missing_font(self, runner, tmp_path):
        """Test build with a nonexistent font."""
        result = runner.invoke(app, ["build", str(tmp_path / "nope.ttf"), "A"])
        assert result.exit_code == 1

    def test_unwritable_output(self, runner, font_file, tmp_path):
        """Test an unwritable output path exits with an error."""
        output = tmp_path / "missing-dir" / "out.obj"

        result = runner.invoke(app, ["build", str(font_file), "A", "-o", str(output)])

        assert result.exit_code == 1
        assert "Could not save mesh" in result.output
