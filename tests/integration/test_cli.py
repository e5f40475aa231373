"""Integration tests for the command line interface."""

from pathlib import Path

from typer.testing import CliRunner

from glyphpen import __version__
from glyphpen.cli import app

runner = CliRunner()


class TestVersion:
    """Tests for the version option."""

    def test_version(self) -> None:
        """Test --version prints the version and exits cleanly."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestAreaCommand:
    """Tests for the area command."""

    def test_named_glyphs(self, font_path: Path) -> None:
        """Test areas of a simple glyph and a composite glyph."""
        result = runner.invoke(app, ["area", str(font_path), "square", "halfsquare"])

        assert result.exit_code == 0, result.output
        assert "-10000.00" in result.output
        assert "-2500.00" in result.output
        assert "clockwise" in result.output

    def test_all_glyphs(self, font_path: Path) -> None:
        """Test every glyph in the font is measured by default."""
        result = runner.invoke(app, ["area", str(font_path), "--quiet"])

        assert result.exit_code == 0, result.output
        for name in (".notdef", "square", "arch", "blob", "halfsquare"):
            assert name in result.output

    def test_unknown_glyph(self, font_path: Path) -> None:
        """Test an unknown glyph name fails with exit code 1."""
        result = runner.invoke(app, ["area", str(font_path), "nosuchglyph"])

        assert result.exit_code == 1
        assert "nosuchglyph" in result.output

    def test_missing_font(self, tmp_path: Path) -> None:
        """Test a missing font file fails with exit code 1."""
        result = runner.invoke(app, ["area", str(tmp_path / "missing.ttf")])

        assert result.exit_code == 1
        assert "Could not load font" in result.output

    def test_invalid_font(self, tmp_path: Path) -> None:
        """Test a file that is not a font fails with exit code 1."""
        bogus = tmp_path / "bogus.ttf"
        bogus.write_bytes(b"not a font")

        result = runner.invoke(app, ["area", str(bogus)])

        assert result.exit_code == 1
        assert "Could not load font" in result.output

    def test_log_file(self, font_path: Path, tmp_path: Path) -> None:
        """Test --log-file writes drawing logs."""
        log_file = tmp_path / "glyphpen.log"
        result = runner.invoke(
            app,
            ["area", str(font_path), "square", "--quiet", "--log-file", str(log_file)],
        )

        assert result.exit_code == 0, result.output
        assert log_file.exists()
        assert "square" in log_file.read_text()


class TestSegmentsCommand:
    """Tests for the segments command."""

    def test_line_segments(self, font_path: Path) -> None:
        """Test a straight-sided glyph prints its moveTo and lineTo calls."""
        result = runner.invoke(app, ["segments", str(font_path), "square", "--quiet"])

        assert result.exit_code == 0, result.output
        assert "moveTo" in result.output
        assert "(0, 0)" in result.output
        assert "(100, 100)" in result.output
        assert "closePath" in result.output

    def test_quadratic_run_is_split(self, font_path: Path) -> None:
        """Test a multi-point quadratic prints at its implied on-curve point."""
        result = runner.invoke(app, ["segments", str(font_path), "arch", "--quiet"])

        assert result.exit_code == 0, result.output
        assert "(0, 100) (50, 100)" in result.output
        assert "(100, 100) (100, 0)" in result.output

    def test_off_curve_only_contour(self, font_path: Path) -> None:
        """Test a contour without on-curve points starts at the implied point."""
        result = runner.invoke(app, ["segments", str(font_path), "blob", "--quiet"])

        assert result.exit_code == 0, result.output
        assert "moveTo     (100, 0)" in result.output

    def test_unknown_glyph(self, font_path: Path) -> None:
        """Test an unknown glyph name fails with exit code 1."""
        result = runner.invoke(app, ["segments", str(font_path), "nosuchglyph"])

        assert result.exit_code == 1
