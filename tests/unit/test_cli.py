"""Unit tests for the command-line interface."""

from pathlib import Path

from typer.testing import CliRunner

from textshape import __version__
from textshape.cli import app

runner = CliRunner()


class TestCli:
    """Tests for the render command."""

    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_missing_font(self, tmp_path: Path) -> None:
        result = runner.invoke(app, [str(tmp_path / "missing.ttf"), "A"])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_invalid_alignment(self, test_font_path: Path) -> None:
        result = runner.invoke(app, [str(test_font_path), "A", "--align", "justify"])
        assert result.exit_code == 1
        assert "Invalid alignment" in result.output

    def test_non_positive_height(self, test_font_path: Path) -> None:
        for height in ["0", "-2"]:
            result = runner.invoke(app, [str(test_font_path), "A", "--height", height])
            assert result.exit_code == 1
            assert "greater than zero" in result.output

    def test_render_summary(self, test_font_path: Path) -> None:
        result = runner.invoke(app, [str(test_font_path), "AO\\nI", "--height", "2"])
        assert result.exit_code == 0, result.output
        assert "2 lines" in result.output
        assert "3 glyphs" in result.output
        assert "Complete" in result.output

    def test_render_svg(self, test_font_path: Path, tmp_path: Path) -> None:
        output = tmp_path / "text.svg"
        result = runner.invoke(
            app, [str(test_font_path), "AV", "--align", "left", "-o", str(output), "-q"]
        )
        assert result.exit_code == 0, result.output
        assert output.read_text().startswith("<svg")

    def test_render_wkt(self, test_font_path: Path, tmp_path: Path) -> None:
        output = tmp_path / "text.wkt"
        result = runner.invoke(app, [str(test_font_path), "O", "-o", str(output), "-q"])
        assert result.exit_code == 0, result.output
        assert output.read_text().startswith("POLYGON")

    def test_unsupported_output(self, test_font_path: Path, tmp_path: Path) -> None:
        result = runner.invoke(app, [str(test_font_path), "O", "-o", str(tmp_path / "x.png")])
        assert result.exit_code == 1
        assert "Unsupported" in result.output

    def test_not_a_font(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.ttf"
        path.write_bytes(b"nope")
        result = runner.invoke(app, [str(path), "A"])
        assert result.exit_code == 1
        assert "Could not load font" in result.output
