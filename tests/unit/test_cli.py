"""Unit tests for the command-line interface."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from planegeom import __version__
from planegeom.cli.app import app
from planegeom.cli.parsing import parse_points, parse_shape
from planegeom.domain import Circle, LinearPath, Rectangle, Triangle, Vector2
from planegeom.exceptions import ShapeParseError

runner = CliRunner()


class TestParsing:
    """Tests for textual shape descriptions."""

    def test_circle(self) -> None:
        """Test a circle description."""
        assert parse_shape("circle:1,2,3") == Circle.from_coordinates(1, 2, 3)

    def test_kind_is_case_insensitive(self) -> None:
        """Test the kind prefix ignores case and spaces."""
        assert parse_shape(" Rect :0,0,2,1") == Rectangle(0, 0, 2, 1)

    def test_triangle_and_path(self) -> None:
        """Test multi-point shapes."""
        assert isinstance(parse_shape("triangle:0,0,1,0,0,1"), Triangle)
        path = parse_shape("path:0,0,1,0,1,1")
        assert isinstance(path, LinearPath)
        assert len(path) == 3

    def test_points(self) -> None:
        """Test coordinate pairs."""
        assert parse_points("0,0, 1.5,-2") == [Vector2(0, 0), Vector2(1.5, -2)]

    @pytest.mark.parametrize(
        "text",
        ["blob:1,2", "circle", "circle:1,2", "segment:a,b,c,d", "path:0,0", "path:0,0,1"],
    )
    def test_invalid(self, text: str) -> None:
        """Test malformed descriptions raise ShapeParseError."""
        with pytest.raises(ShapeParseError) as exc_info:
            parse_shape(text)
        assert exc_info.value.text == text

    def test_odd_point_count(self) -> None:
        """Test an unpaired coordinate."""
        with pytest.raises(ShapeParseError):
            parse_points("0,0,1")


class TestCli:
    """Tests for the Typer application."""

    def test_version(self) -> None:
        """Test --version prints the version and exits."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_steiner(self) -> None:
        """Test a Steiner chain is listed."""
        result = runner.invoke(app, ["steiner", "--count", "6", "--ratio", "0.2"])
        assert result.exit_code == 0
        assert "7 circles" in result.output

    def test_steiner_quiet_hides_header(self) -> None:
        """Test --quiet suppresses the header."""
        result = runner.invoke(app, ["--quiet", "steiner", "-n", "4"])
        assert result.exit_code == 0
        assert "Planegeom v" not in result.output
        assert "5 circles" in result.output
        assert "Steiner chain" not in result.output
        assert "Circles" in result.output

    def test_steiner_ratio_too_large(self) -> None:
        """Test an invalid inversion offset fails cleanly."""
        result = runner.invoke(app, ["steiner", "--ratio", "0.9"])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_steiner_invalid_count(self) -> None:
        """Test the circle count is validated."""
        result = runner.invoke(app, ["steiner", "--count", "2"])
        assert result.exit_code == 1
        assert "Invalid Steiner parameters" in result.output

    def test_steiner_svg(self, tmp_path: Path) -> None:
        """Test --svg writes the chain to a file."""
        output = tmp_path / "chain.svg"
        result = runner.invoke(app, ["steiner", "-n", "5", "--svg", str(output)])
        assert result.exit_code == 0
        assert output.exists()
        assert output.read_text(encoding="utf-8").count("<path ") == 6

    def test_eigen(self) -> None:
        """Test a diagonal matrix."""
        result = runner.invoke(app, ["eigen", "2", "0", "5"])
        assert result.exit_code == 0
        assert "5.000000" in result.output
        assert "2.000000" in result.output
        assert "isotropic" not in result.output

    def test_eigen_isotropic(self) -> None:
        """Test the isotropic note."""
        result = runner.invoke(app, ["eigen", "3", "0", "3"])
        assert result.exit_code == 0
        assert "isotropic" in result.output

    def test_eigen_from_points(self) -> None:
        """Test building the matrix from points."""
        result = runner.invoke(app, ["eigen", "--points", "1,0,-1,0,0,2,0,-2"])
        assert result.exit_code == 0
        assert "2.000000" in result.output

    def test_eigen_missing_input(self) -> None:
        """Test the command needs a matrix."""
        result = runner.invoke(app, ["eigen"])
        assert result.exit_code == 1

    def test_intersect(self) -> None:
        """Test a circle crossed by a segment."""
        result = runner.invoke(app, ["intersect", "circle:0,0,1", "segment:-2,0,2,0"])
        assert result.exit_code == 0
        assert "INTERSECTION" in result.output
        assert "1.000000" in result.output

    def test_intersect_no_points(self) -> None:
        """Test separated circles."""
        result = runner.invoke(app, ["intersect", "circle:0,0,1", "circle:5,0,1"])
        assert result.exit_code == 0
        assert "OUTSIDE" in result.output
        assert "No intersection points" in result.output

    def test_intersect_bad_shape(self) -> None:
        """Test a malformed shape exits with an error."""
        result = runner.invoke(app, ["intersect", "circle:0,0,1", "blob:1"])
        assert result.exit_code == 1
        assert "Cannot parse shape" in result.output

    def test_smooth(self) -> None:
        """Test smoothing an open polyline."""
        result = runner.invoke(app, ["smooth", "0,0,10,0,10,10", "--factor", "0.5"])
        assert result.exit_code == 0
        assert "4 anchors" in result.output
        assert "open" in result.output

    def test_smooth_loop(self) -> None:
        """Test smoothing a closed polyline."""
        result = runner.invoke(app, ["smooth", "0,0,10,0,10,10,0,10", "--factor", "1", "--loop"])
        assert result.exit_code == 0
        assert "closed" in result.output

    def test_smooth_single_point(self) -> None:
        """Test a path without length cannot be smoothed."""
        result = runner.invoke(app, ["smooth", "1,1"])
        assert result.exit_code == 1
        assert "Path cannot be smoothed" in result.output

    def test_smooth_svg(self, tmp_path: Path) -> None:
        """Test --svg writes the smoothed path."""
        output = tmp_path / "smooth.svg"
        result = runner.invoke(app, ["smooth", "0,0,10,0,10,10", "--svg", str(output)])
        assert result.exit_code == 0
        assert 'class="MixedPath"' in output.read_text(encoding="utf-8")

    def test_smooth_flatten(self) -> None:
        """Test --flatten prints the polyline rebuilt from the curves."""
        result = runner.invoke(
            app, ["smooth", "0,0,10,0,10,10", "--flatten", "--tolerance", "0.001"]
        )
        assert result.exit_code == 0
        assert "Flattened path" in result.output
        assert "vertices" in result.output

    def test_smooth_invalid_tolerance(self) -> None:
        """Test a non-positive flattening tolerance is rejected."""
        result = runner.invoke(app, ["smooth", "0,0,10,0,10,10", "--tolerance", "0"])
        assert result.exit_code == 1
        assert "Invalid smoothing parameters" in result.output
