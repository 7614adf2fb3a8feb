"""CLI application entry point for planegeom.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from planegeom import __version__
from planegeom.cli.output import (
    console,
    print_circles,
    print_eigen,
    print_error,
    print_header,
    print_intersection,
    print_mixed_path,
    print_points,
    print_step,
    print_success,
)
from planegeom.cli.parsing import parse_points, parse_shape
from planegeom.config import LoggingConfig, RenderConfig, SmoothingConfig, SteinerConfig
from planegeom.core import CovarianceMatrix2, SteinerCircles, intersect, max_ratio
from planegeom.domain import Circle, LinearPath, Vector2
from planegeom.exceptions import ExportError, PlaneGeomError
from planegeom.io import SvgWriter
from planegeom.utils import RunLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="planegeom",
    help="Planar geometry toolkit: intersections, smoothing, eigen-decomposition, Steiner chains.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Planegeom[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Planar geometry toolkit."""
    settings = LoggingConfig(log_file=log_file, log_level=log_level)
    logger = configure_logging(
        log_file=settings.log_file,
        console_level=settings.log_level,
        file_level=settings.file_log_level,
        quiet=quiet,
    )
    ctx.obj = {"quiet": quiet, "run_logger": RunLogger(logger)}
    if not quiet:
        print_header(__version__)


def _state(ctx: typer.Context) -> tuple[bool, RunLogger]:
    obj = ctx.obj or {}
    run_logger = obj.get("run_logger") or RunLogger(configure_logging())
    return obj.get("quiet", False), run_logger


def _save_svg(shapes: list, svg: Path, quiet: bool) -> None:
    writer = SvgWriter(svg, RenderConfig())
    writer.add_all(shapes)
    writer.save()
    if not quiet:
        print_success("SVG written", str(svg))


@app.command()
def steiner(
    ctx: typer.Context,
    count: Annotated[
        int,
        typer.Option("--count", "-n", help="Number of chain circles (at least 3)"),
    ] = 6,
    ratio: Annotated[
        float,
        typer.Option("--ratio", "-r", help="Inversion center offset"),
    ] = 0.0,
    rotation: Annotated[
        float,
        typer.Option("--rotation", help="Direction of the inversion offset (radians)"),
    ] = 0.0,
    start_angle: Annotated[
        float,
        typer.Option("--start-angle", help="Angle of the first chain circle (radians)"),
    ] = 0.0,
    radius: Annotated[
        float,
        typer.Option("--radius", help="Parent circle radius", min=0.0),
    ] = 1.0,
    center_x: Annotated[float, typer.Option("--cx", help="Parent circle center x")] = 0.0,
    center_y: Annotated[float, typer.Option("--cy", help="Parent circle center y")] = 0.0,
    svg: Annotated[
        Path | None,
        typer.Option("--svg", help="Also write the circles to an SVG file"),
    ] = None,
) -> None:
    """Lay out a Steiner chain inside a parent circle.

    Example:
        planegeom steiner --count 6 --ratio 0.3
    """
    quiet, run_logger = _state(ctx)

    try:
        config = SteinerConfig(
            circle_count=count, ratio=ratio, rotation=rotation, start_angle=start_angle
        )
    except ValidationError as e:
        print_error("Invalid Steiner parameters", details=str(e))
        raise typer.Exit(code=1)

    try:
        chain = SteinerCircles().calculate(
            Circle(Vector2(center_x, center_y), radius),
            config.circle_count,
            config.ratio,
            config.rotation,
            config.start_angle,
        )
        if not quiet:
            print_step(f"Steiner chain (|ratio| < {max_ratio(config.circle_count):.6f})")
        print_circles(chain.circles)
        for circle in chain.circles:
            run_logger.log_shape_drawn(circle.kind.value)
        if svg is not None:
            _save_svg(list(chain.circles), svg, quiet)
    except ExportError as e:
        print_error(f"Could not write SVG: {e.reason}")
        raise typer.Exit(code=1)
    except PlaneGeomError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def eigen(
    ctx: typer.Context,
    a: Annotated[float | None, typer.Argument(help="Matrix entry a (xx)")] = None,
    b: Annotated[float | None, typer.Argument(help="Matrix entry b (xy)")] = None,
    c: Annotated[float | None, typer.Argument(help="Matrix entry c (yy)")] = None,
    points: Annotated[
        str | None,
        typer.Option("--points", "-p", help="Build the matrix from x1,y1,x2,y2,..."),
    ] = None,
) -> None:
    """Eigen-decompose the symmetric matrix [[a, b], [b, c]].

    Example:
        planegeom eigen 2 0 5
    """
    quiet, _ = _state(ctx)

    try:
        if points is not None:
            matrix = CovarianceMatrix2.from_points(parse_points(points))
        elif a is not None and b is not None and c is not None:
            matrix = CovarianceMatrix2(a, b, c)
        else:
            print_error("Provide a, b and c or --points")
            raise typer.Exit(code=1)

        decomposition = matrix.find_eigenvectors()
    except PlaneGeomError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if not quiet:
        print_step(f"Matrix a={matrix.a:g} b={matrix.b:g} c={matrix.c:g}")
    print_eigen(decomposition)


@app.command(name="intersect")
def intersect_command(
    ctx: typer.Context,
    first: Annotated[str, typer.Argument(help="First shape, e.g. circle:0,0,1")],
    second: Annotated[str, typer.Argument(help="Second shape, e.g. segment:-2,0,2,0")],
) -> None:
    """Intersect two shapes.

    Shapes: circle:cx,cy,r segment:x1,y1,x2,y2 rect:x,y,w,h
    triangle:x1,y1,x2,y2,x3,y3 path:x1,y1,x2,y2,...
    """
    quiet, run_logger = _state(ctx)

    try:
        shape1 = parse_shape(first)
        shape2 = parse_shape(second)
        result = intersect(shape1, shape2)
    except PlaneGeomError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    run_logger.log_intersection(
        shape1.kind.value, shape2.kind.value, result.status.value, len(result.points)
    )
    if not quiet:
        print_step(f"{shape1} / {shape2}")
    print_intersection(result)


@app.command()
def smooth(
    ctx: typer.Context,
    points: Annotated[str, typer.Argument(help="Polyline vertices x1,y1,x2,y2,...")],
    factor: Annotated[
        float,
        typer.Option("--factor", "-f", help="Smoothing amount", min=0.0),
    ] = 0.5,
    mode: Annotated[
        int,
        typer.Option(
            "--mode",
            "-m",
            help="0 relative edgewise, 1 absolute edgewise, 2 relative minimum, 3 absolute minimum",
            min=0,
            max=3,
        ),
    ] = 0,
    loop: Annotated[
        bool,
        typer.Option("--loop", help="Treat the polyline as closed"),
    ] = False,
    flatten: Annotated[
        bool,
        typer.Option("--flatten", help="Also flatten the curves back to a polyline"),
    ] = False,
    tolerance: Annotated[
        float,
        typer.Option("--tolerance", help="Maximum deviation when flattening"),
    ] = 0.01,
    svg: Annotated[
        Path | None,
        typer.Option("--svg", help="Also write the smoothed path to an SVG file"),
    ] = None,
) -> None:
    """Smooth the corners of a polyline into quadratic curves.

    Example:
        planegeom smooth 0,0,10,0,10,10 --factor 0.5
    """
    quiet, run_logger = _state(ctx)

    try:
        config = SmoothingConfig(
            factor=factor, mode=mode, loop=loop, flatten_tolerance=tolerance
        )
        path = LinearPath.from_points(parse_points(points))
        smoothed = path.get_smooth_path(config.factor, config.mode, config.loop)
        if smoothed is None:
            run_logger.log_degenerate("smooth", "path has fewer than two points or no length")
            print_error("Path cannot be smoothed", details="It needs two distinct points.")
            raise typer.Exit(code=1)

        if not quiet:
            print_step(f"Smoothing {len(path)} points, total length {path.total_length:g}")
        print_mixed_path(smoothed)
        if flatten:
            flattened = smoothed.to_linear_path(config.flatten_tolerance)
            print_points(flattened.points, title="Flattened path")
            console.print(f"  {len(flattened)} vertices")
        if svg is not None:
            _save_svg([smoothed], svg, quiet)
    except ValidationError as e:
        print_error("Invalid smoothing parameters", details=str(e))
        raise typer.Exit(code=1)
    except ExportError as e:
        print_error(f"Could not write SVG: {e.reason}")
        raise typer.Exit(code=1)
    except PlaneGeomError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
