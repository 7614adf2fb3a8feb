"""Rich console output helpers for the CLI.

This module prints computation results as tables and formatted messages
using the Rich library.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from planegeom.core.covariance import EigenDecomposition
from planegeom.core.intersection import Intersection
from planegeom.domain.circle import Circle
from planegeom.domain.mixed_path import MixedPath
from planegeom.domain.vector import Vector2

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def _num(value: float) -> str:
    return f"{value:.6f}"


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Planegeom[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_success(message: str, output_path: str | None = None) -> None:
    """Print success message, optionally naming a written file."""
    console.print(f"\n[bold green]{SYM_OK} {message}[/bold green]")
    if output_path:
        line = Text("  ")
        line.append(output_path, style="bold")
        console.print(line)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")


def print_circles(circles: list[Circle], title: str = "Circles") -> None:
    """Print circles as a table of center and radius."""
    table = Table(title=title)
    table.add_column("#", justify="right")
    table.add_column("cx", justify="right")
    table.add_column("cy", justify="right")
    table.add_column("r", justify="right")
    for index, circle in enumerate(circles):
        table.add_row(
            str(index), _num(circle.center.x), _num(circle.center.y), _num(circle.radius)
        )
    console.print(table)
    console.print(f"  {len(circles)} circles")


def print_points(points: list[Vector2], title: str = "Points") -> None:
    table = Table(title=title)
    table.add_column("#", justify="right")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    for index, point in enumerate(points):
        table.add_row(str(index), _num(point.x), _num(point.y))
    console.print(table)


def print_intersection(result: Intersection) -> None:
    """Print an intersection status and its points."""
    console.print(f"  Status {SYM_DOT} [bold]{result.status.value}[/bold]")
    if result.points:
        print_points(result.points, title="Intersection points")
    else:
        console.print("  No intersection points")


def print_eigen(decomposition: EigenDecomposition) -> None:
    """Print eigenvalues with their eigenvectors."""
    table = Table(title="Eigen decomposition")
    table.add_column("eigenvalue", justify="right")
    table.add_column("vx", justify="right")
    table.add_column("vy", justify="right")
    for value, vector in zip(decomposition.eigenvalues, decomposition.eigenvectors):
        table.add_row(_num(value), _num(vector.x), _num(vector.y))
    console.print(table)
    if decomposition.punted:
        console.print(f"  {SYM_DOT} isotropic: axis aligned basis returned")


def print_mixed_path(path: MixedPath) -> None:
    """Print a smoothed path point by point."""
    table = Table(title="Smoothed path")
    table.add_column("#", justify="right")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    table.add_column("kind")
    for index, point in enumerate(path.points):
        kind = "control" if point.is_control_point else "anchor"
        table.add_row(str(index), _num(point.x), _num(point.y), kind)
    console.print(table)
    closed = "closed" if path.closed else "open"
    console.print(
        f"  {len(path.anchors())} anchors {SYM_DOT} "
        f"{len(path.control_points())} control points {SYM_DOT} {closed}"
    )
