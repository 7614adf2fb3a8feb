"""Command-line interface for planegeom.

This module provides the CLI using Typer with rich output.

Key features:
- Steiner chain layout with optional SVG export
- Shape intersection from textual shape descriptions
- Polyline smoothing
- Symmetric 2x2 eigen-decomposition
"""

from planegeom.cli.app import cli, main

__all__ = ["cli", "main"]
