"""Output layer for planegeom.

This module connects shapes to fontTools pens.

Key responsibilities:
- Render shapes to SVG path data and documents
- Convert pen recordings back into MixedPath objects

Key classes:
- SvgWriter: Collect shapes and save them as SVG
"""

from planegeom.io.converter import recording_to_mixed_paths, shape_to_mixed_paths
from planegeom.io.svg_writer import SvgWriter, shape_to_path_data

__all__ = [
    "SvgWriter",
    "recording_to_mixed_paths",
    "shape_to_mixed_paths",
    "shape_to_path_data",
]
