"""Planegeom - planar computational geometry core.

Planegeom provides primitive shapes (segments, polylines, rectangles, circles,
triangles), their pairwise intersection algorithms, polyline smoothing into
mixed line/curve paths, a closed-form symmetric 2x2 eigen-decomposition and a
Steiner chain generator built on circle inversion.

Example:
    $ planegeom steiner --count 6 --ratio 0.3

This prints the seven circles of a six-circle Steiner chain inscribed in the
unit circle.
"""

__version__ = "0.1.0"
__author__ = "Planegeom contributors"

__all__ = ["__author__", "__version__"]
