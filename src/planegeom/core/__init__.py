"""Core numerical algorithms."""

from planegeom.core.circle_utils import tangent_circle
from planegeom.core.covariance import CovarianceMatrix2, EigenDecomposition, solve_quadratic
from planegeom.core.intersection import (
    Intersection,
    IntersectionStatus,
    intersect,
    supported_pairs,
)
from planegeom.core.intersection_utils import (
    circles_intersection,
    line_circle_intersection,
    line_intersect_line,
    segment_circle_intersection,
)
from planegeom.core.steiner import SteinerCircles, max_ratio

__all__ = [
    "CovarianceMatrix2",
    "EigenDecomposition",
    "Intersection",
    "IntersectionStatus",
    "SteinerCircles",
    "circles_intersection",
    "intersect",
    "line_circle_intersection",
    "line_intersect_line",
    "max_ratio",
    "segment_circle_intersection",
    "solve_quadratic",
    "supported_pairs",
    "tangent_circle",
]
