"""Internal Bezier curve flattening.

Used by MixedPath.to_linear_path. Not intended for public use.
"""

from planegeom.domain.vector import Vector2

# Subdivision stops here even if the tolerance is not met.
MAX_DEPTH = 16


def _chord_distance(point: Vector2, start: Vector2, end: Vector2) -> float:
    return point.distance_to(point.project(start, end))


def flatten_quadratic(
    points: list[Vector2], tolerance: float, depth: int = 0
) -> list[Vector2]:
    """Flatten a quadratic Bezier curve using recursive subdivision.

    The curve deviates from its chord by at most half the distance of the
    control point from the chord, which is the flatness measure used here.

    Args:
        points: List of 3 control points [p0, p1, p2]
        tolerance: Maximum distance from true curve
        depth: Current recursion depth

    Returns:
        List of points approximating the curve, endpoints included
    """
    p0, p1, p2 = points

    if depth >= MAX_DEPTH or 0.5 * _chord_distance(p1, p0, p2) <= tolerance:
        return [p0, p2]

    # Subdivide at t=0.5
    q1 = p0.lerp(p1, 0.5)
    r1 = p1.lerp(p2, 0.5)
    mid = q1.lerp(r1, 0.5)

    left = flatten_quadratic([p0, q1, mid], tolerance, depth + 1)
    right = flatten_quadratic([mid, r1, p2], tolerance, depth + 1)

    # Combine, avoiding duplicate midpoint
    return left[:-1] + right


def flatten_cubic(
    points: list[Vector2], tolerance: float, depth: int = 0
) -> list[Vector2]:
    """Flatten a cubic Bezier curve using De Casteljau subdivision.

    Args:
        points: List of 4 control points [p0, p1, p2, p3]
        tolerance: Maximum distance from true curve
        depth: Current recursion depth

    Returns:
        List of points approximating the curve, endpoints included
    """
    p0, p1, p2, p3 = points

    deviation = 0.75 * max(_chord_distance(p1, p0, p3), _chord_distance(p2, p0, p3))
    if depth >= MAX_DEPTH or deviation <= tolerance:
        return [p0, p3]

    # First level
    q1 = p0.lerp(p1, 0.5)
    q2 = p1.lerp(p2, 0.5)
    q3 = p2.lerp(p3, 0.5)

    # Second level
    r1 = q1.lerp(q2, 0.5)
    r2 = q2.lerp(q3, 0.5)

    # Third level (curve at t=0.5)
    mid = r1.lerp(r2, 0.5)

    left = flatten_cubic([p0, q1, r1, mid], tolerance, depth + 1)
    right = flatten_cubic([mid, r2, q3, p3], tolerance, depth + 1)

    return left[:-1] + right
