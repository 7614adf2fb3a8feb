"""Analytic pairwise intersection routines.

Routines for:
- Circle/circle intersection (MathWorld construction)
- Infinite line/circle intersection (determinant form)
- Segment/circle intersection (parametric quadratic)
- Line/line intersection, each side a segment or an infinite line

All functions are pure and stateless. "No intersection" is a normal
outcome and is returned as None, never raised. Tolerances are absolute
(see planegeom.tolerances), so results degrade for geometry far from unit
scale.
"""

import math

from planegeom.domain.circle import Circle
from planegeom.domain.vector import Vector2
from planegeom.tolerances import EPSILON, SQUARED_SNAP_DISTANCE


def _append_unique(points: list[Vector2], point: Vector2) -> None:
    for existing in points:
        if existing.squared_distance_to(point) < SQUARED_SNAP_DISTANCE:
            return
    points.append(point)


def circles_intersection(circle0: Circle, circle1: Circle) -> list[Vector2] | None:
    """Intersection points of two circle outlines.

    Args:
        circle0: First circle (radius R)
        circle1: Second circle (radius r)

    Returns:
        One point at tangency, two points for a proper crossing, None when
        the circles are apart, nested or concentric

    Examples:
        >>> a = Circle(Vector2(0, 0), 2)
        >>> b = Circle(Vector2(5, 0), 3)
        >>> circles_intersection(a, b)
        [Vector2(x=2.0, y=0.0)]
    """
    big_r = circle0.radius
    r = circle1.radius
    d = circle0.center.distance_to(circle1.center)

    if d < EPSILON:
        return None
    if d > big_r + r + EPSILON or d < abs(big_r - r) - EPSILON:
        return None

    base_radius = (d * d - r * r + big_r * big_r) / (2 * d)
    h = math.sqrt(max(big_r * big_r - base_radius * base_radius, 0.0))

    direction = (circle1.center - circle0.center) / d
    foot = circle0.center + direction * base_radius

    tangent = abs(d - (big_r + r)) <= EPSILON or abs(d - abs(big_r - r)) <= EPSILON
    if h < EPSILON or tangent:
        return [foot]

    offset = direction.orth() * h
    return [foot + offset, foot - offset]


def line_circle_intersection(
    start: Vector2, end: Vector2, circle: Circle
) -> list[Vector2] | None:
    """Intersection of the infinite line through start/end with a circle.

    Returns:
        One point at tangency, two points for a secant, None if the line
        misses the circle or start and end coincide
    """
    p0 = start - circle.center
    p1 = end - circle.center
    r = circle.radius

    dx = p1.x - p0.x
    dy = p1.y - p0.y
    dr2 = dx * dx + dy * dy
    if dr2 < EPSILON:
        return None

    det = p0.x * p1.y - p1.x * p0.y
    discriminant = r * r * dr2 - det * det
    if discriminant < -EPSILON:
        return None

    if abs(discriminant) <= EPSILON:
        return [Vector2(det * dy / dr2 + circle.center.x, -det * dx / dr2 + circle.center.y)]

    root = math.sqrt(discriminant)
    sign = -1.0 if dy < 0 else 1.0
    abs_dy = abs(dy)
    first = Vector2(
        (det * dy + sign * dx * root) / dr2 + circle.center.x,
        (-det * dx + abs_dy * root) / dr2 + circle.center.y,
    )
    second = Vector2(
        (det * dy - sign * dx * root) / dr2 + circle.center.x,
        (-det * dx - abs_dy * root) / dr2 + circle.center.y,
    )
    return [first, second]


def segment_circle_intersection(
    start: Vector2, end: Vector2, circle: Circle
) -> list[Vector2] | None:
    """Intersection of the segment start/end with a circle outline.

    The segment is parametrized as start + mu * (end - start). Roots with
    mu outside [0, 1] (EPSILON slack) are dropped and points closer than
    SQUARED_SNAP_DISTANCE are merged.

    Returns:
        One or two points, or None for a miss or a zero-length segment
    """
    dp = end - start
    a = dp.squared_length
    if a < EPSILON:
        return None

    cx, cy = circle.center.x, circle.center.y
    b = 2 * (dp.x * (start.x - cx) + dp.y * (start.y - cy))
    c = cx * cx + cy * cy
    c += start.x * start.x + start.y * start.y
    c -= 2 * (cx * start.x + cy * start.y)
    c -= circle.radius * circle.radius

    discriminant = b * b - 4 * a * c
    if discriminant < -EPSILON:
        return None
    root = math.sqrt(max(discriminant, 0.0))

    points: list[Vector2] = []
    for mu in ((-b + root) / (2 * a), (-b - root) / (2 * a)):
        if -EPSILON <= mu <= 1 + EPSILON:
            _append_unique(points, start.lerp(end, mu))

    return points or None


def _outside_span(value: float, first: float, second: float) -> bool:
    return value < min(first, second) - EPSILON or value > max(first, second) + EPSILON


def line_intersect_line(
    a: Vector2,
    b: Vector2,
    e: Vector2,
    f: Vector2,
    ab_as_segment: bool = True,
    ef_as_segment: bool = True,
) -> Vector2 | None:
    """Intersection of line AB with line EF.

    Coordinates of axis-aligned inputs are snapped back onto the exact axis
    value. A side flagged as segment rejects points outside its bounding box
    (padded by EPSILON).

    Args:
        a: First point of AB
        b: Second point of AB
        e: First point of EF
        f: Second point of EF
        ab_as_segment: Treat AB as a segment rather than an infinite line
        ef_as_segment: Treat EF as a segment rather than an infinite line

    Returns:
        Intersection point, or None for parallel or coincident lines and
        for points outside a segment

    Examples:
        >>> line_intersect_line(Vector2(0, 5), Vector2(10, 5), Vector2(5, 0), Vector2(5, 10))
        Vector2(x=5.0, y=5.0)
    """
    a1 = b.y - a.y
    b1 = a.x - b.x
    a2 = f.y - e.y
    b2 = e.x - f.x

    denominator = a1 * b2 - a2 * b1
    if abs(denominator) < EPSILON:
        return None

    c1 = b.x * a.y - a.x * b.y
    c2 = f.x * e.y - e.x * f.y

    x = (b1 * c2 - b2 * c1) / denominator
    y = (a2 * c1 - a1 * c2) / denominator

    if a.x == b.x:
        x = a.x
    elif e.x == f.x:
        x = e.x
    if a.y == b.y:
        y = a.y
    elif e.y == f.y:
        y = e.y

    if ab_as_segment and (_outside_span(x, a.x, b.x) or _outside_span(y, a.y, b.y)):
        return None
    if ef_as_segment and (_outside_span(x, e.x, f.x) or _outside_span(y, e.y, f.y)):
        return None
    return Vector2(float(x), float(y))
