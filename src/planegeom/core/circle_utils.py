"""Circle construction helpers."""

from planegeom.core.intersection_utils import circles_intersection
from planegeom.domain.circle import Circle


def tangent_circle(c1: Circle, c2: Circle, radius: float, left: bool = True) -> Circle | None:
    """Circle of the given radius touching both circles from outside.

    The center lies on both circles grown by radius. Of the two candidate
    centers, left picks the one on the left of the direction c1 -> c2.

    Returns:
        The tangent circle, or None if the grown circles do not cross in
        two points
    """
    grown1 = Circle(c1.center, c1.radius + radius)
    grown2 = Circle(c2.center, c2.radius + radius)
    points = circles_intersection(grown1, grown2)
    if points is None or len(points) != 2:
        return None
    return Circle(points[0] if left else points[1], radius)
