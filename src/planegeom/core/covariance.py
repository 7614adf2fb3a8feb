"""Symmetric 2x2 covariance matrix with closed-form eigen-decomposition.

The matrix [[a, b], [b, c]] is stored as three scalars. Eigenvalues come
from the characteristic polynomial solved with a numerically stable
quadratic formula; eigenvectors are read off the null space of A - lambda*I.
"""

import logging
import math
from dataclasses import dataclass
from typing import NamedTuple

from planegeom.domain.vector import Vector2
from planegeom.exceptions import EigenSolveError, GeometryError

logger = logging.getLogger(__name__)

# Below this value of a the matrix is treated as isotropic.
A_EPSILON = 1e-7

# Eigenvalue ratios inside this open interval count as equal.
SAMENESS_LOW = 0.9999
SAMENESS_HIGH = 1.0001


class EigenDecomposition(NamedTuple):
    """Eigenvalues with matching unit eigenvectors.

    punted is True when the matrix was treated as isotropic and the axis
    aligned basis was returned instead of computed eigenvectors.
    """

    eigenvalues: tuple[float, float]
    eigenvectors: tuple[Vector2, Vector2]
    punted: bool = False


def solve_quadratic(a: float, b: float, c: float) -> list[float]:
    """Real roots of a*x^2 + b*x + c, assuming a non-negative discriminant.

    A slightly negative discriminant from rounding is clamped to zero. The
    second root is computed as c/q to avoid cancellation.

    Returns:
        Zero, one or two distinct roots
    """
    if a == 0.0:
        if b == 0.0:
            return []
        return [-c / b]

    discriminant = max(b * b - 4 * a * c, 0.0)
    sign_b = -1.0 if b < 0.0 else 1.0
    q = -0.5 * (b + sign_b * math.sqrt(discriminant))

    roots = [q / a]
    if q != 0.0:
        second = c / q
        if second != roots[0]:
            roots.append(second)
    return roots


def _canonical(vector: Vector2) -> Vector2:
    """Flip so the first non-zero component is positive."""
    if vector.x < 0 or (vector.x == 0 and vector.y < 0):
        return Vector2(-vector.x + 0.0, -vector.y + 0.0)
    return Vector2(vector.x + 0.0, vector.y + 0.0)


@dataclass
class CovarianceMatrix2:
    """Symmetric matrix [[a, b], [b, c]].

    Attributes:
        a: Upper left entry (variance along x)
        b: Off-diagonal entry (covariance)
        c: Lower right entry (variance along y)
    """

    a: float = 0.0
    b: float = 0.0
    c: float = 0.0

    @classmethod
    def from_points(
        cls, points: list[Vector2], center: Vector2 | None = None
    ) -> "CovarianceMatrix2":
        """Second-moment matrix of a point cloud about center (the centroid by default)."""
        if not points:
            return cls()
        n = len(points)
        if center is None:
            center = Vector2(sum(p.x for p in points) / n, sum(p.y for p in points) / n)
        a = b = c = 0.0
        for point in points:
            dx = point.x - center.x
            dy = point.y - center.y
            a += dx * dx
            b += dx * dy
            c += dy * dy
        return cls(a / n, b / n, c / n)

    def reset(self) -> None:
        self.a = self.b = self.c = 0.0

    @property
    def determinant(self) -> float:
        return self.a * self.c - self.b * self.b

    def invert(self) -> "CovarianceMatrix2":
        """Inverse matrix.

        Raises:
            GeometryError: If the matrix is singular
        """
        det = self.determinant
        if det == 0:
            raise GeometryError("Cannot invert a singular covariance matrix")
        factor = 1.0 / det
        return CovarianceMatrix2(self.c * factor, -self.b * factor, self.a * factor)

    def add(self, other: "CovarianceMatrix2") -> "CovarianceMatrix2":
        return CovarianceMatrix2(self.a + other.a, self.b + other.b, self.c + other.c)

    __add__ = add

    def scale(self, factor: float) -> "CovarianceMatrix2":
        self.a *= factor
        self.b *= factor
        self.c *= factor
        return self

    def rotate(self, theta: float) -> "CovarianceMatrix2":
        """Rotate the matrix in place by theta radians."""
        s = math.sin(theta)
        t = math.cos(theta)

        a_prime = self.a * t * t + self.b * 2 * s * t + self.c * s * s
        b_prime = -self.a * s * t + self.b * (t * t - s * s) + self.c * s * t
        c_prime = self.a * s * s - self.b * 2 * s * t + self.c * t * t

        self.a = a_prime
        self.b = b_prime
        self.c = c_prime
        return self

    def find_eigenvalues(self) -> tuple[float, float]:
        """Roots of lambda^2 - (a+c)*lambda + (ac - b^2).

        A single root is returned twice (double eigenvalue).

        Raises:
            EigenSolveError: If the solver does not yield two eigenvalues
        """
        roots = solve_quadratic(1.0, -(self.a + self.c), self.a * self.c - self.b * self.b)
        if len(roots) == 1:
            roots.append(roots[0])
        if len(roots) != 2:
            raise EigenSolveError(len(roots))
        return roots[0], roots[1]

    def find_eigenvectors(self) -> EigenDecomposition:
        """Eigenvalues and unit eigenvectors.

        For a near-zero a, or eigenvalues equal within 0.01%, the matrix is
        treated as isotropic: both eigenvalues become a and the eigenvectors
        the axis aligned unit basis.

        Raises:
            EigenSolveError: If the solver does not yield two eigenvalues
        """
        eigenvalues = self.find_eigenvalues()

        punt = False
        if self.a < A_EPSILON:
            punt = True
        else:
            ratio = abs(eigenvalues[1] / eigenvalues[0]) if eigenvalues[0] != 0 else math.inf
            if SAMENESS_LOW < ratio < SAMENESS_HIGH:
                punt = True

        if punt:
            logger.debug("Treating covariance matrix (%g, %g, %g) as isotropic", self.a, self.b, self.c)
            return EigenDecomposition(
                (self.a, self.a), (Vector2(1.0, 0.0), Vector2(0.0, 1.0)), punted=True
            )

        vectors = []
        for value in eigenvalues:
            result1 = Vector2(-self.b, self.a - value)
            result2 = Vector2(-(self.c - value), self.b)
            if result1.squared_length > result2.squared_length:
                result = result1
            else:
                result = result2
            vectors.append(_canonical(result.normalize()))

        return EigenDecomposition(eigenvalues, (vectors[0], vectors[1]))

    def move_to_global_coordinates(self, x: float, y: float) -> "CovarianceMatrix2":
        """Shift second moments from a frame centered at (x, y) to the origin."""
        return CovarianceMatrix2(self.a + x * x, self.b + x * y, self.c + y * y)

    def move_to_local_coordinates(self, x: float, y: float) -> "CovarianceMatrix2":
        """Inverse of move_to_global_coordinates."""
        return CovarianceMatrix2(self.a - x * x, self.b - x * y, self.c - y * y)
