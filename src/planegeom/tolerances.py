"""Shared numeric tolerances.

All tolerances are absolute. They suit geometry near unit scale and become
too strict or too loose for coordinates many orders of magnitude away from it.
"""

# General epsilon for degenerate lengths, determinants and discriminants.
EPSILON = 1e-9

# Intersection points closer than this (squared distance) are one point.
SQUARED_SNAP_DISTANCE = 1e-15

# Default squared distance for Vector2.snaps().
DEFAULT_SQUARED_SNAP = 1e-8

# Smallest positive float, substituted for a zero inversion denominator.
MIN_POSITIVE = 5e-324
