"""Utility functions for planegeom.

This module provides logging setup and run statistics.
"""

from planegeom.utils.logging import RunLogger, RunStats, configure_logging

__all__ = [
    "RunLogger",
    "RunStats",
    "configure_logging",
]
