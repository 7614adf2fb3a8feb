"""Configuration management for planegeom.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- SmoothingConfig: Polyline smoothing settings
- SteinerConfig: Steiner chain settings
- RenderConfig: SVG export settings
- LoggingConfig: Logging settings
- PlaneGeomSettings: Main application settings
"""

from planegeom.config.settings import (
    LoggingConfig,
    PlaneGeomSettings,
    RenderConfig,
    SmoothingConfig,
    SteinerConfig,
    get_default_settings,
)

__all__ = [
    "LoggingConfig",
    "PlaneGeomSettings",
    "RenderConfig",
    "SmoothingConfig",
    "SteinerConfig",
    "get_default_settings",
]
