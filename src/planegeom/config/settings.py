"""Configuration settings for Planegeom."""

from pathlib import Path

from pydantic import BaseModel, Field

from planegeom.domain.linear_path import SmoothingMode


class SmoothingConfig(BaseModel):
    """Configuration for polyline corner smoothing."""

    factor: float = Field(
        default=0.5,
        ge=0.0,
        description="Smoothing amount, relative or absolute depending on mode",
    )
    mode: SmoothingMode = Field(
        default=SmoothingMode.RELATIVE_EDGEWISE,
        description="How the corner cutback distance is derived",
    )
    loop: bool = Field(
        default=False,
        description="Treat the polyline as closed",
    )
    flatten_tolerance: float = Field(
        default=0.01,
        gt=0.0,
        le=10.0,
        description="Maximum deviation when flattening curves back to a polyline",
    )


class SteinerConfig(BaseModel):
    """Configuration for Steiner chain generation."""

    circle_count: int = Field(
        default=6,
        ge=3,
        le=360,
        description="Number of chain circles",
    )
    ratio: float = Field(
        default=0.0,
        description="Inversion center offset; must stay below max_ratio(circle_count)",
    )
    rotation: float = Field(
        default=0.0,
        description="Direction of the inversion center offset (radians)",
    )
    start_angle: float = Field(
        default=0.0,
        description="Angle of the first chain circle (radians)",
    )


class RenderConfig(BaseModel):
    """Configuration for SVG export."""

    margin: float = Field(
        default=0.05,
        ge=0.0,
        le=1.0,
        description="View box margin as a fraction of the drawing size",
    )
    stroke: str = Field(
        default="black",
        description="Stroke color",
    )
    stroke_width: float = Field(
        default=0.005,
        gt=0.0,
        description="Stroke width in drawing units",
    )
    fill: str = Field(
        default="none",
        description="Fill color",
    )
    pixel_size: int = Field(
        default=512,
        ge=16,
        le=8192,
        description="Width and height of the SVG element in pixels",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file (no file logging if unset)",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class PlaneGeomSettings(BaseModel):
    """Main application settings."""

    smoothing: SmoothingConfig = Field(default_factory=SmoothingConfig)
    steiner: SteinerConfig = Field(default_factory=SteinerConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> PlaneGeomSettings:
    """Get default application settings."""
    return PlaneGeomSettings()
