"""Configuration settings for textshape."""

from pathlib import Path

from pydantic import BaseModel, Field

from textshape.domain.text import Alignment


class CurveConfig(BaseModel):
    """Configuration for quadratic curve tessellation.

    Tolerances are specified at a reference UPM of 1000 and are scaled
    proportionally for fonts with different UPM values.
    """

    reference_upm: int = Field(
        default=1000,
        description="Reference UPM for tolerance values",
    )
    flatten_tolerance: float = Field(
        default=0.5,
        ge=0.01,
        le=10.0,
        description="Maximum distance between a curve and its polygon (at reference UPM)",
    )
    max_subdivision_depth: int = Field(
        default=8,
        ge=1,
        le=16,
        description="Recursion limit when subdividing a single curve segment",
    )

    def scale_tolerance(self, base_value: float, upm: int) -> float:
        """Scale a tolerance value for the given UPM.

        Args:
            base_value: The tolerance value at reference UPM
            upm: The actual UPM of the font

        Returns:
            Scaled tolerance value
        """
        return base_value * (upm / self.reference_upm)

    def get_flatten_tolerance(self, upm: int) -> float:
        """Get curve flattening tolerance scaled for UPM."""
        return self.scale_tolerance(self.flatten_tolerance, upm)


class LayoutConfig(BaseModel):
    """Configuration for text layout."""

    alignment: Alignment = Field(
        default=Alignment.CENTER,
        description="Horizontal alignment of each line",
    )
    height: float = Field(
        default=1.0,
        gt=0.0,
        description="Target height of one line advance in the output region",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class TextShapeSettings(BaseModel):
    """Main application settings."""

    curve: CurveConfig = Field(default_factory=CurveConfig)
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> TextShapeSettings:
    """Get default application settings."""
    return TextShapeSettings()
