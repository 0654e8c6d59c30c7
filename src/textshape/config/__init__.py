"""Configuration management for textshape.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- CurveConfig: Curve tessellation settings
- LayoutConfig: Alignment and target height
- LoggingConfig: Logging settings
- TextShapeSettings: Main application settings
"""

from textshape.config.settings import (
    CurveConfig,
    LayoutConfig,
    LoggingConfig,
    TextShapeSettings,
    get_default_settings,
)

__all__ = [
    "CurveConfig",
    "LayoutConfig",
    "LoggingConfig",
    "TextShapeSettings",
    "get_default_settings",
]
