"""Utility functions for textshape.

This module provides logging setup and the per-conversion layout logger.
"""

from textshape.utils.logging import (
    LayoutLogger,
    LayoutStats,
    configure_logging,
    reset_handlers,
)

__all__ = [
    "LayoutLogger",
    "LayoutStats",
    "configure_logging",
    "reset_handlers",
]
