"""Core algorithms for textshape.

This module contains:

- Contour reconstruction (implicit on-curve points, tessellation, winding)
- Glyph composition (union of outer contours, difference of holes)
- Line and text layout (kerning, advances, alignment, normalization)
- The shapely-backed region engine

Key functions:
- build_contour: Polygon and winding tag of one contour
- reconstruct_points: Insert implicit on-curve points
- compose_glyph: Fold a glyph's contours into one region
- layout_line: Position the glyphs of one line
- text_to_region: Convert a Text into one normalized region

Key classes:
- ShapelyRegionEngine: Region operations over shapely geometries
- GlyphSource / RegionEngine: Collaborator protocols
"""

from textshape.core.composer import compose_glyph
from textshape.core.contour_builder import (
    build_contour,
    reconstruct_points,
    tessellate,
    winding_sum,
)
from textshape.core.layout import LineLayout, layout_line, text_to_region
from textshape.core.protocols import GlyphSource, Region, RegionEngine
from textshape.core.region import ShapelyRegionEngine

__all__ = [
    # Protocols
    "GlyphSource",
    "Region",
    "RegionEngine",
    # Layout
    "LineLayout",
    "ShapelyRegionEngine",
    "build_contour",
    "compose_glyph",
    "layout_line",
    "reconstruct_points",
    "tessellate",
    "text_to_region",
    "winding_sum",
]
