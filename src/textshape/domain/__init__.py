"""Domain models for textshape.

Key classes:
- Point: A 2D outline point with curve metadata
- Contour: A closed loop of outline points
- Polygon: A tessellated contour
- Winding: Outer/hole composition tag
- GlyphOutline: A glyph's contours and advance width
- Text: A string with horizontal alignment
- LayoutCursor: Running offset during layout
"""

from textshape.domain.contour import Contour, Point, PointType, Polygon, Winding
from textshape.domain.glyph import GlyphOutline
from textshape.domain.text import Alignment, LayoutCursor, Text

__all__: list[str] = [
    # Enums
    "Alignment",
    "PointType",
    "Winding",
    # Core types
    "Contour",
    "GlyphOutline",
    "LayoutCursor",
    "Point",
    "Polygon",
    "Text",
]
