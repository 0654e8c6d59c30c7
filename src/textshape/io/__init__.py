"""Font and region I/O for textshape.

This module handles reading fonts using fonttools and writing composed
regions. It keeps fonttools details out of the layout core.

Key responsibilities:
- Load TTF/OTF fonts
- Convert glyph outlines (TrueType and CFF) to domain contours
- Answer glyph index, metric and kerning queries
- Export regions as SVG or WKT

Key classes:
- FontReader: Glyph source backed by a TTFont
"""

from textshape.io.reader import FontReader, load_font
from textshape.io.writer import region_to_svg, region_to_wkt, write_region

__all__ = [
    "FontReader",
    "load_font",
    "region_to_svg",
    "region_to_wkt",
    "write_region",
]
