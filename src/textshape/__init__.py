"""textshape - Convert text set in a font into a single 2D region.

textshape reads a font's quadratic glyph outlines, turns each glyph into a
region by unioning outer contours and subtracting holes, lays out the text
with kerning, line spacing and alignment, and normalizes the result to a
requested height.

Example:
    >>> from textshape import Text, load_font, text_to_region
    >>> with load_font("Roboto-Regular.ttf") as font:
    ...     region = text_to_region(font, Text("Hello"), height=10.0)
"""

from textshape.core import ShapelyRegionEngine, text_to_region
from textshape.domain import Alignment, Text
from textshape.exceptions import FontLoadError, GlyphLoadError, TextShapeError
from textshape.io import FontReader, load_font

__version__ = "0.1.0"

__all__ = [
    "Alignment",
    "FontLoadError",
    "FontReader",
    "GlyphLoadError",
    "ShapelyRegionEngine",
    "Text",
    "TextShapeError",
    "__version__",
    "load_font",
    "text_to_region",
]
