"""Glyph outline representation.

A GlyphOutline is what the font collaborator hands to the composer: the
glyph's contours in source order. Metrics are queried from the font itself.
"""

from dataclasses import dataclass, field

from textshape.domain.contour import Contour


@dataclass
class GlyphOutline:
    """Outline of a single glyph.

    Attributes:
        index: Glyph index in the font
        name: Glyph name (e.g., "A", "space", ".notdef")
        contours: Contours in source order
    """

    index: int
    name: str
    contours: list[Contour] = field(default_factory=list)
