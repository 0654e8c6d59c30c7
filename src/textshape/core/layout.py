"""Line and text layout.

A line is laid out by folding a LayoutCursor over its characters, adding
kerning and advance widths. Lines are then shifted by their alignment,
stacked downwards by the font's line advance, unioned, and normalized so
that one line advance maps to the requested height.
"""

from dataclasses import dataclass, field

from textshape.config import CurveConfig, TextShapeSettings, get_default_settings
from textshape.core.composer import compose_glyph
from textshape.core.protocols import GlyphSource, Region, RegionEngine
from textshape.core.region import ShapelyRegionEngine
from textshape.domain.text import LayoutCursor, Text
from textshape.exceptions import FontError, GlyphLoadError
from textshape.utils.logging import LayoutLogger


@dataclass
class LineLayout:
    """Positioned glyph regions of one line and its horizontal extent."""

    regions: list[Region] = field(default_factory=list)
    advance: float = 0.0


def layout_line(
    font: GlyphSource,
    line: str,
    engine: RegionEngine,
    curve: CurveConfig | None = None,
    layout_logger: LayoutLogger | None = None,
) -> LineLayout:
    """Lay out one line of text starting at x = 0.

    Glyphs without ink are not emitted but still advance the cursor.

    Args:
        font: Font metrics and outlines
        line: Characters of the line (no line breaks)
        engine: Region operations
        curve: Curve tessellation settings
        layout_logger: Optional progress logger

    Returns:
        LineLayout with the positioned regions and the final cursor position

    Raises:
        GlyphLoadError: If any glyph outline cannot be loaded
    """
    curve = curve or CurveConfig()
    tolerance = curve.get_flatten_tolerance(font.units_per_em)

    cursor = LayoutCursor()
    previous: int | None = None
    regions: list[Region] = []

    for char in line:
        index = font.glyph_index(char)
        cursor = cursor.advance(font.kerning(previous, index))

        try:
            outline = font.load_outline(index)
        except GlyphLoadError as e:
            if layout_logger is not None:
                layout_logger.log_glyph_error(char, e)
            raise

        region = compose_glyph(
            outline.contours, engine, tolerance, curve.max_subdivision_depth
        )
        if engine.is_empty(region):
            if layout_logger is not None:
                layout_logger.log_empty_glyph(char, index)
        else:
            regions.append(engine.translate(region, cursor.x, 0.0))
            if layout_logger is not None:
                layout_logger.log_glyph(char, index, len(outline.contours))

        cursor = cursor.advance(font.advance_width(index))
        previous = index

    return LineLayout(regions=regions, advance=cursor.x)


def text_to_region(
    font: GlyphSource,
    text: Text,
    height: float,
    engine: RegionEngine | None = None,
    settings: TextShapeSettings | None = None,
    layout_logger: LayoutLogger | None = None,
) -> Region:
    """Convert a text object into one normalized region.

    The result is centred on the origin and scaled by height / line advance,
    so a single line advance of the font measures `height`.

    Args:
        font: Font metrics and outlines
        text: Text and alignment
        height: Target height of one line advance
        engine: Region operations (shapely by default)
        settings: Application settings (defaults if None)
        layout_logger: Optional progress logger

    Returns:
        The composed region; empty if the text has no ink

    Raises:
        ValueError: If height is not positive
        FontError: If the font reports a non-positive line advance
        GlyphLoadError: If any glyph outline cannot be loaded
    """
    if height <= 0:
        raise ValueError(f"height must be positive, got {height}")

    engine = engine or ShapelyRegionEngine()
    settings = settings or get_default_settings()

    line_height = font.advance_height()
    if line_height <= 0:
        raise FontError(f"Font line advance must be positive, got {line_height}")
    cursor = LayoutCursor()
    placed: list[Region] = []

    for line_no, line in enumerate(text.lines()):
        line_layout = layout_line(font, line, engine, settings.curve, layout_logger)
        shift = text.alignment.shift(line_layout.advance)
        placed.extend(
            engine.translate(region, shift, cursor.y) for region in line_layout.regions
        )
        if layout_logger is not None:
            layout_logger.log_line(line_no, line_layout.advance, shift, cursor.y)
        cursor = cursor.next_line(line_height)

    return engine.center_and_scale(engine.union_all(placed), height / line_height)
