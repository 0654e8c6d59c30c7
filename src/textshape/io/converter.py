"""Converters from fontTools outline data to domain models.

TrueType glyphs are read directly as quadratic points with on-curve flags.
CFF glyphs are drawn through a Cu2QuPen into a TTGlyphPen, which converts
their cubic curves to quadratic ones and reverses the contour direction to
the TrueType convention, so both formats reach the contour builder in the
same shape.
"""

from collections.abc import Sequence
from typing import Any

from fontTools.pens.cu2quPen import Cu2QuPen
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib import TTFont

from textshape.domain.contour import Contour, Point, PointType

# Bit 0 of a glyf point flag marks an on-curve point
FLAG_ON_CURVE = 0x01


def to_point(coordinate: Sequence[float], flag: int) -> Point:
    """Convert a fontTools coordinate and its flag byte to a Point."""
    point_type = PointType.ON_CURVE if flag & FLAG_ON_CURVE else PointType.OFF_CURVE_QUAD
    return Point(float(coordinate[0]), float(coordinate[1]), point_type)


def split_contours(
    coordinates: Sequence[Sequence[float]],
    end_points: Sequence[int],
    flags: Sequence[int],
) -> list[Contour]:
    """Split a glyph's flat point array into contours.

    Args:
        coordinates: All points of the glyph
        end_points: Index of the last point of each contour
        flags: Point flags, parallel to coordinates

    Returns:
        Contours in source order
    """
    contours: list[Contour] = []
    start = 0
    for end in end_points:
        points = [to_point(coordinates[i], flags[i]) for i in range(start, end + 1)]
        contours.append(Contour(points=points))
        start = end + 1
    return contours


def glyf_glyph_to_contours(glyph: Any, glyf_table: Any) -> list[Contour]:
    """Extract contours from a TrueType glyph.

    Composite glyphs are resolved to their component outlines by fontTools.
    """
    if glyph.numberOfContours == 0:
        return []
    coordinates, end_points, flags = glyph.getCoordinates(glyf_table)
    return split_contours(coordinates, end_points, flags)


def cff_glyph_to_contours(glyph_name: str, font: TTFont, max_err: float) -> list[Contour]:
    """Extract quadratic contours from a CFF glyph.

    Args:
        glyph_name: Name of the glyph
        font: The TTFont object
        max_err: Maximum cubic-to-quadratic approximation error in font units

    Returns:
        Contours in source order
    """
    glyph_set = font.getGlyphSet()
    tt_pen = TTGlyphPen(glyph_set)  # type: ignore[arg-type]
    glyph_set[glyph_name].draw(Cu2QuPen(tt_pen, max_err, reverse_direction=True))
    glyph = tt_pen.glyph()
    if glyph.numberOfContours == 0:
        return []
    coordinates, end_points, flags = glyph.getCoordinates(None)
    return split_contours(coordinates, end_points, flags)
