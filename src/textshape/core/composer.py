"""Glyph composition from contours.

Contours are folded left to right in source order: outer contours are
unioned into the accumulator, holes are subtracted from it. Fonts are
assumed to list each outer contour before the holes it contains; no
containment analysis is done.
"""

import logging
from collections.abc import Sequence

from textshape.core.contour_builder import build_contour
from textshape.core.protocols import Region, RegionEngine
from textshape.domain.contour import Contour, Winding

logger = logging.getLogger(__name__)


def compose_glyph(
    contours: Sequence[Contour],
    engine: RegionEngine,
    tolerance: float = 0.5,
    max_depth: int = 8,
) -> Region:
    """Fold a glyph's contours into one region.

    Args:
        contours: The glyph's contours in source order
        engine: Region operations
        tolerance: Curve flattening tolerance in font units
        max_depth: Subdivision limit per curve segment

    Returns:
        The glyph region; the empty region if the glyph has no ink
    """
    region = engine.empty()

    for n, contour in enumerate(contours):
        polygon, winding = build_contour(contour.points, tolerance, max_depth)
        if polygon.is_degenerate:
            logger.debug("Skipping degenerate contour %d (%d points)", n, len(contour))
            continue

        shape = engine.polygon_to_region(polygon.vertices)
        if winding is Winding.OUTER:
            region = engine.union(region, shape)
        else:
            region = engine.difference(region, shape)

    return region
