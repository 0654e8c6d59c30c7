"""Unit tests for glyph composition."""

import pytest
from shapely.geometry import box

from textshape.core.composer import compose_glyph
from textshape.core.region import ShapelyRegionEngine
from textshape.domain import Contour, Point


def cw_box(x0: float, y0: float, x1: float, y1: float) -> Contour:
    """Outer (clockwise) rectangle contour."""
    return Contour(points=[Point(x0, y0), Point(x0, y1), Point(x1, y1), Point(x1, y0)])


def ccw_box(x0: float, y0: float, x1: float, y1: float) -> Contour:
    """Hole (counter-clockwise) rectangle contour."""
    return Contour(points=[Point(x0, y0), Point(x1, y0), Point(x1, y1), Point(x0, y1)])


class RecordingEngine(ShapelyRegionEngine):
    """Shapely engine that records the boolean operations applied."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def union(self, a, b):
        self.calls.append("union")
        return super().union(a, b)

    def difference(self, a, b):
        self.calls.append("difference")
        return super().difference(a, b)


@pytest.fixture
def engine() -> ShapelyRegionEngine:
    return ShapelyRegionEngine()


class TestComposeGlyph:
    """Tests for compose_glyph."""

    def test_no_contours_is_empty(self, engine: ShapelyRegionEngine) -> None:
        region = compose_glyph([], engine)
        assert engine.is_empty(region)

    def test_empty_glyph_is_union_identity(self, engine: ShapelyRegionEngine) -> None:
        empty = compose_glyph([], engine)
        square = box(0, 0, 10, 10)
        assert engine.union(empty, square).equals(square)
        assert engine.union(square, empty).equals(square)

    def test_single_outer_contour(self, engine: ShapelyRegionEngine) -> None:
        region = compose_glyph([cw_box(0, 0, 10, 20)], engine)
        assert region.area == pytest.approx(200.0)
        assert region.bounds == (0, 0, 10, 20)

    def test_hole_is_subtracted(self, engine: ShapelyRegionEngine) -> None:
        region = compose_glyph([cw_box(0, 0, 10, 10), ccw_box(2, 2, 8, 8)], engine)
        assert region.area == pytest.approx(100.0 - 36.0)
        assert not region.contains(box(4, 4, 6, 6))

    def test_two_outer_contours_are_unioned(self, engine: ShapelyRegionEngine) -> None:
        region = compose_glyph([cw_box(0, 0, 10, 10), cw_box(20, 0, 30, 10)], engine)
        assert region.area == pytest.approx(200.0)

    def test_operations_follow_source_order(self) -> None:
        engine = RecordingEngine()
        compose_glyph(
            [cw_box(0, 0, 10, 10), ccw_box(2, 2, 8, 8), cw_box(20, 0, 30, 10)],
            engine,
        )
        assert engine.calls == ["union", "difference", "union"]

    def test_hole_before_outer_is_not_reordered(self, engine: ShapelyRegionEngine) -> None:
        """A hole listed first carves nothing; fonts must list outers first."""
        region = compose_glyph([ccw_box(2, 2, 8, 8), cw_box(0, 0, 10, 10)], engine)
        assert region.area == pytest.approx(100.0)

    def test_degenerate_contour_is_identity(self) -> None:
        engine = RecordingEngine()
        region = compose_glyph(
            [cw_box(0, 0, 10, 10), Contour(points=[Point(5, 5)])], engine
        )
        assert region.area == pytest.approx(100.0)
        assert engine.calls == ["union"]
