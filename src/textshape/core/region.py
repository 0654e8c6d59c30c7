"""Planar regions backed by shapely geometries."""

from collections.abc import Iterable, Sequence

from shapely import affinity
from shapely.geometry import Polygon
from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union


class ShapelyRegionEngine:
    """RegionEngine implementation over shapely polygons.

    The empty region is an empty Polygon. Results of boolean operations may
    be any polygonal shapely geometry.
    """

    def empty(self) -> BaseGeometry:
        return Polygon()

    def is_empty(self, region: BaseGeometry | None) -> bool:
        return region is None or region.is_empty

    def polygon_to_region(self, vertices: Sequence[tuple[float, float]]) -> BaseGeometry:
        """Build a region from a closed vertex loop.

        Fewer than three vertices give the empty region. Self-intersecting
        loops are repaired with a zero-width buffer.
        """
        if len(vertices) < 3:
            return Polygon()
        polygon = Polygon(vertices)
        if not polygon.is_valid:
            polygon = polygon.buffer(0)
        return polygon

    def union(self, a: BaseGeometry, b: BaseGeometry) -> BaseGeometry:
        if self.is_empty(a):
            return b
        if self.is_empty(b):
            return a
        return a.union(b)

    def union_all(self, regions: Iterable[BaseGeometry]) -> BaseGeometry:
        parts = [r for r in regions if not self.is_empty(r)]
        if not parts:
            return Polygon()
        return unary_union(parts)

    def difference(self, a: BaseGeometry, b: BaseGeometry) -> BaseGeometry:
        if self.is_empty(a) or self.is_empty(b):
            return a
        return a.difference(b)

    def translate(self, region: BaseGeometry, dx: float, dy: float) -> BaseGeometry:
        if self.is_empty(region):
            return region
        return affinity.translate(region, xoff=dx, yoff=dy)

    def center_and_scale(self, region: BaseGeometry, factor: float) -> BaseGeometry:
        """Move the bounding-box centre to the origin, then scale about it."""
        if self.is_empty(region):
            return region
        min_x, min_y, max_x, max_y = region.bounds
        centered = affinity.translate(
            region,
            xoff=-(min_x + max_x) / 2.0,
            yoff=-(min_y + max_y) / 2.0,
        )
        return affinity.scale(centered, xfact=factor, yfact=factor, origin=(0.0, 0.0))

    def bounds(self, region: BaseGeometry) -> tuple[float, float, float, float]:
        if self.is_empty(region):
            return (0.0, 0.0, 0.0, 0.0)
        return tuple(region.bounds)  # type: ignore[return-value]
