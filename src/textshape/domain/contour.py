"""Core geometric types for glyph outlines.

This module defines the geometric types that flow through the contour builder:
- Point: A 2D outline point with curve type information
- Contour: One closed loop of outline points
- Polygon: The tessellated, closed vertex loop built from a contour
- Winding: Composition tag telling whether a contour adds or carves ink
"""

from dataclasses import dataclass, field
from enum import Enum, auto


class Winding(Enum):
    """Composition directive derived from a contour's traversal order.

    OUTER contours are unioned into a glyph, HOLE contours are subtracted.
    The tag follows the source font's contour direction convention and is
    not a general clockwise/counter-clockwise classification.
    """

    OUTER = auto()
    HOLE = auto()


class PointType(Enum):
    """Point type on a quadratic contour.

    - ON_CURVE: Point on the actual outline
    - OFF_CURVE_QUAD: Quadratic Bezier control point
    """

    ON_CURVE = auto()
    OFF_CURVE_QUAD = auto()


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space with curve metadata.

    Attributes:
        x: X coordinate in font units
        y: Y coordinate in font units
        point_type: Type of point (on-curve or control point)
    """

    x: float
    y: float
    point_type: PointType = PointType.ON_CURVE

    @property
    def on_curve(self) -> bool:
        """True if the point lies on the outline."""
        return self.point_type == PointType.ON_CURVE

    def midpoint(self, other: "Point") -> "Point":
        """Return the on-curve point halfway between this point and another."""
        return Point((self.x + other.x) * 0.5, (self.y + other.y) * 0.5)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)


@dataclass
class Contour:
    """One closed loop of a glyph outline.

    The point sequence is cyclic: the last point connects back to the first.

    Attributes:
        points: Ordered outline points
    """

    points: list[Point] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.points)


@dataclass(frozen=True)
class Polygon:
    """A closed loop of vertices approximating a contour.

    The first and last vertices are implicitly connected.

    Attributes:
        vertices: Ordered (x, y) vertices
    """

    vertices: tuple[tuple[float, float], ...] = ()

    def __len__(self) -> int:
        return len(self.vertices)

    @property
    def is_degenerate(self) -> bool:
        """True if the polygon cannot enclose an area."""
        return len(self.vertices) < 3

