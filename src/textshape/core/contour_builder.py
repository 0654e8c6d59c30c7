"""Contour reconstruction from quadratic outline points.

TrueType outlines store quadratic curves as runs of on-curve and off-curve
points. Two consecutive off-curve points imply an on-curve point at their
midpoint. This module restores those implicit points, tessellates the curve
segments into a closed polygon and derives the contour's winding tag.
"""

from collections.abc import Sequence

from textshape.core._bezier import flatten_quadratic
from textshape.domain.contour import Point, Polygon, Winding


def _traverse(points: Sequence[Point]) -> tuple[list[Point], float]:
    """Single pass over a contour: implicit points and winding sum.

    The rolling previous point starts at the contour's last point so that the
    closing edge is treated like every other edge.
    """
    reconstructed: list[Point] = []
    total = 0.0
    previous = points[-1]

    for point in points:
        if not point.on_curve and not previous.on_curve:
            reconstructed.append(point.midpoint(previous))
        reconstructed.append(point)
        total += (point.x - previous.x) * (point.y + previous.y)
        previous = point

    return reconstructed, total


def reconstruct_points(points: Sequence[Point]) -> list[Point]:
    """Return the contour's points with implicit on-curve points inserted.

    Args:
        points: Ordered outline points of one contour

    Returns:
        Points in which no two consecutive points (cyclically) are off-curve
    """
    if not points:
        return []
    return _traverse(points)[0]


def winding_sum(points: Sequence[Point]) -> float:
    """Accumulate (x_i - x_prev) * (y_i + y_prev) over a contour.

    Positive for clockwise traversal in a y-up coordinate system, which is
    the TrueType convention for outer contours.
    """
    if not points:
        return 0.0
    return _traverse(points)[1]


def tessellate(
    points: Sequence[Point],
    tolerance: float,
    max_depth: int = 8,
) -> list[tuple[float, float]]:
    """Convert reconstructed points into polygon vertices.

    Args:
        points: Output of reconstruct_points (no adjacent off-curve points)
        tolerance: Maximum distance between curve and polygon
        max_depth: Subdivision limit per curve segment

    Returns:
        Closed vertex loop without a repeated closing vertex
    """
    start = next((i for i, p in enumerate(points) if p.on_curve), None)
    if start is None:
        return []

    sequence = list(points[start:]) + list(points[:start])
    n = len(sequence)
    current = sequence[0]
    vertices = [current.to_tuple()]

    k = 1
    while k <= n:
        point = sequence[k % n]
        if point.on_curve:
            if k < n:
                vertices.append(point.to_tuple())
            current = point
            k += 1
            continue

        end = sequence[(k + 1) % n]
        segment = flatten_quadratic(
            current.to_tuple(), point.to_tuple(), end.to_tuple(), tolerance, max_depth
        )
        if k + 1 >= n:
            # The segment closes onto the first vertex
            segment = segment[:-1]
        vertices.extend(segment)
        current = end
        k += 2

    return vertices


def build_contour(
    points: Sequence[Point],
    tolerance: float = 0.5,
    max_depth: int = 8,
) -> tuple[Polygon, Winding]:
    """Build the closed polygon and winding tag of one contour.

    Contours with fewer than two points are degenerate and give an empty
    polygon, which the composer treats as an identity element.

    Args:
        points: Ordered outline points of one contour
        tolerance: Curve flattening tolerance in font units
        max_depth: Subdivision limit per curve segment

    Returns:
        Tuple of (polygon, winding)
    """
    if len(points) < 2:
        return Polygon(), Winding.HOLE

    reconstructed, total = _traverse(points)
    vertices = tessellate(reconstructed, tolerance, max_depth)
    winding = Winding.OUTER if total > 0 else Winding.HOLE
    return Polygon(tuple(vertices)), winding
