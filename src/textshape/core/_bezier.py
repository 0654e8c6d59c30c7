"""Internal quadratic Bezier flattening.

This is an internal module containing the subdivision helper used by the
contour builder. Not intended for public use.
"""

import math

Vertex = tuple[float, float]


def flatten_quadratic(
    p0: Vertex,
    p1: Vertex,
    p2: Vertex,
    tolerance: float,
    max_depth: int = 8,
) -> list[Vertex]:
    """Flatten a quadratic Bezier curve using recursive subdivision.

    The largest distance between a quadratic curve and its chord is half the
    distance from the control point to the chord midpoint, which is used as
    the flatness test.

    Args:
        p0: Start point (on-curve)
        p1: Control point (off-curve)
        p2: End point (on-curve)
        tolerance: Maximum distance from true curve
        max_depth: Remaining subdivision levels

    Returns:
        Vertices approximating the curve, excluding p0 and ending with p2
    """
    chord_mid_x = (p0[0] + p2[0]) / 2
    chord_mid_y = (p0[1] + p2[1]) / 2
    deviation = math.hypot(p1[0] - chord_mid_x, p1[1] - chord_mid_y) / 2

    if deviation <= tolerance or max_depth <= 0:
        return [p2]

    # De Casteljau split at t=0.5
    q1 = ((p0[0] + p1[0]) / 2, (p0[1] + p1[1]) / 2)
    r1 = ((p1[0] + p2[0]) / 2, (p1[1] + p2[1]) / 2)
    mid = ((q1[0] + r1[0]) / 2, (q1[1] + r1[1]) / 2)

    left = flatten_quadratic(p0, q1, mid, tolerance, max_depth - 1)
    right = flatten_quadratic(mid, r1, p2, tolerance, max_depth - 1)
    return left + right
